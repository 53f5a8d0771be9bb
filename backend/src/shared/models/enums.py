"""
Enums used across the application.
"""

from enum import Enum


class NoteStatus(str, Enum):
    """Note analysis lifecycle state."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    READY = "READY"
    FAILED = "FAILED"


class StatusCategory(str, Enum):
    """Outcome class of an HTTP status code, derived from its first digit."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"


class SortOrder(str, Enum):
    """Sort direction for list endpoints."""

    ASC = "asc"
    DESC = "desc"


class ItemSortField(str, Enum):
    """Fields items can be sorted by."""

    CREATED_AT = "created_at"
    NAME = "name"
    PRICE = "price"
