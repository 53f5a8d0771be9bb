"""
Cross-cutting pieces every layer imports: structlog loggers and the
PrimerException hierarchy behind the JSON error envelope.
"""

from src.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DuplicateResourceError,
    ItemNotFoundError,
    NoteNotFoundError,
    NotFoundError,
    PayloadTooLargeError,
    PrimerException,
    ReferenceNotFoundError,
    ServiceUnavailableError,
    UserNotFoundError,
    ValidationError,
)
from src.shared.core.logging import clear_log_context, get_logger, log_context, logger

__all__ = [
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    "PrimerException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "ItemNotFoundError",
    "NoteNotFoundError",
    "ReferenceNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "PayloadTooLargeError",
    "ServiceUnavailableError",
]
