"""
Primer SQLAlchemy Models

This package contains all database models for the Primer application.

Model Hierarchy:
================
    User
       ├── items (Item[])
       └── notes (Note[])
              └── duplicate_of_id → Note

Models Overview:
================
- Base: Base class and mixins (timestamps, soft delete)
- User: Registered API user
- Item: Priced item, the canonical CRUD resource
- Note: Markdown study note with outline and duplicate analysis

Usage:
======
    from src.shared.models import User, Item, Note
"""

from src.shared.models.base import Base, TimestampMixin, SoftDeleteMixin
from src.shared.models.enums import (
    NoteStatus,
    StatusCategory,
    SortOrder,
    ItemSortField,
)
from src.shared.models.user import User
from src.shared.models.item import Item
from src.shared.models.note import Note

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
    # Enums
    "NoteStatus",
    "StatusCategory",
    "SortOrder",
    "ItemSortField",
    # Models
    "User",
    "Item",
    "Note",
]
