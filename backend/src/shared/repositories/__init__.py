"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]      ← Generic CRUD operations
         │
         ├── UserRepository        ← Lookup by email
         ├── ItemRepository        ← Owner-scoped search
         └── NoteRepository        ← Live (non soft-deleted) notes

Usage Example:
==============
    from src.shared.repositories import ItemRepository

    repo = ItemRepository(db)
    items, total = await repo.search(owner_id, q="garden", limit=10)
"""

from src.shared.repositories.base import BaseRepository
from src.shared.repositories.user_repository import UserRepository
from src.shared.repositories.item_repository import ItemRepository
from src.shared.repositories.note_repository import NoteRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ItemRepository",
    "NoteRepository",
]
