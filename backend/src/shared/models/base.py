"""
Declarative base and mixins.

Columns use SQLAlchemy's dialect-neutral types (Uuid, JSON, DateTime), so
one set of models serves PostgreSQL and SQLite.

    Base             dict[str, Any] annotations map to JSON (note outlines)
    TimestampMixin   created_at / updated_at
    SoftDeleteMixin  deleted_at; notes are hidden, never removed
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    type_annotation_map = {
        dict[str, Any]: JSON,
    }


class TimestampMixin:
    # created_at comes from the database; on SQLite CURRENT_TIMESTAMP has
    # second precision, so ordering by it alone is not unique
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
    )


class SoftDeleteMixin:
    """Live rows have ``deleted_at IS NULL``; repositories filter on it."""

    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None)
