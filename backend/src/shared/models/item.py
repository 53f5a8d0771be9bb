"""
Item Entity Model

The canonical CRUD resource: a priced item owned by a user.

SAMPLE ITEM RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 0b6f1c7e-4a52-4d0b-9a3c-7f0d4f6f2a11                      │
│ owner_id         │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Foo"                                                     │
│ description      │ "A very nice Item"                                        │
│ price            │ 35.4                                                      │
│ tax              │ 3.2                                                       │
│ tags             │ ["tools", "garden"]                                       │
│ is_offer         │ false                                                     │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import JSON, Boolean, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from src.shared.models.user import User


class Item(Base, TimestampMixin):
    """
    Item owned by a single user.

    Attributes:
        id: Unique identifier (UUID v4)
        owner_id: Owning user
        name: Display name
        description: Optional free text
        price: Unit price, always positive
        tax: Optional tax amount added to price
        tags: Ordered, de-duplicated labels
        is_offer: Whether the item is currently on offer
    """

    __tablename__ = "items"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    tax: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_offer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    owner: Mapped["User"] = relationship("User", back_populates="items")

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name={self.name}, price={self.price})>"
