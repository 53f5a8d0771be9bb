"""
User Entity Model

An API account. Owns items and notes; deleting a user deletes both.

    users
    ├── email          lower-cased, unique
    ├── password_hash  bcrypt
    ├── full_name      optional, editable via PATCH /users/me
    └── is_active      false → every authenticated call answers 403
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from src.shared.models.item import Item
    from src.shared.models.note import Note


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(Text)
    full_name: Mapped[Optional[str]] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"))

    items: Mapped[list["Item"]] = relationship(back_populates="owner", cascade="all, delete-orphan")
    notes: Mapped[list["Note"]] = relationship(back_populates="owner", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User {self.email}>"
