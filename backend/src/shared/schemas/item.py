"""
Item Schemas

Request/response models for the items resource.

Create vs. Update:
==================
    ItemCreate  ← POST and PUT (full representation, defaults fill the gaps)
    ItemUpdate  ← PATCH (every field optional; only fields sent are applied)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, computed_field, field_validator

from src.shared.schemas.common import BaseSchema


def _clean_tags(tags: list[str]) -> list[str]:
    """Strip tags, drop blanks and repeats, keep first-seen order."""
    cleaned: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


class ItemBase(BaseModel):
    """Fields shared by item requests."""

    name: str = Field(min_length=1, max_length=255, examples=["Foo"])
    description: Optional[str] = Field(default=None, max_length=1000)
    price: float = Field(gt=0, examples=[35.4])
    tax: Optional[float] = Field(default=None, ge=0, examples=[3.2])
    tags: list[str] = Field(default_factory=list)
    is_offer: bool = False

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags: list[str]) -> list[str]:
        return _clean_tags(tags)


class ItemCreate(ItemBase):
    """Schema for creating or replacing an item."""


class ItemUpdate(BaseModel):
    """
    Schema for partially updating an item.

    Use ``model_dump(exclude_unset=True)`` to get only the fields the client sent.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    price: Optional[float] = Field(default=None, gt=0)
    tax: Optional[float] = Field(default=None, ge=0)
    tags: Optional[list[str]] = None
    is_offer: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags: Optional[list[str]]) -> Optional[list[str]]:
        return None if tags is None else _clean_tags(tags)


class ItemResponse(BaseSchema):
    """Schema for item response."""

    id: UUID
    owner_id: UUID
    name: str
    description: Optional[str] = None
    price: float
    tax: Optional[float] = None
    tags: list[str]
    is_offer: bool
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def price_with_tax(self) -> float:
        return round(self.price + (self.tax or 0.0), 2)
