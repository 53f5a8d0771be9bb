"""
Unit tests for item request/response schemas.

Tests cover:
- Field constraints on create
- Tag normalization
- exclude_unset semantics of partial updates
- Computed price_with_tax
"""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from src.shared.schemas.item import ItemCreate, ItemResponse, ItemUpdate


def _response(**overrides) -> ItemResponse:
    now = datetime.now(timezone.utc)
    data = {
        "id": uuid.uuid4(),
        "owner_id": uuid.uuid4(),
        "name": "Foo",
        "price": 35.4,
        "tax": 3.2,
        "tags": [],
        "is_offer": False,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return ItemResponse(**data)


class TestItemCreate:
    """Create/replace payloads."""

    def test_defaults(self):
        item = ItemCreate(name="Foo", price=35.4)

        assert item.description is None
        assert item.tax is None
        assert item.tags == []
        assert item.is_offer is False

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "price": 1},
            {"name": "x" * 256, "price": 1},
            {"name": "Foo", "price": 0},
            {"name": "Foo", "price": -1},
            {"name": "Foo", "price": 1, "tax": -0.5},
            {"name": "Foo", "price": 1, "description": "d" * 1001},
            {"price": 1},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            ItemCreate(**payload)

    def test_tags_are_stripped_and_deduplicated(self):
        item = ItemCreate(name="Foo", price=1, tags=[" tools ", "garden", "tools", "  "])

        assert item.tags == ["tools", "garden"]


class TestItemUpdate:
    """Partial update payloads."""

    def test_only_sent_fields_are_dumped(self):
        update = ItemUpdate(price=10)

        assert update.model_dump(exclude_unset=True) == {"price": 10}

    def test_explicit_null_is_kept(self):
        update = ItemUpdate(description=None)

        assert update.model_dump(exclude_unset=True) == {"description": None}

    def test_constraints_still_apply(self):
        with pytest.raises(ValidationError):
            ItemUpdate(price=0)


class TestItemResponse:
    """Computed fields."""

    def test_price_with_tax(self):
        assert _response(price=35.4, tax=3.2).price_with_tax == 38.6

    def test_price_without_tax(self):
        assert _response(price=10.0, tax=None).price_with_tax == 10.0

    def test_computed_field_is_serialized(self):
        assert _response().model_dump()["price_with_tax"] == 38.6
