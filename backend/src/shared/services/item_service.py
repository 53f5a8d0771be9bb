"""
Item Service

Business logic for the items resource.

Ownership:
==========
Every operation is scoped to the calling user. An item owned by somebody
else is reported exactly like a missing one (404), so item ids of other
users cannot be discovered.

Usage:
======
    service = ItemService(db)
    item = await service.create_item(owner_id, ItemCreate(name="Foo", price=35.4))
    page = await service.list_items(owner_id, q="foo", page=1, per_page=20)
"""

from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.core.exceptions import ItemNotFoundError, ValidationError
from src.shared.core.logging import logger
from src.shared.models.enums import ItemSortField, SortOrder
from src.shared.models.item import Item
from src.shared.repositories.item_repository import ItemRepository
from src.shared.schemas.item import ItemCreate, ItemUpdate


# Fields a PATCH may not clear
REQUIRED_ITEM_FIELDS = ("name", "price", "tags", "is_offer")


@dataclass
class PaginatedItems:
    """Paginated list of items."""

    items: list[Item]
    total: int
    page: int
    per_page: int


class ItemService:
    """
    Service for item-related business logic.

    Handles:
    - Creating, replacing, patching and deleting items
    - Searching with price bounds, text query and sorting
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ItemRepository(session)

    async def create_item(self, owner_id: UUID, data: ItemCreate) -> Item:
        item = await self.repo.create(owner_id=owner_id, **data.model_dump())
        logger.info("Item created", item_id=str(item.id), owner_id=str(owner_id))
        return item

    async def get_item(self, owner_id: UUID, item_id: UUID) -> Item:
        """
        Raises:
            ItemNotFoundError: Missing, or owned by another user
        """
        item = await self.repo.get_for_owner(owner_id, item_id)
        if item is None:
            raise ItemNotFoundError(str(item_id))
        return item

    async def list_items(
        self,
        owner_id: UUID,
        *,
        page: int,
        per_page: int,
        q: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        is_offer: Optional[bool] = None,
        sort_by: str = ItemSortField.CREATED_AT.value,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> PaginatedItems:
        """
        Search the owner's items.

        Raises:
            ValidationError: Unknown sort field, or min_price above max_price
        """
        allowed = [field.value for field in ItemSortField]
        if sort_by not in allowed:
            raise ValidationError(
                f"Cannot sort by '{sort_by}'",
                details={"allowed": allowed},
            )
        if min_price is not None and max_price is not None and min_price > max_price:
            raise ValidationError(
                "min_price must not exceed max_price",
                details={"min_price": min_price, "max_price": max_price},
            )

        items, total = await self.repo.search(
            owner_id,
            q=q.strip() if q else None,
            min_price=min_price,
            max_price=max_price,
            is_offer=is_offer,
            sort_by=sort_by,
            sort_desc=sort_order == SortOrder.DESC,
            offset=(page - 1) * per_page,
            limit=per_page,
        )
        return PaginatedItems(items=items, total=total, page=page, per_page=per_page)

    async def replace_item(self, owner_id: UUID, item_id: UUID, data: ItemCreate) -> Item:
        """PUT semantics: every field is overwritten, omitted optionals reset to defaults."""
        item = await self.get_item(owner_id, item_id)
        return await self.repo.update(item, **data.model_dump())

    async def update_item(self, owner_id: UUID, item_id: UUID, data: ItemUpdate) -> Item:
        """
        PATCH semantics: only fields present in the request change.

        Raises:
            ValidationError: A required field was explicitly set to null
        """
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        cleared = [field for field in REQUIRED_ITEM_FIELDS if field in changes and changes[field] is None]
        if cleared:
            raise ValidationError(
                "Required fields cannot be null",
                details={"fields": cleared},
            )

        item = await self.get_item(owner_id, item_id)
        if not changes:
            return item
        return await self.repo.update(item, **changes)

    async def delete_item(self, owner_id: UUID, item_id: UUID) -> None:
        item = await self.get_item(owner_id, item_id)
        await self.repo.delete(item)
        logger.info("Item deleted", item_id=str(item_id), owner_id=str(owner_id))
