"""
Item Repository

Database operations specific to the Item model.

Common Operations:
==================
- get_for_owner()  → Item by id, only if owned by the given user
- search()         → Filtered, sorted, paginated items of one owner
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from src.shared.repositories.base import BaseRepository
from src.shared.models.item import Item


class ItemRepository(BaseRepository[Item]):
    """Repository for Item database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Item, session)

    async def get_for_owner(self, owner_id: UUID, item_id: UUID) -> Optional[Item]:
        """
        Get an item scoped to its owner.

        Returns:
            The item, or None when it does not exist or belongs to someone else
        """
        result = await self.session.execute(
            select(Item).where(Item.id == item_id, Item.owner_id == owner_id)
        )
        return result.scalar_one_or_none()

    async def search(
        self,
        owner_id: UUID,
        *,
        q: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        is_offer: Optional[bool] = None,
        sort_by: str = "created_at",
        sort_desc: bool = True,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Item], int]:
        """
        Search an owner's items.

        Args:
            owner_id: Owner whose items are searched
            q: Case-insensitive substring of name or description
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound
            is_offer: Filter on offer flag
            sort_by: Column to order by
            sort_desc: Descending order when True
            offset: Rows to skip
            limit: Rows to return

        Returns:
            Tuple of (items on this page, total matching items)

        SQL Generated:
            SELECT * FROM items
            WHERE owner_id = :owner AND (lower(name) LIKE '%q%' ESCAPE '/' OR ...)
            ORDER BY price DESC, id
            OFFSET 0 LIMIT 20
        """
        conditions = [Item.owner_id == owner_id]
        if q:
            conditions.append(
                or_(
                    Item.name.icontains(q, autoescape=True),
                    Item.description.icontains(q, autoescape=True),
                )
            )
        if min_price is not None:
            conditions.append(Item.price >= min_price)
        if max_price is not None:
            conditions.append(Item.price <= max_price)
        if is_offer is not None:
            conditions.append(Item.is_offer == is_offer)

        order_field = getattr(Item, sort_by)
        query = (
            select(Item)
            .where(*conditions)
            .order_by(order_field.desc() if sort_desc else order_field.asc(), Item.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)

        total = await self.session.execute(
            select(sql_count()).select_from(Item).where(*conditions)
        )

        return list(result.scalars().all()), total.scalar() or 0
