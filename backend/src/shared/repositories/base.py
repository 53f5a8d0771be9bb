"""
Base Repository

Generic CRUD shared by the user, item and note repositories.

    class NoteRepository(BaseRepository[Note]): ...

Methods flush but never commit. The request's get_db() dependency commits
at the end of a request, and the note pipeline commits each of its stages
itself.
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from src.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    def _where(self, query: Select, filters: Optional[dict[str, Any]]) -> Select:
        """Equality filters; a None value compiles to IS NULL. Unknown columns are ignored."""
        for field, value in (filters or {}).items():
            column = getattr(self.model, field, None)
            if column is not None:
                query = query.where(column == value)
        return query

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        return await self.session.get(self.model, record_id)

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        One page of records.

        Rows with equal ``order_by`` values are ordered by id so pages
        never overlap.
        """
        query = self._where(select(self.model), filters)

        column = getattr(self.model, order_by, None) if order_by else None
        if column is not None:
            query = query.order_by(column.desc() if order_desc else column.asc())
        query = query.order_by(self.model.id).offset(offset).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        query = self._where(select(sql_count()).select_from(self.model), filters)
        return (await self.session.scalar(query)) or 0

    async def create(self, **kwargs: Any) -> ModelType:
        """Insert and reload, so created_at and other server defaults are populated."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """
        Write every given field, None included.

        Partial updates are the caller's choice of keys; updated_at is
        reloaded afterwards.
        """
        for field, value in kwargs.items():
            if hasattr(instance, field):
                setattr(instance, field, value)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        await self.session.delete(instance)
        await self.session.flush()

    async def soft_delete(self, instance: ModelType) -> ModelType:
        """Stamp deleted_at; for models with SoftDeleteMixin."""
        instance.deleted_at = datetime.now(timezone.utc)
        await self.session.flush()
        return instance
