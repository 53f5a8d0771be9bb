"""
Note Repository

Database operations specific to the Note model. Soft-deleted notes are
invisible to every query here.

Common Operations:
==================
- get_live()               → Note by id, unless soft deleted
- get_for_owner()          → Live note by id, only if owned by the given user
- list_for_owner()         → Paginated live notes with optional status filter
- duplicate_candidates()   → The owner's older live notes, oldest first
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.repositories.base import BaseRepository
from src.shared.models.enums import NoteStatus
from src.shared.models.note import Note


class NoteRepository(BaseRepository[Note]):
    """Repository for Note database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Note, session)

    async def get_live(self, note_id: UUID) -> Optional[Note]:
        result = await self.session.execute(
            select(Note).where(Note.id == note_id, Note.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get_for_owner(self, owner_id: UUID, note_id: UUID) -> Optional[Note]:
        result = await self.session.execute(
            select(Note).where(
                Note.id == note_id,
                Note.owner_id == owner_id,
                Note.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def list_for_owner(
        self,
        owner_id: UUID,
        *,
        status: Optional[NoteStatus] = None,
        offset: int = 0,
        limit: int = 20,
    ) -> tuple[list[Note], int]:
        """
        One page of the owner's live notes, newest first, plus the total.
        """
        # deleted_at == None compiles to IS NULL
        filters: dict[str, Any] = {"owner_id": owner_id, "deleted_at": None}
        if status is not None:
            filters["status"] = status

        notes = await self.list(
            offset=offset,
            limit=limit,
            filters=filters,
            order_by="created_at",
            order_desc=True,
        )
        total = await self.count(filters=filters)
        return notes, total

    async def duplicate_candidates(self, note: Note) -> list[Note]:
        """
        Live notes of the same owner that a note may duplicate.

        Only notes created no later than ``note`` qualify, and never one
        already marked as a duplicate of it. Ordered oldest first so the
        earliest copy wins ties.
        """
        result = await self.session.execute(
            select(Note)
            .where(
                Note.owner_id == note.owner_id,
                Note.id != note.id,
                Note.deleted_at.is_(None),
                Note.created_at <= note.created_at,
                or_(Note.duplicate_of_id.is_(None), Note.duplicate_of_id != note.id),
            )
            .order_by(Note.created_at.asc(), Note.id)
        )
        return list(result.scalars().all())
