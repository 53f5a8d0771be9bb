"""
Note analysis pipeline.

Runs after a note is created, as a FastAPI background task, once the
response has already been sent.

Pipeline Stages:
1. MARK: PROCESSING, committed in its own session
2. ANALYZE: outline + duplicate detection, committed as READY
3. RECOVER: if 1 or 2 raises, a fresh session records FAILED
4. NOTIFY: publish note.ready / note.failed to the owner's WebSocket subscribers

Each stage opens its own session from session_factory.
"""

from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.shared.adapters.event_broker import EventBroker, event_broker
from src.shared.core.logging import get_logger
from src.shared.db import AsyncSessionLocal
from src.shared.models.enums import NoteStatus
from src.shared.models.note import Note
from src.shared.services.note_service import NoteService


logger = get_logger("worker.notes")


@dataclass
class PipelineResult:
    """Result of note processing pipeline."""

    success: bool
    note_id: UUID
    status: Optional[NoteStatus] = None
    error_message: Optional[str] = None


def note_event(note: Note) -> dict[str, Any]:
    """WebSocket payload describing a note's analysis outcome."""
    return {
        "event": "note.ready" if note.status == NoteStatus.READY else "note.failed",
        "note_id": str(note.id),
        "status": note.status.value,
        "title": note.title,
        "headings": len(note.outline or []),
        "duplicate_of_id": str(note.duplicate_of_id) if note.duplicate_of_id else None,
        "similarity": note.similarity,
        "error_message": note.error_message,
    }


class NotePipeline:
    """
    Note processing pipeline.

    Owns its session lifecycle so it can run outside any request.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
        broker: EventBroker = event_broker,
    ) -> None:
        self.session_factory = session_factory
        self.broker = broker

    async def run(self, note_id: UUID) -> PipelineResult:
        """
        Process a note through the full pipeline.

        Returns:
            PipelineResult with the final status
        """
        try:
            async with self.session_factory() as session:
                note = await NoteService(session).start_analysis(note_id)
                await session.commit()
            if note is not None:
                async with self.session_factory() as session:
                    note = await NoteService(session).analyze_note(note_id)
                    await session.commit()
        except Exception as e:
            logger.error("Note analysis failed", note_id=str(note_id), error=str(e), exc_info=True)
            note = await self._record_failure(note_id, str(e))
            if note is None:
                return PipelineResult(success=False, note_id=note_id, error_message=str(e))

        if note is None:
            return PipelineResult(success=False, note_id=note_id, error_message="Note not found")

        delivered = await self.broker.publish(note.owner_id, note_event(note))
        logger.debug("Note event published", note_id=str(note_id), subscribers=delivered)

        return PipelineResult(
            success=note.status == NoteStatus.READY,
            note_id=note_id,
            status=note.status,
            error_message=note.error_message,
        )

    async def _record_failure(self, note_id: UUID, error_message: str) -> Optional[Note]:
        try:
            async with self.session_factory() as session:
                note = await NoteService(session).mark_failed(note_id, error_message)
                await session.commit()
                return note
        except Exception as e:
            logger.error("Could not record note failure", note_id=str(note_id), error=str(e), exc_info=True)
            return None


async def process_note(note_id: UUID) -> None:
    """Background task entry point scheduled by the notes handler."""
    await NotePipeline().run(note_id)
