"""
Note Service

Business logic for markdown study notes.

Note Flow:
==========
    POST /notes or /notes/upload
         │
         ▼
    create_note()  → status=PENDING, content_hash, word_count
         │
         ▼  (background task, own session)
    start_analysis() → PROCESSING (committed)
         │
         ▼
    analyze_note()   → outline + duplicate search → READY
    mark_failed()    → FAILED, on a fresh session when analysis raises

Duplicate Detection:
====================
    1. Same content_hash as another live note of the owner → similarity 1.0
    2. Otherwise best word-sequence similarity ≥ DUPLICATE_SIMILARITY_THRESHOLD
    Candidates are scanned oldest first, so the earliest copy wins ties.
"""

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional
from uuid import UUID

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import settings
from src.shared.core.exceptions import NoteNotFoundError, PayloadTooLargeError, ValidationError
from src.shared.core.logging import get_logger
from src.shared.models.enums import NoteStatus
from src.shared.models.note import Note
from src.shared.repositories.note_repository import NoteRepository
from src.shared.utils.markdown import (
    Heading,
    content_fingerprint,
    derive_title,
    extract_outline,
    similarity,
    word_count,
)


logger = get_logger("notes")

UPLOAD_CHUNK_SIZE = 64 * 1024


@dataclass
class PaginatedNotes:
    """Paginated list of notes."""

    items: list[Note]
    total: int
    page: int
    per_page: int


@dataclass
class DuplicateMatch:
    """Best duplicate found for a note."""

    note_id: UUID
    similarity: float


class NoteService:
    """
    Service for note-related business logic.

    Handles:
    - Creating notes from JSON or uploaded files
    - Listing, fetching and soft deleting notes
    - Outline extraction and duplicate analysis
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = NoteRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_note(
        self,
        owner_id: UUID,
        body: str,
        title: Optional[str] = None,
        source_filename: Optional[str] = None,
        fallback_title: str = "Untitled note",
    ) -> Note:
        """
        Store a new note in PENDING state.

        The title defaults to the one derived from the body.
        """
        note = await self.repo.create(
            owner_id=owner_id,
            title=(title or "").strip() or derive_title(body, fallback_title),
            body=body,
            source_filename=source_filename,
            content_hash=content_fingerprint(body),
            word_count=word_count(body),
            status=NoteStatus.PENDING,
            outline=[],
        )
        logger.info("Note created", note_id=str(note.id), owner_id=str(owner_id))
        return note

    async def import_upload(self, owner_id: UUID, upload: UploadFile) -> Note:
        """
        Create a note from an uploaded markdown or text file.

        Raises:
            ValidationError: Wrong extension, empty file, or not UTF-8
            PayloadTooLargeError: File larger than MAX_UPLOAD_BYTES
        """
        filename = PurePath(upload.filename or "").name
        extension = PurePath(filename).suffix.lower()
        allowed = [ext.lower() for ext in settings.ALLOWED_NOTE_EXTENSIONS]
        if extension not in allowed:
            raise ValidationError(
                f"Unsupported file type '{extension or filename or '(no name)'}'",
                details={"allowed_extensions": allowed},
            )

        data = await self._read_limited(upload, settings.MAX_UPLOAD_BYTES)
        try:
            body = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ValidationError("File is not valid UTF-8 text") from e
        if not body.strip():
            raise ValidationError("File is empty")

        return await self.create_note(
            owner_id,
            body,
            source_filename=filename,
            fallback_title=PurePath(filename).stem,
        )

    @staticmethod
    async def _read_limited(upload: UploadFile, limit: int) -> bytes:
        """Read an upload in chunks, failing as soon as it exceeds ``limit`` bytes."""
        chunks: list[bytes] = []
        total = 0
        while True:
            chunk = await upload.read(UPLOAD_CHUNK_SIZE)
            if not chunk:
                break
            total += len(chunk)
            if total > limit:
                raise PayloadTooLargeError(limit)
            chunks.append(chunk)
        return b"".join(chunks)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ / DELETE
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_note(self, owner_id: UUID, note_id: UUID) -> Note:
        """
        Raises:
            NoteNotFoundError: Missing, deleted, or owned by another user
        """
        note = await self.repo.get_for_owner(owner_id, note_id)
        if note is None:
            raise NoteNotFoundError(str(note_id))
        return note

    async def list_notes(
        self,
        owner_id: UUID,
        *,
        page: int,
        per_page: int,
        status: Optional[NoteStatus] = None,
    ) -> PaginatedNotes:
        notes, total = await self.repo.list_for_owner(
            owner_id,
            status=status,
            offset=(page - 1) * per_page,
            limit=per_page,
        )
        return PaginatedNotes(items=notes, total=total, page=page, per_page=per_page)

    async def get_outline(self, owner_id: UUID, note_id: UUID) -> list[Heading]:
        """Outline computed from the current body, available before analysis finishes."""
        note = await self.get_note(owner_id, note_id)
        return extract_outline(note.body)

    async def delete_note(self, owner_id: UUID, note_id: UUID) -> None:
        note = await self.get_note(owner_id, note_id)
        await self.repo.soft_delete(note)
        logger.info("Note deleted", note_id=str(note_id), owner_id=str(owner_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # ANALYSIS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_duplicate(self, note: Note) -> Optional[DuplicateMatch]:
        """
        Best duplicate of ``note`` among the owner's other live notes.

        Returns:
            The match, or None when nothing reaches the threshold
        """
        best: Optional[DuplicateMatch] = None
        for candidate in await self.repo.duplicate_candidates(note):
            if candidate.content_hash == note.content_hash:
                return DuplicateMatch(note_id=candidate.id, similarity=1.0)

            score = similarity(note.body, candidate.body)
            if score >= settings.DUPLICATE_SIMILARITY_THRESHOLD and (best is None or score > best.similarity):
                best = DuplicateMatch(note_id=candidate.id, similarity=round(score, 4))

        return best

    async def start_analysis(self, note_id: UUID) -> Optional[Note]:
        """
        Move a note to PROCESSING.

        The caller commits right after, so other sessions see the state
        while analysis runs.

        Returns:
            The note, or None if it vanished before analysis
        """
        note = await self.repo.get_live(note_id)
        if note is None:
            logger.warning("Note disappeared before analysis", note_id=str(note_id))
            return None
        return await self.repo.update(note, status=NoteStatus.PROCESSING, error_message=None)

    async def analyze_note(self, note_id: UUID) -> Optional[Note]:
        """
        Run outline extraction and duplicate detection for one note.

        Errors propagate; the pipeline records them with mark_failed()
        on a fresh session.

        Returns:
            The analyzed note, or None if it was deleted meanwhile
        """
        note = await self.repo.get_live(note_id)
        if note is None:
            return None

        outline = [heading.to_dict() for heading in extract_outline(note.body)]
        match = await self.find_duplicate(note)

        note = await self.repo.update(
            note,
            status=NoteStatus.READY,
            outline=outline,
            duplicate_of_id=match.note_id if match else None,
            similarity=match.similarity if match else None,
        )
        logger.info(
            "Note analyzed",
            note_id=str(note_id),
            headings=len(outline),
            duplicate_of=str(match.note_id) if match else None,
        )
        return note

    async def mark_failed(self, note_id: UUID, error_message: str) -> Optional[Note]:
        note = await self.repo.get_live(note_id)
        if note is None:
            return None
        return await self.repo.update(note, status=NoteStatus.FAILED, error_message=error_message)
