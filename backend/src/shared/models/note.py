"""
Note Entity Model

A markdown study note. Notes are analyzed in the background after they are
created: the heading outline is extracted and the note is compared against the
owner's other notes to flag near-duplicates.

Note Lifecycle:
===============
    PENDING ──► PROCESSING ──► READY
                     │
                     └──────► FAILED (error_message set)

SAMPLE NOTE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7c1e2f3a-...                                              │
│ title            │ "HTTP verbs"                                              │
│ body             │ "# HTTP verbs\n\n## GET\n..."                             │
│ source_filename  │ "verbs.md"                                                │
│ content_hash     │ "9f86d081884c7d65..." (SHA256 of normalized body)         │
│ word_count       │ 412                                                       │
│ status           │ READY                                                     │
│ outline          │ [{"level": 1, "title": "HTTP verbs", "anchor": ...}, ...] │
│ duplicate_of_id  │ 2a9d...  (earlier note with similar content)              │
│ similarity       │ 0.96                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Any, Optional
import uuid

from sqlalchemy import JSON, Enum as SQLEnum, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, SoftDeleteMixin, TimestampMixin
from src.shared.models.enums import NoteStatus


if TYPE_CHECKING:
    from src.shared.models.user import User


class Note(Base, TimestampMixin, SoftDeleteMixin):
    """
    Markdown study note owned by a user.

    Attributes:
        id: Unique identifier (UUID v4)
        owner_id: Owning user
        title: Given or derived title
        body: Markdown source
        source_filename: Original filename when uploaded
        content_hash: Fingerprint used for exact-duplicate detection
        word_count: Whitespace-separated words in body
        status: Analysis state
        outline: Extracted headings, filled in by analysis
        duplicate_of_id: Best matching earlier note, if any
        similarity: Similarity to duplicate_of_id (1.0 for exact copies)
        error_message: Failure reason when status is FAILED
    """

    __tablename__ = "notes"

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

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    source_filename: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    content_hash: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    word_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # ═══════════════════════════════════════════════════════════════════════════
    # ANALYSIS
    # ═══════════════════════════════════════════════════════════════════════════

    status: Mapped[NoteStatus] = mapped_column(
        SQLEnum(NoteStatus, name="notestatus"),
        nullable=False,
        default=NoteStatus.PENDING,
        index=True,
    )

    outline: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    duplicate_of_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("notes.id", ondelete="SET NULL"),
        nullable=True,
    )

    similarity: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    owner: Mapped["User"] = relationship("User", back_populates="notes")

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title}, status={self.status})>"
