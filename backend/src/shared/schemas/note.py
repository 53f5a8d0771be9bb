"""
Note Schemas

Request/response models for study notes.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.shared.models.enums import NoteStatus
from src.shared.schemas.common import BaseSchema


class NoteCreate(BaseModel):
    """Schema for creating a note from JSON."""

    title: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Title; derived from the first heading when omitted",
    )
    body: str = Field(min_length=1, description="Markdown source")

    @field_validator("body")
    @classmethod
    def body_not_blank(cls, body: str) -> str:
        if not body.strip():
            raise ValueError("body must not be blank")
        return body


class NoteHeading(BaseModel):
    """One outline entry."""

    level: int = Field(ge=1, le=6)
    title: str
    anchor: str


class NoteSummary(BaseSchema):
    """Schema for notes in list responses."""

    id: UUID
    title: str
    status: NoteStatus
    word_count: int
    source_filename: Optional[str] = None
    duplicate_of_id: Optional[UUID] = None
    created_at: datetime


class NoteResponse(NoteSummary):
    """Schema for a single note."""

    body: str
    content_hash: str
    outline: list[NoteHeading]
    similarity: Optional[float] = None
    error_message: Optional[str] = None
    updated_at: datetime


class NoteOutlineResponse(BaseModel):
    """Schema for a note's heading outline."""

    note_id: UUID
    headings: list[NoteHeading]
