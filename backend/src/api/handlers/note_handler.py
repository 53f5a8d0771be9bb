"""
Note Handler

Study notes: create from JSON or file upload, list, read, outline and
delete. Analysis (outline + duplicate detection) runs as a background
task after the 201 response has been sent; its result arrives over the
/ws/notes WebSocket.

Request Flow:
=============
    POST /notes ──► NoteService.create_note ──► commit ──► 201 (status=pending)
                                                   │
                                                   └─► BackgroundTasks: process_note(note_id)
                                                            │
                                                            ▼
                                                   READY / FAILED + event
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, File, Query, UploadFile, status

from src.api.dependencies import CurrentUser, DbSession, NoteServiceDep, Pagination
from src.shared.models.enums import NoteStatus
from src.shared.schemas.common import PaginatedResponse, PaginationMeta
from src.shared.schemas.note import (
    NoteCreate,
    NoteHeading,
    NoteOutlineResponse,
    NoteResponse,
    NoteSummary,
)
from src.worker.pipelines import process_note


router = APIRouter()


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    data: NoteCreate,
    current_user: CurrentUser,
    background_tasks: BackgroundTasks,
    note_service: NoteServiceDep,
    db: DbSession,
):
    """Create a note and queue its analysis."""
    note = await note_service.create_note(current_user.id, data.body, title=data.title)
    # The analysis task opens its own session and must see the row
    await db.commit()
    background_tasks.add_task(process_note, note.id)
    return note


@router.post(
    "/upload",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_note(
    current_user: CurrentUser,
    background_tasks: BackgroundTasks,
    note_service: NoteServiceDep,
    db: DbSession,
    file: UploadFile = File(..., description="Markdown or plain text file"),
):
    """
    Create a note from an uploaded file.

    Raises:
        400: Unsupported extension, empty file, or not UTF-8
        413: File larger than MAX_UPLOAD_BYTES
    """
    try:
        note = await note_service.import_upload(current_user.id, file)
    finally:
        await file.close()
    await db.commit()
    background_tasks.add_task(process_note, note.id)
    return note


@router.get("", response_model=PaginatedResponse[NoteSummary])
async def list_notes(
    current_user: CurrentUser,
    pagination: Pagination,
    note_service: NoteServiceDep,
    note_status: Optional[NoteStatus] = Query(None, alias="status"),
):
    """List the caller's notes, newest first."""
    result = await note_service.list_notes(
        current_user.id,
        page=pagination.page,
        per_page=pagination.per_page,
        status=note_status,
    )
    return PaginatedResponse[NoteSummary](
        data=[NoteSummary.model_validate(note) for note in result.items],
        pagination=PaginationMeta.create(
            page=result.page,
            per_page=result.per_page,
            total=result.total,
        ),
    )


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    current_user: CurrentUser,
    note_service: NoteServiceDep,
):
    return await note_service.get_note(current_user.id, note_id)


@router.get("/{note_id}/outline", response_model=NoteOutlineResponse)
async def get_outline(
    note_id: UUID,
    current_user: CurrentUser,
    note_service: NoteServiceDep,
):
    """Heading outline computed from the note body."""
    headings = await note_service.get_outline(current_user.id, note_id)
    return NoteOutlineResponse(
        note_id=note_id,
        headings=[NoteHeading(**heading.to_dict()) for heading in headings],
    )


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    current_user: CurrentUser,
    note_service: NoteServiceDep,
) -> None:
    """Soft delete; the note disappears from every read endpoint."""
    await note_service.delete_note(current_user.id, note_id)
