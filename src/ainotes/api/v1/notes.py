"""
Notes API Router

HTTP endpoints over the note handlers. The requesting user is identified by
the ``X-User-Subject`` header; every handler is scoped to that subject.

Endpoints:
    POST   /                Create a note (AI summary, tags and embedding).
    GET    /                Page through the user's notes.
    GET    /search          Case-insensitive text search.
    GET    /{note_id}       Note details.
    PUT    /{note_id}       Replace title/content, regenerate AI metadata.
    DELETE /{note_id}       Archive (soft delete).
    GET    /{note_id}/related  Semantically related notes.
    POST   /backfill-tags   Regenerate tags for existing notes.
    POST   /seed            Create sample notes.
"""

from __future__ import annotations

import logging
from typing import TypeVar
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ainotes.api.deps import (
    get_ai_service,
    get_current_subject,
    get_relatedness_engine,
    get_repository,
)
from ainotes.core.result import Result
from ainotes.handlers import (
    NOTE_NOT_FOUND,
    ArchiveNoteCommand,
    ArchiveNoteHandler,
    BackfillTagsCommand,
    BackfillTagsHandler,
    CreateNoteCommand,
    CreateNoteHandler,
    GetNoteDetailsHandler,
    GetNoteDetailsQuery,
    GetRelatedNotesHandler,
    GetRelatedNotesQuery,
    ListNotesHandler,
    ListNotesQuery,
    SearchNotesHandler,
    SearchNotesQuery,
    SeedNotesCommand,
    SeedNotesHandler,
    UpdateNoteCommand,
    UpdateNoteHandler,
)
from ainotes.repositories import NoteRepository
from ainotes.schemas.notes import (
    BackfillTagsReport,
    BackfillTagsRequest,
    NoteCreateRequest,
    NoteDetails,
    NoteListPage,
    NoteRead,
    NoteSearchPage,
    NoteUpdateRequest,
    RelatedNotes,
    SeedNotesReport,
    SeedNotesRequest,
)
from ainotes.services import AiService, RelatednessEngine

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _unwrap(result: Result[T]) -> T:
    """Return the value of a successful Result or raise the matching HTTP error."""
    if result.success:
        return result.value  # type: ignore[return-value]
    if result.error == NOTE_NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    # 502 Bad Gateway: the database or another dependency failed
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)


# ---------------------------------------------------------------------------
# Collection endpoints
# ---------------------------------------------------------------------------


@router.post("/", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(
    body: NoteCreateRequest,
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
    ai: AiService = Depends(get_ai_service),
) -> NoteRead:
    """
    Create a new note.

    Summary, tags and embedding are generated before the note is stored, so
    the note is immediately available to related-notes lookups.

    Raises:
        HTTPException 502: If the AI service or the database fails.
    """
    handler = CreateNoteHandler(repository, ai)
    try:
        result = await handler.handle(
            CreateNoteCommand(title=body.title, content=body.content, user_subject=subject)
        )
    except Exception as e:
        logger.error("Create note failed for %s: %s", subject, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=f"AI Service Error: {e}"
        ) from e

    return NoteRead.from_note(_unwrap(result))


@router.get("/", response_model=NoteListPage)
async def list_notes(
    page_number: int = Query(default=1, ge=1),
    page_size: int = Query(default=10, ge=1, le=100),
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
) -> NoteListPage:
    """List the user's notes, most recently updated first."""
    handler = ListNotesHandler(repository)
    result = await handler.handle(
        ListNotesQuery(user_subject=subject, page_number=page_number, page_size=page_size)
    )
    return _unwrap(result)


@router.get("/search", response_model=NoteSearchPage)
async def search_notes(
    q: str = Query(default="", description="Text matched against title or content"),
    page_number: int = Query(default=1, ge=1),
    page_size: int = Query(default=10, ge=1, le=100),
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
) -> NoteSearchPage:
    """Case-insensitive substring search over the user's notes."""
    handler = SearchNotesHandler(repository)
    result = await handler.handle(
        SearchNotesQuery(
            search_term=q,
            user_subject=subject,
            page_number=page_number,
            page_size=page_size,
        )
    )
    return _unwrap(result)


@router.post("/backfill-tags", response_model=BackfillTagsReport)
async def backfill_tags(
    body: BackfillTagsRequest | None = None,
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
    ai: AiService = Depends(get_ai_service),
) -> BackfillTagsReport:
    """
    Regenerate tags for the user's notes.

    Per-note failures are reported in ``errors``; the run never aborts.
    """
    request = body or BackfillTagsRequest()
    handler = BackfillTagsHandler(repository, ai)
    result = await handler.handle(
        BackfillTagsCommand(user_subject=subject, only_missing=request.only_missing)
    )
    return _unwrap(result)


@router.post("/seed", response_model=SeedNotesReport, status_code=status.HTTP_201_CREATED)
async def seed_notes(
    body: SeedNotesRequest | None = None,
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
    ai: AiService = Depends(get_ai_service),
) -> SeedNotesReport:
    """Create sample notes for the user (useful for demos and local testing)."""
    request = body or SeedNotesRequest()
    handler = SeedNotesHandler(repository, ai)
    result = await handler.handle(SeedNotesCommand(user_subject=subject, count=request.count))
    return _unwrap(result)


# ---------------------------------------------------------------------------
# Single note endpoints
# ---------------------------------------------------------------------------


@router.get("/{note_id}", response_model=NoteDetails)
async def read_note(
    note_id: UUID,
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
) -> NoteDetails:
    """Retrieve a single note by ID."""
    handler = GetNoteDetailsHandler(repository)
    result = await handler.handle(GetNoteDetailsQuery(note_id=note_id, user_subject=subject))
    return _unwrap(result)


@router.put("/{note_id}", response_model=NoteRead)
async def update_note(
    note_id: UUID,
    body: NoteUpdateRequest,
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
    ai: AiService = Depends(get_ai_service),
) -> NoteRead:
    """
    Replace title and content of a note and regenerate its AI metadata.

    Raises:
        HTTPException 404: If the note does not exist or belongs to someone else.
        HTTPException 502: If the AI service or the database fails.
    """
    handler = UpdateNoteHandler(repository, ai)
    try:
        result = await handler.handle(
            UpdateNoteCommand(
                note_id=note_id,
                title=body.title,
                content=body.content,
                user_subject=subject,
                is_archived=body.is_archived,
            )
        )
    except Exception as e:
        logger.error("Update of note %s failed: %s", note_id, e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=f"AI Service Error: {e}"
        ) from e

    return NoteRead.from_note(_unwrap(result))


@router.delete("/{note_id}")
async def archive_note(
    note_id: UUID,
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
) -> dict[str, str]:
    """Archive a note. Archived notes stay readable and can be restored via PUT."""
    handler = ArchiveNoteHandler(repository)
    result = await handler.handle(ArchiveNoteCommand(note_id=note_id, user_subject=subject))
    return {"message": _unwrap(result)}


@router.get("/{note_id}/related", response_model=RelatedNotes)
async def related_notes(
    note_id: UUID,
    top_n: int = Query(default=5, ge=1, le=50),
    subject: str = Depends(get_current_subject),
    repository: NoteRepository = Depends(get_repository),
    engine: RelatednessEngine = Depends(get_relatedness_engine),
) -> RelatedNotes:
    """Notes of the same user ranked by embedding similarity."""
    handler = GetRelatedNotesHandler(repository, engine)
    result = await handler.handle(
        GetRelatedNotesQuery(note_id=note_id, user_subject=subject, top_n=top_n)
    )
    return _unwrap(result)
