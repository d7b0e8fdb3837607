"""
Note Schemas

Pydantic models for handler outputs and HTTP request bodies.
Projections never carry the embedding; list items also drop the content.
"""

from __future__ import annotations

import math
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ainotes.models.schemas import Note


class NoteDetails(BaseModel):
    """Full projection of one note for its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    ai_summary: str | None = None
    tags: str | None = None
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class NoteListItem(BaseModel):
    """Lightweight projection for list views (no content, no embedding)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    ai_summary: str | None = None
    tags: str | None = None
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class PageInfo(BaseModel):
    """Pagination envelope shared by list and search results."""

    total_count: int = Field(ge=0)
    page_number: int
    page_size: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)


class NoteListPage(PageInfo):
    """One page of the owner's notes."""

    items: list[NoteListItem] = Field(default_factory=list)


class SearchNoteItem(BaseModel):
    """Projection for text search hits."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    ai_summary: str | None = None
    tags: str | None = None
    created_at: datetime
    updated_at: datetime


class NoteSearchPage(PageInfo):
    """One page of text search results."""

    items: list[SearchNoteItem] = Field(default_factory=list)
    search_term: str = ""


class RelatedNoteItem(BaseModel):
    """Projection for a related note."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    ai_summary: str | None = None
    updated_at: datetime


class RelatedNotes(BaseModel):
    """Related notes in similarity order (highest first)."""

    items: list[RelatedNoteItem] = Field(default_factory=list)


class BackfillTagsReport(BaseModel):
    """Outcome of a tag backfill run."""

    processed_count: int = 0
    total_notes: int = 0
    errors: list[str] = Field(default_factory=list)


class SeedNotesReport(BaseModel):
    """Outcome of seeding sample notes."""

    created_count: int = 0
    created_note_ids: list[UUID] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class NoteRead(BaseModel):
    """Note as returned by create/update, without the embedding vector."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    ai_summary: str | None = None
    tags: str | None = None
    owner_subject: str
    is_archived: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_note(cls, note: Note) -> NoteRead:
        return cls.model_validate(note)


# ----------------------------------------------------------------------
# HTTP request bodies
# ----------------------------------------------------------------------


class NoteCreateRequest(BaseModel):
    """Request schema for POST /notes."""

    title: str = Field(..., min_length=1, max_length=200, description="Note title")
    content: str = Field(..., min_length=1, description="Note content")


class NoteUpdateRequest(BaseModel):
    """Request schema for PUT /notes/{id}."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    is_archived: bool | None = Field(
        default=None,
        description="Set to change the archived flag; omit to keep it",
    )


class BackfillTagsRequest(BaseModel):
    """Request schema for POST /notes/backfill-tags."""

    only_missing: bool = True


class SeedNotesRequest(BaseModel):
    """Request schema for POST /notes/seed."""

    count: int = Field(default=50, ge=1, le=100)
