"""Fetch the full details of one note for its owner."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ainotes.core.result import Result
from ainotes.handlers.base import get_owned_note, require
from ainotes.repositories.base import NoteRepository
from ainotes.schemas.notes import NoteDetails


class GetNoteDetailsQuery(BaseModel):
    """Input for GetNoteDetailsHandler."""

    model_config = ConfigDict(frozen=True)

    note_id: UUID
    user_subject: str = ""


class GetNoteDetailsHandler:
    """Maps an owned note to ``NoteDetails``; anything else fails uniformly."""

    def __init__(self, repository: NoteRepository) -> None:
        self._repository = require(repository, "repository")

    async def handle(self, query: GetNoteDetailsQuery) -> Result[NoteDetails]:
        owned = await get_owned_note(self._repository, query.note_id, query.user_subject)
        if owned.failure or owned.value is None:
            return Result.fail(owned.error or "Note not found")
        return Result.ok(NoteDetails.model_validate(owned.value))
