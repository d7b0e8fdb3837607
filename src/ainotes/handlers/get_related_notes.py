"""Notes semantically related to one of the user's notes."""

from __future__ import annotations

import logging
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ainotes.core.result import Result
from ainotes.handlers.base import get_owned_note, require
from ainotes.repositories.base import NoteFilter, NoteRepository
from ainotes.schemas.notes import RelatedNoteItem, RelatedNotes
from ainotes.services.relatedness import RelatednessEngine

logger = logging.getLogger(__name__)


class GetRelatedNotesQuery(BaseModel):
    """Input for GetRelatedNotesHandler."""

    model_config = ConfigDict(frozen=True)

    note_id: UUID
    user_subject: str = ""
    top_n: int = 5


class GetRelatedNotesHandler:
    """
    Resolves the related-note ids found by the engine into list items.

    Best effort like the engine itself: a missing, foreign or not yet
    embedded note, and any repository failure, give an empty result.
    """

    def __init__(self, repository: NoteRepository, engine: RelatednessEngine) -> None:
        self._repository = require(repository, "repository")
        self._engine = require(engine, "engine")

    async def handle(self, query: GetRelatedNotesQuery) -> Result[RelatedNotes]:
        owned = await get_owned_note(self._repository, query.note_id, query.user_subject)
        if owned.failure or owned.value is None or not owned.value.embedding:
            return Result.ok(RelatedNotes())

        current = owned.value
        related_ids = await self._engine.find_related_notes(
            current.embedding,
            query.user_subject,
            exclude_id=current.id,
            top_n=query.top_n,
        )
        if not related_ids:
            return Result.ok(RelatedNotes())

        notes_result = await self._repository.get_all(
            NoteFilter.by_owner(query.user_subject, ids=frozenset(related_ids))
        )
        if notes_result.failure or notes_result.value is None:
            logger.warning("Loading related notes failed: %s", notes_result.error)
            return Result.ok(RelatedNotes())

        # Keep the engine's similarity order
        by_id = {note.id: note for note in notes_result.value}
        items = [
            RelatedNoteItem.model_validate(by_id[note_id])
            for note_id in related_ids
            if note_id in by_id
        ]
        return Result.ok(RelatedNotes(items=items))
