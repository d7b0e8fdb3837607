"""Update a note's title and content and regenerate its AI metadata."""

from __future__ import annotations

import logging
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ainotes.core.result import Result
from ainotes.handlers.base import Clock, get_owned_note, require
from ainotes.models.schemas import Note, utc_now
from ainotes.repositories.base import NoteRepository
from ainotes.services.ai import AiService
from ainotes.services.enrichment import enrich

logger = logging.getLogger(__name__)


class UpdateNoteCommand(BaseModel):
    """
    Input for UpdateNoteHandler.

    ``is_archived`` is optional: None keeps the current flag, a value
    replaces it (this is how an archived note is restored).
    """

    model_config = ConfigDict(frozen=True)

    note_id: UUID
    title: str = ""
    content: str = ""
    user_subject: str = ""
    is_archived: bool | None = None


class UpdateNoteHandler:
    """
    Replaces title and content of a note owned by the requesting user.

    Summary, tags and embedding are regenerated from the new title/content
    before anything is written; ``created_at`` is never touched.
    """

    def __init__(
        self,
        repository: NoteRepository,
        ai: AiService,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = require(repository, "repository")
        self._ai = require(ai, "ai")
        self._clock = clock

    async def handle(self, command: UpdateNoteCommand) -> Result[Note]:
        owned = await get_owned_note(self._repository, command.note_id, command.user_subject)
        if owned.failure or owned.value is None:
            return owned

        enrichment = await enrich(self._ai, command.title, command.content)

        note = owned.value
        note.title = command.title
        note.content = command.content
        note.ai_summary = enrichment.summary
        note.tags = enrichment.tags
        note.embedding = enrichment.embedding
        if command.is_archived is not None:
            note.is_archived = command.is_archived
        note.updated_at = self._clock()

        result = await self._repository.update(note)
        if result.failure:
            logger.error("Could not store note %s: %s", note.id, result.error)
            return Result.fail(result.error or "Error updating note")

        logger.info("Updated note %s", note.id)
        return Result.ok(note)
