"""Create a note with AI-generated summary, tags and embedding."""

from __future__ import annotations

import logging
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from ainotes.core.result import Result
from ainotes.handlers.base import Clock, require
from ainotes.models.schemas import Note, utc_now
from ainotes.repositories.base import NoteRepository
from ainotes.services.ai import AiService
from ainotes.services.enrichment import enrich

logger = logging.getLogger(__name__)


class CreateNoteCommand(BaseModel):
    """Input for CreateNoteHandler."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    content: str = ""
    user_subject: str = ""


class CreateNoteHandler:
    """
    Creates a note owned by the requesting user.

    Steps:
        1. Generate summary, tags and embedding concurrently.
        2. Assign a new id; ``created_at == updated_at == now``.
        3. Persist via ``repository.add``.

    AI failures propagate as exceptions and nothing is persisted. A failed
    ``add`` is returned as a failed Result.
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

    async def handle(self, command: CreateNoteCommand) -> Result[Note]:
        enrichment = await enrich(self._ai, command.title, command.content)

        now = self._clock()
        note = Note(
            id=uuid4(),
            title=command.title,
            content=command.content,
            ai_summary=enrichment.summary,
            tags=enrichment.tags,
            embedding=enrichment.embedding,
            owner_subject=command.user_subject,
            created_at=now,
            updated_at=now,
            is_archived=False,
        )

        result = await self._repository.add(note)
        if result.failure:
            logger.error("Could not store new note for %s: %s", command.user_subject, result.error)
            return Result.fail(result.error or "Error adding note")

        logger.info("Created note %s for %s", note.id, command.user_subject)
        return Result.ok(note)
