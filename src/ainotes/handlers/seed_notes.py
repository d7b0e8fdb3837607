"""Seed a user's notebook with enriched sample notes."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from datetime import timedelta
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ainotes.core.result import Result
from ainotes.handlers.base import Clock, require
from ainotes.handlers.sample_notes import SAMPLE_NOTES
from ainotes.models.schemas import Note, utc_now
from ainotes.repositories.base import NoteRepository
from ainotes.schemas.notes import SeedNotesReport
from ainotes.services.ai import AiService
from ainotes.services.enrichment import enrich

logger = logging.getLogger(__name__)

MAX_BACKDATE_DAYS = 30


class SeedNotesCommand(BaseModel):
    """Input for SeedNotesHandler."""

    model_config = ConfigDict(frozen=True)

    user_subject: str = ""
    count: int = Field(default=50, ge=0)


class SeedNotesHandler:
    """
    Creates up to ``count`` notes from the sample corpus.

    Each note is enriched exactly like a user-created one; ``created_at`` is
    back-dated by 0-29 days so the notebook does not look freshly imported.
    A failing note is reported and skipped.
    """

    def __init__(
        self,
        repository: NoteRepository,
        ai: AiService,
        clock: Clock = utc_now,
        samples: Sequence[tuple[str, str]] = SAMPLE_NOTES,
        rng: random.Random | None = None,
    ) -> None:
        self._repository = require(repository, "repository")
        self._ai = require(ai, "ai")
        self._clock = clock
        self._samples = samples
        self._rng = rng or random.Random()

    async def handle(self, command: SeedNotesCommand) -> Result[SeedNotesReport]:
        created: list[UUID] = []
        errors: list[str] = []

        for title, content in list(self._samples)[: command.count]:
            try:
                enrichment = await enrich(self._ai, title, content)
            except Exception as e:
                errors.append(f"Failed to create '{title}': {e}")
                continue

            now = self._clock()
            note = Note(
                id=uuid4(),
                title=title,
                content=content,
                ai_summary=enrichment.summary,
                tags=enrichment.tags,
                embedding=enrichment.embedding,
                owner_subject=command.user_subject,
                created_at=now - timedelta(days=self._rng.randrange(MAX_BACKDATE_DAYS)),
                updated_at=now,
            )

            result = await self._repository.add(note)
            if result.success:
                created.append(note.id)
            else:
                errors.append(f"Failed to create '{title}': {result.error}")

        logger.info(
            "Seeded %d notes for %s (%d errors)",
            len(created),
            command.user_subject,
            len(errors),
        )
        return Result.ok(
            SeedNotesReport(
                created_count=len(created),
                created_note_ids=created,
                errors=errors,
            )
        )
