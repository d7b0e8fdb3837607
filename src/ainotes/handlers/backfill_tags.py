"""Regenerate tags for a user's existing notes."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from ainotes.core.result import Result
from ainotes.handlers.base import Clock, require
from ainotes.models.schemas import utc_now
from ainotes.repositories.base import NoteFilter, NoteRepository
from ainotes.schemas.notes import BackfillTagsReport
from ainotes.services.ai import AiService

logger = logging.getLogger(__name__)


class BackfillTagsCommand(BaseModel):
    """Input for BackfillTagsHandler."""

    model_config = ConfigDict(frozen=True)

    user_subject: str = ""
    only_missing: bool = True


class BackfillTagsHandler:
    """
    Walks the user's notes one at a time and stores freshly generated tags.

    Failures are per note: they are collected in the report and the run
    continues with the next note.
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

    async def handle(self, command: BackfillTagsCommand) -> Result[BackfillTagsReport]:
        where = NoteFilter.by_owner(
            command.user_subject,
            only_missing_tags=command.only_missing,
        )
        notes_result = await self._repository.get_all(where)
        if notes_result.failure or notes_result.value is None:
            return Result.ok(
                BackfillTagsReport(errors=[notes_result.error or "Unknown error"])
            )

        notes = list(notes_result.value)
        processed = 0
        errors: list[str] = []

        for note in notes:
            try:
                note.tags = await self._ai.generate_tags(note.title, note.content)
            except Exception as e:
                errors.append(f"Failed to generate tags for note '{note.title}': {e}")
                continue

            note.updated_at = max(self._clock(), note.created_at)
            update_result = await self._repository.update(note)
            if update_result.success:
                processed += 1
            else:
                errors.append(
                    f"Failed to update note '{note.title}': "
                    f"{update_result.error or 'Unknown error'}"
                )

        logger.info(
            "Backfilled tags for %s: %d/%d notes (%d errors)",
            command.user_subject,
            processed,
            len(notes),
            len(errors),
        )
        return Result.ok(
            BackfillTagsReport(
                processed_count=processed,
                total_notes=len(notes),
                errors=errors,
            )
        )
