"""Archive (soft delete) a note."""

from __future__ import annotations

import logging
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ainotes.core.result import Result
from ainotes.handlers.base import NOTE_ARCHIVED, get_owned_note, require
from ainotes.repositories.base import NoteRepository

logger = logging.getLogger(__name__)


class ArchiveNoteCommand(BaseModel):
    """Input for ArchiveNoteHandler."""

    model_config = ConfigDict(frozen=True)

    note_id: UUID
    user_subject: str = ""


class ArchiveNoteHandler:
    """
    Archives a note owned by the requesting user.

    There is no hard delete: the repository only flags the note.
    """

    def __init__(self, repository: NoteRepository) -> None:
        self._repository = require(repository, "repository")

    async def handle(self, command: ArchiveNoteCommand) -> Result[str]:
        owned = await get_owned_note(self._repository, command.note_id, command.user_subject)
        if owned.failure or owned.value is None:
            return Result.fail(owned.error or "Note not found")

        result = await self._repository.archive(owned.value)
        if result.failure:
            logger.error("Could not archive note %s: %s", command.note_id, result.error)
            return Result.fail(result.error or "Error archiving note")

        logger.info("Archived note %s", command.note_id)
        return Result.ok(NOTE_ARCHIVED)
