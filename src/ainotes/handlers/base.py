"""
Shared handler helpers.

Ownership checks collapse "missing" and "owned by someone else" into one
failure message so a caller cannot probe for other users' notes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Final
from uuid import UUID

from ainotes.core.result import Result
from ainotes.models.schemas import Note
from ainotes.repositories.base import NoteRepository

logger = logging.getLogger(__name__)

NOTE_NOT_FOUND: Final[str] = "Note not found or access denied."
NOTE_ARCHIVED: Final[str] = "Note archived successfully."

Clock = Callable[[], datetime]


def require(value, name: str):
    """Reject a missing constructor dependency."""
    if value is None:
        raise ValueError(f"{name} is required")
    return value


async def get_owned_note(
    repository: NoteRepository,
    note_id: UUID,
    user_subject: str,
) -> Result[Note]:
    """
    Fetch a note on behalf of ``user_subject``.

    Returns:
        Success with the note when it exists and belongs to the user,
        otherwise a failure carrying ``NOTE_NOT_FOUND``.
    """
    result = await repository.get_by_id(note_id)
    if result.failure:
        logger.warning("Fetching note %s failed: %s", note_id, result.error)
        return Result.fail(NOTE_NOT_FOUND)

    note = result.value
    if note is None or note.owner_subject != user_subject:
        logger.info("Note %s not found or not owned by %s", note_id, user_subject)
        return Result.fail(NOTE_NOT_FOUND)

    return Result.ok(note)
