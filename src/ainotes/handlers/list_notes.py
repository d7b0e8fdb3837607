"""List one page of the requesting user's notes."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from ainotes.core.result import Result
from ainotes.handlers.base import require
from ainotes.repositories.base import NoteFilter, NoteRepository
from ainotes.schemas.notes import NoteListItem, NoteListPage

logger = logging.getLogger(__name__)


class ListNotesQuery(BaseModel):
    """Input for ListNotesHandler. ``page_number`` is 1-based."""

    model_config = ConfigDict(frozen=True)

    user_subject: str = ""
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)


class ListNotesHandler:
    """
    Pages through the notes owned by a user.

    A failed count is not fatal: the total falls back to 0 and the page is
    still fetched. A failed page fetch yields an empty page.
    """

    def __init__(self, repository: NoteRepository) -> None:
        self._repository = require(repository, "repository")

    async def handle(self, query: ListNotesQuery) -> Result[NoteListPage]:
        where = NoteFilter.by_owner(query.user_subject)
        skip = (query.page_number - 1) * query.page_size

        count_result = await self._repository.count(where)
        if count_result.failure:
            logger.warning("Counting notes for %s failed: %s", query.user_subject, count_result.error)
        total_count = count_result.value or 0

        page_result = await self._repository.get_page(where, skip, query.page_size)
        if page_result.failure:
            logger.warning("Listing notes for %s failed: %s", query.user_subject, page_result.error)
        notes = page_result.value or []

        return Result.ok(
            NoteListPage(
                items=[NoteListItem.model_validate(n) for n in notes],
                total_count=total_count,
                page_number=query.page_number,
                page_size=query.page_size,
            )
        )
