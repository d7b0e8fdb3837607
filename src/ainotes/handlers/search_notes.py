"""Case-insensitive text search over the requesting user's notes."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from ainotes.core.result import Result
from ainotes.handlers.base import require
from ainotes.repositories.base import NoteFilter, NoteRepository
from ainotes.schemas.notes import NoteSearchPage, SearchNoteItem

logger = logging.getLogger(__name__)


class SearchNotesQuery(BaseModel):
    """
    Input for SearchNotesHandler.

    A blank ``search_term`` matches every note of the user.
    """

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    user_subject: str = ""
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)


class SearchNotesHandler:
    """Matches the term against title or content; paged like ListNotes."""

    def __init__(self, repository: NoteRepository) -> None:
        self._repository = require(repository, "repository")

    async def handle(self, query: SearchNotesQuery) -> Result[NoteSearchPage]:
        where = NoteFilter.by_owner(query.user_subject, search_term=query.search_term)
        skip = (query.page_number - 1) * query.page_size

        count_result = await self._repository.count(where)
        if count_result.failure:
            logger.warning(
                "Counting search results for %s failed: %s",
                query.user_subject,
                count_result.error,
            )
        total_count = count_result.value or 0

        page_result = await self._repository.get_page(where, skip, query.page_size)
        if page_result.failure:
            logger.warning(
                "Searching notes for %s failed: %s",
                query.user_subject,
                page_result.error,
            )
        notes = page_result.value or []

        return Result.ok(
            NoteSearchPage(
                items=[SearchNoteItem.model_validate(n) for n in notes],
                total_count=total_count,
                page_number=query.page_number,
                page_size=query.page_size,
                search_term=query.search_term,
            )
        )
