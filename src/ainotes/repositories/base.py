"""
Note Repository Contract

The persistence interface consumed by the note handlers and the
relatedness engine. Queries are described by an explicit ``NoteFilter``
instead of an arbitrary predicate; ``NoteFilter.matches`` is the reference
semantics that every storage implementation must reproduce server-side.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable
from uuid import UUID

from ainotes.core.result import Result
from ainotes.models.schemas import Note


@dataclass(frozen=True)
class NoteFilter:
    """
    Conjunction of the supported note filters. Unset fields do not filter.

    Attributes:
        owner_subject: Only notes owned by this subject.
        exclude_id: Drop the note with this id.
        ids: Only notes whose id is in this collection.
        search_term: Case-insensitive substring of title or content.
            Blank terms are ignored.
        only_missing_tags: Only notes whose tags are None or empty.
    """

    owner_subject: str | None = None
    exclude_id: UUID | None = None
    ids: frozenset[UUID] | None = None
    search_term: str | None = None
    only_missing_tags: bool = False

    @classmethod
    def by_owner(cls, owner_subject: str, **kwargs) -> NoteFilter:
        return cls(owner_subject=owner_subject, **kwargs)

    @property
    def normalized_term(self) -> str | None:
        if self.search_term is None or not self.search_term.strip():
            return None
        return self.search_term.lower()

    def matches(self, note: Note) -> bool:
        """Evaluate the filter against an in-memory note."""
        if self.owner_subject is not None and note.owner_subject != self.owner_subject:
            return False
        if self.exclude_id is not None and note.id == self.exclude_id:
            return False
        if self.ids is not None and note.id not in self.ids:
            return False
        term = self.normalized_term
        if term is not None and not (
            term in note.title.lower() or term in note.content.lower()
        ):
            return False
        if self.only_missing_tags and note.tags:
            return False
        return True


@runtime_checkable
class NoteRepository(Protocol):
    """
    Async note persistence. Every method returns a Result and never raises
    for storage errors.
    """

    async def get_by_id(self, note_id: UUID) -> Result[Note]:
        """Success with the note, or success with None when it does not exist."""
        ...

    async def get_all(self, where: NoteFilter | None = None) -> Result[Sequence[Note]]:
        """All notes matching ``where`` (every note when None)."""
        ...

    async def get_page(
        self,
        where: NoteFilter,
        skip: int,
        take: int,
    ) -> Result[Sequence[Note]]:
        """At most ``take`` matching notes after skipping ``skip``."""
        ...

    async def count(self, where: NoteFilter) -> Result[int]:
        """Number of notes matching ``where``."""
        ...

    async def add(self, note: Note) -> Result[Note]:
        """Insert a new note."""
        ...

    async def update(self, note: Note) -> Result[Note]:
        """Replace the stored note with the same id (last writer wins)."""
        ...

    async def archive(self, note: Note) -> Result[Note]:
        """Soft delete: set ``is_archived`` and persist. Nothing is removed."""
        ...
