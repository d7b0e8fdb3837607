"""
In-memory NoteRepository and AI doubles used by the unit tests.

Filtering goes through ``NoteFilter.matches`` so the fake and the SQL
repository share one definition of every filter. Reads return deep copies,
like rows loaded from a database.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from ainotes.core.result import Result
from ainotes.models import Note
from ainotes.repositories import NoteFilter


class InMemoryNoteRepository:
    def __init__(self, notes: Sequence[Note] = ()) -> None:
        self.notes: dict[UUID, Note] = {n.id: n.model_copy(deep=True) for n in notes}
        self.fail_with: str | None = None
        self.calls: list[str] = []

    def _failed(self, name: str) -> bool:
        self.calls.append(name)
        return self.fail_with is not None

    def _matching(self, where: NoteFilter | None) -> list[Note]:
        notes = list(self.notes.values())
        if where is not None:
            notes = [n for n in notes if where.matches(n)]
        return [n.model_copy(deep=True) for n in notes]

    async def get_by_id(self, note_id: UUID) -> Result[Note]:
        if self._failed("get_by_id"):
            return Result.fail(self.fail_with)
        note = self.notes.get(note_id)
        return Result.ok(note.model_copy(deep=True) if note else None)

    async def get_all(self, where: NoteFilter | None = None) -> Result[Sequence[Note]]:
        if self._failed("get_all"):
            return Result.fail(self.fail_with)
        notes = self._matching(where)
        notes.sort(key=lambda n: (n.created_at, str(n.id)))
        return Result.ok(notes)

    async def get_page(self, where: NoteFilter, skip: int, take: int) -> Result[Sequence[Note]]:
        if self._failed("get_page"):
            return Result.fail(self.fail_with)
        notes = self._matching(where)
        notes.sort(key=lambda n: n.updated_at, reverse=True)
        return Result.ok(notes[skip : skip + take])

    async def count(self, where: NoteFilter) -> Result[int]:
        if self._failed("count"):
            return Result.fail(self.fail_with)
        return Result.ok(len(self._matching(where)))

    async def add(self, note: Note) -> Result[Note]:
        if self._failed("add"):
            return Result.fail(self.fail_with)
        self.notes[note.id] = note.model_copy(deep=True)
        return Result.ok(note)

    async def update(self, note: Note) -> Result[Note]:
        if self._failed("update"):
            return Result.fail(self.fail_with)
        if note.id not in self.notes:
            return Result.fail(f"Error updating note: {note.id} does not exist")
        self.notes[note.id] = note.model_copy(deep=True)
        return Result.ok(note)

    async def archive(self, note: Note) -> Result[Note]:
        if self._failed("archive"):
            return Result.fail(self.fail_with)
        archived = note.model_copy(update={"is_archived": True})
        self.notes[note.id] = archived.model_copy(deep=True)
        return Result.ok(archived)


ALICE = "auth0|alice"
BOB = "auth0|bob"

T0 = datetime(2026, 1, 15, 9, 30, tzinfo=UTC)
T1 = datetime(2026, 1, 16, 14, 0, tzinfo=UTC)


def make_note(
    owner: str = ALICE,
    title: str = "Title",
    content: str = "Content",
    embedding: list[float] | None = None,
    tags: str | None = None,
    created_at: datetime = T0,
    updated_at: datetime | None = None,
    **kwargs,
) -> Note:
    """Build a stored-looking note with deterministic timestamps."""
    return Note(
        title=title,
        content=content,
        embedding=embedding,
        tags=tags,
        owner_subject=owner,
        created_at=created_at,
        updated_at=updated_at or created_at,
        **kwargs,
    )


class SlowAi:
    """AI double whose calls all wait on a shared barrier."""

    def __init__(self) -> None:
        self.started = 0
        self.cancelled = 0
        self.all_started = asyncio.Event()
        self.release = asyncio.Event()

    async def _wait(self, value):
        self.started += 1
        if self.started == 3:
            self.all_started.set()
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        return value

    async def generate_summary(self, content):
        return await self._wait("summary")

    async def generate_tags(self, title, content):
        return await self._wait("tags")

    async def generate_embedding(self, text):
        return await self._wait([1.0])
