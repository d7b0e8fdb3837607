"""
Note Repository

PostgreSQL implementation of the note repository contract using async
SQLAlchemy and pgvector. Each call opens its own session from the injected
factory, so a repository instance can be shared across concurrent requests.

Storage errors never escape: every ``SQLAlchemyError`` is logged and turned
into a failed Result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, and_, false, func, or_, select, true, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ainotes.core.result import Result
from ainotes.models import Note, NoteRecord
from ainotes.repositories.base import NoteFilter

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_where_clause(where: NoteFilter | None) -> ColumnElement[bool]:
    """
    Translate a NoteFilter into a SQL boolean expression.

    Mirrors ``NoteFilter.matches`` field by field.
    """
    if where is None:
        return true()

    conditions: list[ColumnElement[bool]] = []
    if where.owner_subject is not None:
        conditions.append(NoteRecord.owner_subject == where.owner_subject)
    if where.exclude_id is not None:
        conditions.append(NoteRecord.id != where.exclude_id)
    if where.ids is not None:
        if not where.ids:
            return false()
        conditions.append(NoteRecord.id.in_(list(where.ids)))
    term = where.normalized_term
    if term is not None:
        pattern = f"%{_escape_like(term)}%"
        conditions.append(
            or_(
                NoteRecord.title.ilike(pattern, escape="\\"),
                NoteRecord.content.ilike(pattern, escape="\\"),
            )
        )
    if where.only_missing_tags:
        conditions.append(or_(NoteRecord.tags.is_(None), NoteRecord.tags == ""))

    if not conditions:
        return true()
    return and_(*conditions)


def _to_domain(record: NoteRecord) -> Note:
    # pgvector hands back numpy arrays; the domain model wants plain floats
    embedding = record.embedding
    return Note(
        id=record.id,
        title=record.title,
        content=record.content,
        ai_summary=record.ai_summary,
        tags=record.tags,
        embedding=None if embedding is None else [float(x) for x in embedding],
        owner_subject=record.owner_subject,
        created_at=record.created_at,
        updated_at=record.updated_at,
        is_archived=record.is_archived,
    )


def _to_record(note: Note) -> NoteRecord:
    return NoteRecord(**note.model_dump())


class SqlNoteRepository:
    """
    Note repository backed by PostgreSQL.

    Ordering:
        - ``get_all``: oldest first (created_at, then id), so callers that
          rank notes see a stable retrieval order.
        - ``get_page``: most recently updated first.

    Usage::

        repository = SqlNoteRepository(get_session_factory())
        result = await repository.get_by_id(note_id)
        if result.success and result.value is not None:
            ...
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        if session_factory is None:
            raise ValueError("session_factory is required")
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    async def get_by_id(self, note_id: UUID) -> Result[Note]:
        """Look up a note by id. A missing note is a success with no value."""
        try:
            async with self._session_factory() as session:
                record = await session.get(NoteRecord, note_id)
                return Result.ok(None if record is None else _to_domain(record))
        except SQLAlchemyError as e:
            logger.error("Error getting note %s: %s", note_id, e)
            return Result.fail(f"Error getting note by id: {e}")

    async def get_all(self, where: NoteFilter | None = None) -> Result[Sequence[Note]]:
        """Get every note matching ``where``."""
        stmt = (
            select(NoteRecord)
            .where(build_where_clause(where))
            .order_by(NoteRecord.created_at, NoteRecord.id)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return Result.ok([_to_domain(r) for r in result.scalars().all()])
        except SQLAlchemyError as e:
            logger.error("Error getting notes: %s", e)
            return Result.fail(f"Error getting notes: {e}")

    async def get_page(
        self,
        where: NoteFilter,
        skip: int,
        take: int,
    ) -> Result[Sequence[Note]]:
        """Get one page of matching notes with offset-based pagination."""
        stmt = (
            select(NoteRecord)
            .where(build_where_clause(where))
            .order_by(NoteRecord.updated_at.desc(), NoteRecord.id)
            .offset(max(skip, 0))
            .limit(max(take, 0))
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return Result.ok([_to_domain(r) for r in result.scalars().all()])
        except SQLAlchemyError as e:
            logger.error("Error getting notes page (skip=%d, take=%d): %s", skip, take, e)
            return Result.fail(f"Error getting notes: {e}")

    async def count(self, where: NoteFilter) -> Result[int]:
        """Count notes matching ``where``."""
        stmt = (
            select(func.count())
            .select_from(NoteRecord)
            .where(build_where_clause(where))
        )
        try:
            async with self._session_factory() as session:
                total = await session.scalar(stmt)
                return Result.ok(int(total or 0))
        except SQLAlchemyError as e:
            logger.error("Error counting notes: %s", e)
            return Result.fail(f"Error counting notes: {e}")

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    async def add(self, note: Note) -> Result[Note]:
        """Insert a new note."""
        try:
            async with self._session_factory() as session:
                session.add(_to_record(note))
                await session.commit()
            logger.info("Note %s added for %s", note.id, note.owner_subject)
            return Result.ok(note)
        except SQLAlchemyError as e:
            logger.error("Error adding note %s: %s", note.id, e)
            return Result.fail(f"Error adding note: {e}")

    async def update(self, note: Note) -> Result[Note]:
        """Replace every column of the stored note with the given values."""
        try:
            async with self._session_factory() as session:
                record = await session.get(NoteRecord, note.id)
                if record is None:
                    return Result.fail(f"Error updating note: {note.id} does not exist")
                for field, value in note.model_dump(exclude={"id"}).items():
                    setattr(record, field, value)
                await session.commit()
            return Result.ok(note)
        except SQLAlchemyError as e:
            logger.error("Error updating note %s: %s", note.id, e)
            return Result.fail(f"Error updating note: {e}")

    async def archive(self, note: Note) -> Result[Note]:
        """Set the archived flag with a targeted UPDATE (no SELECT required)."""
        stmt = update(NoteRecord).where(NoteRecord.id == note.id).values(is_archived=True)
        try:
            async with self._session_factory() as session:
                await session.execute(stmt)
                await session.commit()
            return Result.ok(note.model_copy(update={"is_archived": True}))
        except SQLAlchemyError as e:
            logger.error("Error archiving note %s: %s", note.id, e)
            return Result.fail(f"Error archiving note: {e}")
