"""
Note Database Model

SQLAlchemy 2.0 ORM model for note storage.
Uses pgvector for the embedding column.

Tables:
    notes: User notes with AI-derived summary, tags and embedding.
"""

from __future__ import annotations

import uuid

from pgvector.sqlalchemy import Vector
from sqlalchemy import Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ainotes.models.base import Base, TimestampMixin

# Embedding dimension for text-embedding-3-small
EMBEDDING_DIMENSION: int = 1536


class NoteRecord(Base, TimestampMixin):
    """
    Persistent storage for notes.

    Attributes:
        id: UUID primary key (generated by the create handler).
        title: Note title (max 200 chars).
        content: Full note content, no length limit.
        ai_summary: Generated summary (nullable).
        tags: Generated comma-separated tags (nullable).
        embedding: 1536-dim vector (nullable).
        owner_subject: Identity provider subject of the owner, indexed.
        is_archived: Soft delete flag.
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    ai_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[str | None] = mapped_column(Text, nullable=True)
    embedding: Mapped[list[float] | None] = mapped_column(
        Vector(EMBEDDING_DIMENSION),
        nullable=True,
    )
    owner_subject: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    is_archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<NoteRecord(id={self.id!s:.8}, title='{self.title[:20]}...')>"
