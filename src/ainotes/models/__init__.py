"""Models package: Pydantic domain models and SQLAlchemy ORM for notes."""

from ainotes.models.base import Base, TimestampMixin
from ainotes.models.orm import EMBEDDING_DIMENSION, NoteRecord
from ainotes.models.schemas import AppUser, Note, utc_now

__all__ = [
    # Pydantic domain models
    "AppUser",
    "Note",
    "utc_now",
    # SQLAlchemy ORM (persistence layer)
    "Base",
    "TimestampMixin",
    "NoteRecord",
    "EMBEDDING_DIMENSION",
]
