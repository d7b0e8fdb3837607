"""Repositories package."""

from ainotes.repositories.base import NoteFilter, NoteRepository
from ainotes.repositories.notes import SqlNoteRepository, build_where_clause

__all__ = [
    "NoteFilter",
    "NoteRepository",
    "SqlNoteRepository",
    "build_where_clause",
]
