"""Note command and query handlers."""

from ainotes.handlers.archive_note import ArchiveNoteCommand, ArchiveNoteHandler
from ainotes.handlers.backfill_tags import BackfillTagsCommand, BackfillTagsHandler
from ainotes.handlers.base import NOTE_ARCHIVED, NOTE_NOT_FOUND
from ainotes.handlers.create_note import CreateNoteCommand, CreateNoteHandler
from ainotes.handlers.get_note_details import GetNoteDetailsHandler, GetNoteDetailsQuery
from ainotes.handlers.get_related_notes import (
    GetRelatedNotesHandler,
    GetRelatedNotesQuery,
)
from ainotes.handlers.list_notes import ListNotesHandler, ListNotesQuery
from ainotes.handlers.search_notes import SearchNotesHandler, SearchNotesQuery
from ainotes.handlers.seed_notes import SeedNotesCommand, SeedNotesHandler
from ainotes.handlers.update_note import UpdateNoteCommand, UpdateNoteHandler

__all__ = [
    "NOTE_ARCHIVED",
    "NOTE_NOT_FOUND",
    "ArchiveNoteCommand",
    "ArchiveNoteHandler",
    "BackfillTagsCommand",
    "BackfillTagsHandler",
    "CreateNoteCommand",
    "CreateNoteHandler",
    "GetNoteDetailsHandler",
    "GetNoteDetailsQuery",
    "GetRelatedNotesHandler",
    "GetRelatedNotesQuery",
    "ListNotesHandler",
    "ListNotesQuery",
    "SearchNotesHandler",
    "SearchNotesQuery",
    "SeedNotesCommand",
    "SeedNotesHandler",
    "UpdateNoteCommand",
    "UpdateNoteHandler",
]
