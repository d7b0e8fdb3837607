"""
FastAPI dependencies shared by the v1 routers.

Everything a handler needs is resolved here so tests can swap any piece
through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status

from ainotes.core.config import AiServiceOptions, settings
from ainotes.core.database import get_session_factory
from ainotes.repositories import NoteRepository, SqlNoteRepository
from ainotes.services import AiService, OpenAiService, RelatednessEngine


def get_current_subject(
    x_user_subject: str | None = Header(default=None),
) -> str:
    """FastAPI dependency: the authenticated user's subject id."""
    if not x_user_subject or not x_user_subject.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Subject header",
        )
    return x_user_subject.strip()


@lru_cache
def get_ai_options() -> AiServiceOptions:
    """FastAPI dependency: AI options copied from the application settings."""
    return AiServiceOptions.from_settings(settings)


def get_repository() -> NoteRepository:
    """FastAPI dependency: returns a SqlNoteRepository instance."""
    return SqlNoteRepository(get_session_factory())


@lru_cache
def _shared_ai_service() -> OpenAiService:
    # One client (and its connection pool) per process
    return OpenAiService(get_ai_options())


def get_ai_service() -> AiService:
    """FastAPI dependency: returns the shared OpenAI-backed service."""
    return _shared_ai_service()


def get_relatedness_engine(
    repository: NoteRepository = Depends(get_repository),
    options: AiServiceOptions = Depends(get_ai_options),
) -> RelatednessEngine:
    """FastAPI dependency: returns a RelatednessEngine over the request's repository."""
    return RelatednessEngine(repository, options)
