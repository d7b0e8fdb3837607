"""
Relatedness Engine

Ranks a user's notes by cosine similarity to a query embedding.

Design:
    - Best effort: every failure (repository error, bad data) degrades to an
      empty result. Only task cancellation propagates.
    - Scoring runs in memory over the owner's notes; the repository is only
      asked for an owner-scoped list.
    - Configuration (threshold, default count) comes from an explicit
      ``AiServiceOptions`` passed at construction.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from uuid import UUID

from ainotes.core.config import AiServiceOptions
from ainotes.repositories.base import NoteFilter, NoteRepository

logger = logging.getLogger(__name__)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity ``dot(a, b) / (|a| * |b|)``.

    Vectors of different lengths are compared over the shorter length.
    A zero-magnitude vector scores 0.0.
    """
    length = min(len(a), len(b))
    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for i in range(length):
        x = float(a[i])
        y = float(b[i])
        dot += x * y
        norm_a += x * x
        norm_b += y * y

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


class RelatednessEngine:
    """
    Finds the notes of one owner most similar to a query embedding.

    Usage::

        engine = RelatednessEngine(repository, options)
        ids = await engine.find_related_notes(note.embedding, subject,
                                              exclude_id=note.id)
    """

    def __init__(self, repository: NoteRepository, options: AiServiceOptions) -> None:
        if repository is None:
            raise ValueError("repository is required")
        if options is None:
            raise ValueError("options is required")
        self._repository = repository
        self._options = options

    @property
    def options(self) -> AiServiceOptions:
        return self._options

    async def find_related_notes(
        self,
        embedding: Sequence[float] | None,
        owner_subject: str,
        exclude_id: UUID | None = None,
        top_n: int | None = None,
    ) -> list[UUID]:
        """
        Return ids of the owner's notes ranked by similarity (highest first).

        Args:
            embedding: Query vector. None or empty returns [] immediately.
            owner_subject: Only this owner's notes are candidates.
            exclude_id: Note to leave out (usually the one being viewed).
            top_n: Maximum results; non-positive or None uses the
                configured ``related_notes_count``.

        Returns:
            Note ids with similarity >= ``similarity_threshold``. Equal
            scores keep the repository's retrieval order.
        """
        if embedding is None or len(embedding) == 0:
            return []

        try:
            result = await self._repository.get_all(NoteFilter.by_owner(owner_subject))
            if result.failure or not result.value:
                if result.failure:
                    logger.warning(
                        "Related notes lookup failed for %s: %s",
                        owner_subject,
                        result.error,
                    )
                return []

            threshold = self._options.similarity_threshold
            scored: list[tuple[UUID, float]] = []
            for note in result.value:
                if exclude_id is not None and note.id == exclude_id:
                    continue
                if not note.embedding:
                    continue
                score = cosine_similarity(embedding, note.embedding)
                if score >= threshold:
                    scored.append((note.id, score))

            # sort() is stable: ties keep retrieval order
            scored.sort(key=lambda item: item[1], reverse=True)

            limit = top_n if top_n is not None and top_n > 0 else self._options.related_notes_count
            return [note_id for note_id, _ in scored[:limit]]
        except Exception:
            logger.exception("Error finding related notes for %s", owner_subject)
            return []
