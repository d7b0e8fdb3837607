"""
Note Enrichment

Fan-out/fan-in over the AI port: summary, tags and embedding are requested
concurrently and the caller resumes only once all three are available.
"""

from __future__ import annotations

import asyncio
import logging
from typing import NamedTuple

from ainotes.services.ai import AiService

logger = logging.getLogger(__name__)


class Enrichment(NamedTuple):
    """The three AI-derived fields of a note, always produced together."""

    summary: str
    tags: str
    embedding: list[float]


async def enrich(ai: AiService, title: str, content: str) -> Enrichment:
    """
    Generate summary, tags and embedding for a note in parallel.

    The calls run in one ``asyncio.TaskGroup``: if any of them fails the
    others are cancelled and the first error is re-raised unchanged.
    Cancelling the caller cancels all three.

    Args:
        ai: AI enrichment port.
        title: Note title (used for tags only).
        content: Note content.

    Returns:
        Enrichment with all three fields.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            summary_task = tg.create_task(ai.generate_summary(content))
            tags_task = tg.create_task(ai.generate_tags(title, content))
            embedding_task = tg.create_task(ai.generate_embedding(content))
    except ExceptionGroup as eg:
        logger.error("Note enrichment failed: %s", eg.exceptions[0])
        raise eg.exceptions[0] from None

    return Enrichment(
        summary=summary_task.result(),
        tags=tags_task.result(),
        embedding=embedding_task.result(),
    )
