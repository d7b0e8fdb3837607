"""
Enrichment Unit Tests

Verifies the three AI calls run concurrently, that the first failure is
re-raised as-is, and that cancelling the caller cancels the calls.
"""

import asyncio

import pytest

from ainotes.services import Enrichment, enrich
from fakes import SlowAi


@pytest.mark.asyncio
async def test_enrich_returns_all_three(ai):
    result = await enrich(ai, "Title", "Content")

    assert result == Enrichment("A short summary.", "python, testing", [0.1, 0.2, 0.3])


@pytest.mark.asyncio
async def test_enrich_runs_calls_concurrently():
    slow = SlowAi()
    task = asyncio.create_task(enrich(slow, "t", "c"))

    # All three calls are in flight before any of them completes
    await asyncio.wait_for(slow.all_started.wait(), timeout=1)
    slow.release.set()
    result = await task

    assert result == Enrichment("summary", "tags", [1.0])


@pytest.mark.asyncio
async def test_enrich_reraises_first_failure_unwrapped(ai):
    ai.generate_embedding.side_effect = ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        await enrich(ai, "t", "c")


@pytest.mark.asyncio
async def test_enrich_cancellation_cancels_calls():
    slow = SlowAi()
    task = asyncio.create_task(enrich(slow, "t", "c"))
    await asyncio.wait_for(slow.all_started.wait(), timeout=1)

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert slow.cancelled == 3
