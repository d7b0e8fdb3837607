"""SeedNotesHandler Unit Tests"""

import random
from datetime import timedelta

import pytest

from ainotes.handlers import SeedNotesCommand, SeedNotesHandler
from ainotes.handlers.sample_notes import SAMPLE_NOTES
from fakes import ALICE, T1


@pytest.mark.asyncio
async def test_seed_creates_enriched_notes(repository, ai, clock):
    handler = SeedNotesHandler(repository, ai, clock=clock, rng=random.Random(7))

    result = await handler.handle(SeedNotesCommand(user_subject=ALICE, count=3))

    report = result.value
    assert report.created_count == 3
    assert report.errors == []
    assert set(report.created_note_ids) == set(repository.notes)
    for note in repository.notes.values():
        assert note.owner_subject == ALICE
        assert note.ai_summary == "A short summary."
        assert note.embedding == [0.1, 0.2, 0.3]
        assert note.updated_at == T1
        assert T1 - timedelta(days=29) <= note.created_at <= T1


@pytest.mark.asyncio
async def test_seed_count_is_capped_by_corpus(repository, ai):
    result = await SeedNotesHandler(repository, ai).handle(
        SeedNotesCommand(user_subject=ALICE, count=1000)
    )

    assert result.value.created_count == len(SAMPLE_NOTES)


@pytest.mark.asyncio
async def test_seed_zero_creates_nothing(repository, ai):
    result = await SeedNotesHandler(repository, ai).handle(
        SeedNotesCommand(user_subject=ALICE, count=0)
    )

    assert result.value.created_count == 0
    ai.generate_summary.assert_not_awaited()


@pytest.mark.asyncio
async def test_seed_collects_failures(repository, ai):
    samples = [("good", "fine"), ("bad", "boom")]

    async def summary(content):
        if content == "boom":
            raise RuntimeError("quota exceeded")
        return "s"

    ai.generate_summary.side_effect = summary

    result = await SeedNotesHandler(repository, ai, samples=samples).handle(
        SeedNotesCommand(user_subject=ALICE, count=2)
    )

    assert result.value.created_count == 1
    assert result.value.errors == ["Failed to create 'bad': quota exceeded"]
