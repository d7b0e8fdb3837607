#!/usr/bin/env python3
"""
Seed Sample Notes

Creates enriched sample notes for one user directly against the database.
Runs in mock AI mode unless OPENAI_API_KEY is set.

Usage:
    python scripts/seed_notes.py --subject auth0|alice
    python scripts/seed_notes.py --subject auth0|alice --count 10
    python scripts/seed_notes.py --subject auth0|alice --backfill-tags
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from ainotes.core.config import AiServiceOptions, settings
from ainotes.core.database import dispose_engine, get_session_factory
from ainotes.core.logging import setup_logging
from ainotes.handlers import (
    BackfillTagsCommand,
    BackfillTagsHandler,
    SeedNotesCommand,
    SeedNotesHandler,
)
from ainotes.repositories import SqlNoteRepository
from ainotes.services import OpenAiService


def log_info(msg: str) -> None:
    print(f"ℹ {msg}")


def log_success(msg: str) -> None:
    print(f"✓ {msg}")


def log_error(msg: str) -> None:
    print(f"✗ {msg}")


async def run(subject: str, count: int, backfill_tags: bool) -> int:
    repository = SqlNoteRepository(get_session_factory())
    ai = OpenAiService(AiServiceOptions.from_settings(settings))
    if ai.is_mock:
        log_info("OPENAI_API_KEY not set, using mock AI enrichment")

    errors: list[str] = []
    try:
        if backfill_tags:
            backfill = await BackfillTagsHandler(repository, ai).handle(
                BackfillTagsCommand(user_subject=subject, only_missing=False)
            )
            report = backfill.value
            if report is not None:
                log_success(f"Re-tagged {report.processed_count}/{report.total_notes} notes")
                errors = report.errors
        else:
            seeded = await SeedNotesHandler(repository, ai).handle(
                SeedNotesCommand(user_subject=subject, count=count)
            )
            report = seeded.value
            if report is not None:
                log_success(f"Created {report.created_count} notes for {subject}")
                errors = report.errors
    finally:
        await dispose_engine()

    for error in errors:
        log_error(error)
    return 1 if errors else 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed sample notes for a user")
    parser.add_argument("--subject", required=True, help="Owner subject id")
    parser.add_argument("--count", type=int, default=50, help="Number of notes to create")
    parser.add_argument(
        "--backfill-tags",
        action="store_true",
        help="Regenerate tags for all of the user's notes instead of seeding",
    )
    args = parser.parse_args()

    setup_logging()
    return asyncio.run(run(args.subject, args.count, args.backfill_tags))


if __name__ == "__main__":
    sys.exit(main())
