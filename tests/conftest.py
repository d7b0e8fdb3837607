"""
Pytest Configuration and Fixtures

Shared fixtures for the unit tests: a fixed clock, an in-memory repository
and a scripted AI service. Nothing here needs Docker, PostgreSQL or network.
"""

import os

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Test environment defaults. MUST be before any ainotes imports.
#
# 1. Load .env first so that Docker-matching credentials are available.
# 2. setdefault fills in anything still missing (CI runners, fresh clones
#    without a .env file) so that pydantic Settings validation doesn't crash.
# ---------------------------------------------------------------------------
load_dotenv()  # .env → os.environ (no-op if file is missing)

_test_env = {
    "POSTGRES_USER": "ainotes",
    "POSTGRES_PASSWORD": "ainotes_password",
    "POSTGRES_HOST": "localhost",
    "POSTGRES_PORT": "5432",
    "POSTGRES_DB": "ainotes_db",
    "OPENAI_API_KEY": "mock",
}
for _key, _value in _test_env.items():
    os.environ.setdefault(_key, _value)

# ---------------------------------------------------------------------------
# Imports (safe now that env vars are set)
# ---------------------------------------------------------------------------
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402

from ainotes.core.config import AiServiceOptions  # noqa: E402

from fakes import T1, InMemoryNoteRepository  # noqa: E402


@pytest.fixture
def clock():
    """Clock frozen at T1 (strictly after T0)."""
    return lambda: T1


@pytest.fixture
def repository() -> InMemoryNoteRepository:
    """Empty in-memory note repository."""
    return InMemoryNoteRepository()


@pytest.fixture
def ai() -> AsyncMock:
    """
    AI service double with fixed outputs.

    Override ``side_effect`` per test to simulate failures.
    """
    service = AsyncMock()
    service.generate_summary.return_value = "A short summary."
    service.generate_tags.return_value = "python, testing"
    service.generate_embedding.return_value = [0.1, 0.2, 0.3]
    return service


@pytest.fixture
def options() -> AiServiceOptions:
    """Default options: threshold 0.7, five related notes."""
    return AiServiceOptions(api_key="mock")


