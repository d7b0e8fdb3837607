"""Configuration Unit Tests"""

import pytest
from pydantic import ValidationError

from ainotes.core.config import AiServiceOptions, Settings

REQUIRED = {
    "POSTGRES_USER": "u",
    "POSTGRES_PASSWORD": "p",
    "POSTGRES_HOST": "db",
    "POSTGRES_DB": "notes",
}


@pytest.fixture
def env(monkeypatch):
    for key, value in REQUIRED.items():
        monkeypatch.setenv(key, value)
    for key in (
        "SIMILARITY_THRESHOLD",
        "RELATED_NOTES_COUNT",
        "POSTGRES_PORT",
        "EMBEDDING_DIMENSION",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_database_url_uses_asyncpg(env):
    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "postgresql+asyncpg://u:p@db:5432/notes"


def test_related_note_defaults(env):
    settings = Settings(_env_file=None)

    assert settings.SIMILARITY_THRESHOLD == 0.7
    assert settings.RELATED_NOTES_COUNT == 5


def test_env_overrides(env):
    env.setenv("SIMILARITY_THRESHOLD", "0.85")
    env.setenv("RELATED_NOTES_COUNT", "3")

    options = AiServiceOptions.from_settings(Settings(_env_file=None))

    assert options.similarity_threshold == 0.85
    assert options.related_notes_count == 3


@pytest.mark.parametrize("key", ["", "mock", "MOCK"])
def test_mock_mode_keys(key):
    assert AiServiceOptions(api_key=key).is_mock


def test_real_key_is_not_mock():
    assert not AiServiceOptions(api_key="sk-live").is_mock


def test_embedding_dimension_matches_column(env):
    assert Settings(_env_file=None).EMBEDDING_DIMENSION == 1536


def test_embedding_dimension_other_than_column_rejected(env):
    env.setenv("EMBEDDING_DIMENSION", "768")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
