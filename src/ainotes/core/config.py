"""
Application Configuration

Centralized settings management using Pydantic BaseSettings.
All values are loaded from environment variables or .env file.

Core services never read ``settings`` directly: the values they need are
copied into an explicit options object at wiring time (see
``AiServiceOptions.from_settings``).
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ainotes.models.orm import EMBEDDING_DIMENSION as STORED_EMBEDDING_DIMENSION


class Settings(BaseSettings):
    """
    Application settings with environment variable binding.

    Required env vars (no defaults):
        POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_HOST, POSTGRES_DB

    Optional env vars:
        POSTGRES_PORT (5432), OPENAI_API_KEY (mock mode when empty),
        OPENAI_CHAT_MODEL, OPENAI_EMBEDDING_MODEL, MAX_SUMMARY_TOKENS,
        EMBEDDING_DIMENSION (fixed at 1536, the column size), SIMILARITY_THRESHOLD (0.7),
        RELATED_NOTES_COUNT (5), LOG_LEVEL (INFO)
    """

    PROJECT_NAME: str = "AI Notes"

    # Database
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str

    # OpenAI
    OPENAI_API_KEY: str = ""
    OPENAI_CHAT_MODEL: str = "gpt-4o-mini"
    OPENAI_EMBEDDING_MODEL: str = "text-embedding-3-small"
    MAX_SUMMARY_TOKENS: int = Field(default=150, ge=1)
    EMBEDDING_DIMENSION: int = Field(default=1536, ge=1)

    # Related notes
    SIMILARITY_THRESHOLD: float = Field(default=0.7, ge=-1.0, le=1.0)
    RELATED_NOTES_COUNT: int = Field(default=5, ge=1)

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",  # Silently ignore unknown env vars
    )

    @field_validator("EMBEDDING_DIMENSION")
    @classmethod
    def check_embedding_dimension(cls, value: int) -> int:
        """The notes.embedding column is vector(1536); other sizes cannot be stored."""
        if value != STORED_EMBEDDING_DIMENSION:
            raise ValueError(
                f"EMBEDDING_DIMENSION must be {STORED_EMBEDDING_DIMENSION} "
                "to match the notes.embedding column"
            )
        return value

    @property
    def DATABASE_URL(self) -> str:
        """Async PostgreSQL connection string using asyncpg driver."""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


@dataclass(frozen=True)
class AiServiceOptions:
    """
    Immutable configuration for the AI service and the relatedness engine.

    Attributes:
        api_key: OpenAI API key. Empty or ``"mock"`` selects mock mode.
        chat_model: Model used for summaries and tags.
        embedding_model: Model used for embeddings.
        max_summary_tokens: Output token cap for summaries.
        embedding_dimension: Vector size produced in mock mode.
        similarity_threshold: Minimum cosine similarity for a related note.
        related_notes_count: Default number of related notes returned.
    """

    api_key: str = ""
    chat_model: str = "gpt-4o-mini"
    embedding_model: str = "text-embedding-3-small"
    max_summary_tokens: int = 150
    embedding_dimension: int = 1536
    similarity_threshold: float = 0.7
    related_notes_count: int = 5

    @property
    def is_mock(self) -> bool:
        return not self.api_key or self.api_key.lower() == "mock"

    @classmethod
    def from_settings(cls, source: Settings) -> AiServiceOptions:
        """Copy the AI-related values out of the application settings."""
        return cls(
            api_key=source.OPENAI_API_KEY,
            chat_model=source.OPENAI_CHAT_MODEL,
            embedding_model=source.OPENAI_EMBEDDING_MODEL,
            max_summary_tokens=source.MAX_SUMMARY_TOKENS,
            embedding_dimension=source.EMBEDDING_DIMENSION,
            similarity_threshold=source.SIMILARITY_THRESHOLD,
            related_notes_count=source.RELATED_NOTES_COUNT,
        )


settings = Settings()  # type: ignore[call-arg]
