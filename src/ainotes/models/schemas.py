"""
Note Domain Models

Pydantic models for the values that flow through the note handlers.
A ``Note`` is a transient copy of a stored note: handlers fetch one, change
it, and hand it back to the repository within a single operation.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class Note(BaseModel):
    """
    A user note with its AI-derived metadata.

    Attributes:
        id: Unique identifier, immutable after creation.
        title: Note title.
        content: Note body.
        ai_summary: Generated summary of ``content``.
        tags: Generated comma-separated tags.
        embedding: Generated vector used only for similarity ranking.
        owner_subject: Identity provider subject of the owner.
        created_at: UTC creation time.
        updated_at: UTC time of the last successful update.
        is_archived: Soft delete flag.
    """

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    title: str = ""
    content: str = ""
    ai_summary: str | None = None
    tags: str | None = None
    embedding: list[float] | None = Field(default=None, repr=False)
    owner_subject: str = ""
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    is_archived: bool = False

    @model_validator(mode="after")
    def check_timestamps(self) -> Note:
        """A note can never be updated before it was created."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class AppUser(BaseModel):
    """
    Projection of the identity provider's user record.

    Not persisted by this service. ``notes`` is a convenience collection
    filled by callers that already hold the user's notes.
    """

    subject: str = Field(min_length=1, description="Identity provider subject")
    name: str | None = None
    email: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    notes: list[Note] = Field(default_factory=list)
