"""
Result Type

Uniform success/failure wrapper returned by repository calls and note
handlers. Expected failures (not found, access denied, storage errors) travel
as failed Results; exceptions are reserved for programmer errors and for the
AI port, whose failures are fatal to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

NULL_VALUE_ERROR = "Provided value is null."


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Outcome of an operation.

    Attributes:
        success: True when the operation succeeded.
        value: Payload on success (may be None for optional payloads).
            Always None on failure.
        error: Human-readable reason on failure, None on success.

    Usage::

        result = await repository.get_by_id(note_id)
        if result.failure or result.value is None:
            return Result.fail("Note not found or access denied.")
    """

    success: bool
    value: T | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful Result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("A failed Result requires an error message")

    @property
    def failure(self) -> bool:
        return not self.success

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        """Wrap a value as a success."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Wrap an error message as a failure with no value."""
        return cls(success=False, error=error)

    @classmethod
    def from_value(cls, value: T | None) -> Result[T]:
        """Success for a non-None value, otherwise a null-value failure."""
        if value is None:
            return cls.fail(NULL_VALUE_ERROR)
        return cls.ok(value)
