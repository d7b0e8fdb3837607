"""
ORM Base

Declarative base shared by the ORM models and Alembic, plus the timestamp
columns every note row carries.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """
    ``created_at`` / ``updated_at`` as timezone-aware columns.

    The handlers write both values; there is no server default or
    ``onupdate``, so ``updated_at`` changes only when a handler says so.
    """

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
