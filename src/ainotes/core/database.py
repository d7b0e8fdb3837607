"""
Database Engine

Process-wide async engine (asyncpg) and session factory, both created on
first use so importing the package never opens a connection. The note
repository receives the factory and opens one session per call.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ainotes.core.config import settings

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Return the shared engine, creating it from ``settings.DATABASE_URL``."""
    global _engine  # noqa: PLW0603
    if _engine is None:
        _engine = create_async_engine(
            settings.DATABASE_URL,
            pool_size=5,
            pool_pre_ping=True,
        )
        logger.info(
            "Engine created for %s on %s:%s",
            settings.POSTGRES_DB,
            settings.POSTGRES_HOST,
            settings.POSTGRES_PORT,
        )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the shared session factory bound to the engine."""
    global _session_factory  # noqa: PLW0603
    if _session_factory is None:
        # Notes are converted to domain models after commit; no lazy reloads
        _session_factory = async_sessionmaker(get_engine(), expire_on_commit=False)
    return _session_factory


async def dispose_engine() -> None:
    """Close pooled connections. The next ``get_engine`` call starts fresh."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
    logger.info("Engine disposed")
