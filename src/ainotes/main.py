"""
AI Notes API

ASGI entrypoint. The lifespan probes PostgreSQL before accepting traffic and
releases the connection pool on shutdown.

Run locally:
    uvicorn ainotes.main:app --port 8000 --reload
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text

from ainotes import __version__
from ainotes.api.v1.notes import router as notes_router
from ainotes.core.config import settings
from ainotes.core.database import dispose_engine, get_engine
from ainotes.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


async def wait_for_db(retries: int = 10, delay: float = 1) -> bool:
    """
    Probe the database with ``SELECT 1`` until it answers.

    Compose may start the API before PostgreSQL accepts connections, so the
    probe is retried ``retries`` times, ``delay`` seconds apart.

    Returns:
        True once a probe succeeds, False when every attempt failed.
    """
    engine = get_engine()
    for attempt in range(1, retries + 1):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database not ready (%d/%d): %s", attempt, retries, e)
            await asyncio.sleep(delay)
        else:
            logger.info("Database reachable at %s", settings.POSTGRES_HOST)
            return True
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Block startup on the database probe; dispose the engine on exit."""
    logger.info("Starting AI Notes %s (log level %s)", __version__, settings.LOG_LEVEL)

    if not await wait_for_db():
        logger.critical("Database unreachable, aborting startup")
        await dispose_engine()
        raise RuntimeError("Database connection failed")

    yield

    await dispose_engine()
    logger.info("AI Notes stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Notes with AI summaries, tags and semantically related notes.",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(notes_router, prefix="/api/v1/notes", tags=["Notes"])


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {
        "status": "ok",
        "service": "ainotes",
        "environment": os.getenv("ENVIRONMENT", "local"),
    }
