"""
Logging Configuration

One stdout handler shared by the application, uvicorn and the chattier
third-party clients, so container logs stay in a single format.
"""

import sys
from logging.config import dictConfig

from ainotes.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING unless LOG_LEVEL is DEBUG
QUIET_LOGGERS = ("sqlalchemy.engine", "openai", "httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """
    Configure logging for the API process and the scripts.

    Args:
        level: Overrides ``settings.LOG_LEVEL`` (used by scripts and tests).

    Note:
        Call once, before the first log statement.
    """
    log_level = (level or settings.LOG_LEVEL).upper()
    third_party_level = "DEBUG" if log_level == "DEBUG" else "WARNING"

    def _routed(level_name: str) -> dict:
        return {"level": level_name, "handlers": ["stdout"], "propagate": False}

    loggers = {
        "ainotes": _routed(log_level),
        "uvicorn": _routed("INFO"),
        "uvicorn.access": _routed("INFO"),
    }
    loggers.update({name: _routed(third_party_level) for name in QUIET_LOGGERS})

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": sys.stdout,
                    "formatter": "default",
                },
            },
            "root": {"level": log_level, "handlers": ["stdout"]},
            "loggers": loggers,
        }
    )
