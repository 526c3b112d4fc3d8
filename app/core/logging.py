"""Structured logging configuration.

Every record goes to *stdout* as ``timestamp | level | logger | message``.
The level comes from ``settings.LOG_LEVEL``.
"""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "uvicorn.access")


def setup_logging() -> None:
    """Install a single stdout handler on the root logger.

    Safe to call more than once: any handler already on the root logger is
    replaced, so reloads in development do not duplicate output.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # supabase-py talks through httpx; its per-request lines drown the app logs
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
