"""
structlog setup for Primer.

APP_ENV=development renders colored console lines. Every other
environment writes one JSON object per line:

    {"event": "Note analyzed", "logger": "primer.notes", "level": "info",
     "request_id": "...", "note_id": "...", "headings": 3, "timestamp": "..."}

Loggers are named ``primer.<area>`` (http, ws, notes, events, worker.notes).
request_id, method and path are bound by RequestLoggingMiddleware via
log_context() and appear on every line logged while serving that request.
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import Processor

from src.config.settings import settings


# Held at WARNING or above
_QUIET_LOGGERS = ("passlib", "aiosqlite", "multipart")


def setup_logging() -> None:
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(area: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(f"primer.{area}" if area else "primer")


def log_context(**kwargs: Any) -> None:
    """Bind fields to every log line of the current task."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger()
