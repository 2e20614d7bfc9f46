"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2024-06-01 10:30:00 [info     ] Map created     map_id=7c1e... user_id=550e...

Production (JSON):
    {"timestamp": "2024-06-01T10:30:00", "level": "info", "event": "Map created", "map_id": "7c1e..."}

Usage:
======
    from photopin.shared.core.logging import logger, get_logger, log_context

    logger.info("Pin created", pin_id=pin_id, map_id=map_id)

    service_logger = get_logger(__name__)
    service_logger.warning("Collection not found", title=title)

    # Attach request-wide values to every following event
    log_context(request_id=request_id, user_id=user_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from photopin.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    - development: coloured console output
    - test: plain console output (no ANSI codes in captured logs)
    - anything else: one JSON object per line

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development or settings.APP_ENV == "test":
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=settings.is_development),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, usually the calling module's ``__name__``

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls of the current request.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all context variables bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("photopin")
