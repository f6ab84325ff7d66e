"""Structured logging setup built on structlog.

The library never configures logging on import: modules only call
:func:`get_logger`.  Applications opt in with :func:`configure_logging`
(or :func:`ytmeta.utils.config.configure_logging_from_settings`).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOG_FORMATS: tuple[str, ...] = ("console", "json")


def configure_logging(log_level: str = "WARNING", log_format: str = "console") -> None:
    """Configure structlog on top of the standard library logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format, ``"console"`` or ``"json"``
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {log_format!r}; expected one of {LOG_FORMATS}")

    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )
    logging.getLogger("ytmeta").setLevel(numeric_level)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to *name* (typically ``__name__``)."""
    return structlog.get_logger(name)
