"""structlog setup shared by the CLI and the HTTP API."""

from __future__ import annotations

import logging
import sys

import structlog

from smart_schedule.exceptions import ConfigurationError


def configure_logging(level: str = "INFO", *, json: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json: Render JSON lines instead of the human-friendly console format.

    Raises:
        ConfigurationError: If the level name is not a logging level.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # stdout is reserved for command output.
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
