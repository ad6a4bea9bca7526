"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog


def setup_logging(level: str | None = None) -> structlog.stdlib.BoundLogger:
    """Configure structlog to render file operation events on stderr.

    Configuration is process-wide, so the package never calls this itself;
    applications opt in. ``level`` defaults to the LOG_LEVEL environment
    variable, then INFO.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("sfm")


logger: structlog.stdlib.BoundLogger = structlog.get_logger("sfm")
