"""
Structured logging for grantmatch.

The library only obtains loggers; applications decide where output goes by
calling :func:`configure_logging` once at startup (or by configuring
structlog themselves).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, get_args

import structlog

from .config import LogLevel, get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Route grantmatch logs through the standard library as JSON lines.

    *level* defaults to the ``log_level`` setting.

    Raises:
        ValueError: When *level* is not a known log level name.
    """
    level = (level or get_settings().log_level).lower()
    if level not in get_args(LogLevel):
        raise ValueError(f"Unknown log level: {level!r}")
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
