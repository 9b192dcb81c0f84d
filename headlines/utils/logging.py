"""Logging configuration utilities.

Provides a single function to initialize the root logger. Records are routed
through rich so they interleave cleanly with the console output of the CLI.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "HEADLINES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(
    level: str | int | None = None,
    console: Optional[Console] = None,
) -> None:
    """Configure application logging.

    Parameters
    ----------
    level:
        Logging level as a string (e.g., "INFO") or numeric value. Falls back
        to ``HEADLINES_LOG_LEVEL`` and then to WARNING.
    console:
        Console the handler writes to. Defaults to stderr so logs never mix
        with ``--json`` output on stdout.
    """
    # Resolved at call-time so .env variables loaded by the CLI are respected
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(logging.WARNING, root_logger.level))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
