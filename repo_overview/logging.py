"""Logging utilities for repo-overview."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOGGER_NAME = "repo_overview"
_CONSOLE_FORMAT = "[repo-overview] %(levelname)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the repo_overview hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route package logs to stderr (never stdout, which carries the report)."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    return logger


__all__ = ["configure_logging", "get_logger"]
