"""Logging configuration helpers for the quiz application."""

from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> Logger:
    """Configure logging for the application and return the ``queeze`` logger.

    Terminal frontends draw over the whole screen, so callers normally pass
    a *log_file*; without one, records go to stderr.
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        filename=str(log_file) if log_file is not None else None,
        force=True,
    )
    return logging.getLogger("queeze")
