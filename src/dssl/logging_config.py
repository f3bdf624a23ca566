"""Logging setup for the command-line tool."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dssl"


def setup_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Safe to call repeatedly; the previous handler is replaced.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...). Unknown names fall back
            to WARNING.
        console: Console to log to. Defaults to stderr.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger
