"""Logging setup shared by the CLI entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

DEFAULT_LEVEL = logging.WARNING


def setup_logger(name: str = "gatesolver", level: int = DEFAULT_LEVEL) -> logging.Logger:
    """Configure *name* to log through Rich on stderr and return it.

    Stdout is left alone; it carries the statistics block.
    """
    logger = logging.getLogger(name)
    # Prevent duplicate handlers if called more than once.
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level)
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
