"""Logging setup for the latheform command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO, console: Console | None = None) -> None:
    """Route the ``latheform`` logger through a Rich handler.

    Library modules only create loggers; handlers are installed here, once per
    process entry point.
    """

    logger = logging.getLogger("latheform")
    logger.setLevel(level)

    # Avoid duplicate output when the CLI is invoked repeatedly in one process.
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(handler)
