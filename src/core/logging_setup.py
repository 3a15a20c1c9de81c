"""Logging configuration shared by the CLI and tests."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "restdoc_examples"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr `RichHandler` to the package logger.

    Calling it again replaces the handler instead of stacking a second one.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
