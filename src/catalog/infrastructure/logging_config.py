"""Application-wide logging configuration."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from catalog.infrastructure.config import settings


def setup_logging() -> None:
    """Install a single Rich handler on the root logger."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        tracebacks_word_wrap=True,
        tracebacks_suppress=[logging],
    )

    # Replace rather than stack handlers when called more than once.
    root_logger.handlers = [
        h for h in root_logger.handlers if not isinstance(h, RichHandler)
    ]
    root_logger.addHandler(rich_handler)

    logging.getLogger("schedule").setLevel(logging.WARNING)
