"""Logging setup for the ``wordsearch`` package.

Engine modules take a module logger via :func:`get_logger`; the CLI picks
the level with :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Route all records to stderr, one line per record.

    Per-attempt placement detail is logged at DEBUG; dropped words and
    found words are logged at INFO.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Module logger under the ``wordsearch`` namespace by default."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
