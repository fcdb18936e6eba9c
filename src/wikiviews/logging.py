"""Logging setup built on loguru.

The library logs through ``loguru.logger`` and keeps its messages disabled
until an application opts in with configure_logging().
"""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
)


def configure_logging(
    level: str = "INFO",
    serialize: bool = False,
    sink: Any = None,
) -> int:
    """Enable wikiviews log messages and route them to a single sink.

    Existing loguru handlers are removed first, so repeated calls replace
    the previous configuration.

    Args:
        level: Minimum level to emit (e.g. "DEBUG", "INFO").
        serialize: Emit JSON lines instead of the console format.
        sink: Any loguru sink. Defaults to stderr.

    Returns:
        The loguru handler id.
    """
    logger.remove()
    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=LOG_FORMAT,
        serialize=serialize,
    )
    logger.enable("wikiviews")
    return handler_id


def disable_logging() -> None:
    """Silence wikiviews messages."""
    logger.disable("wikiviews")
