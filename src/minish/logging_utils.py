"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str = "WARNING") -> None:
    """Configure process-level logging once per level."""
    global _CONFIGURED_LEVEL
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = level
