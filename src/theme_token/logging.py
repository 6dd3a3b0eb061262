"""
Package logging for theme-token.

Every module logs through a child of the ``theme_token`` logger, so the CLI
(or an embedding application) controls parser and asset-cache output with a
single call to :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger = logging.getLogger("theme_token")

# Level to restore on enable(); None while logging is enabled.
_saved_level: int | None = None


def _coerce_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def _attach(handler: logging.Handler, formatter: logging.Formatter, level: int) -> None:
    handler.setFormatter(formatter)
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Route theme-token log records to a stream and optionally a file.

    Calling this again replaces the previous handlers. Unknown level names
    fall back to INFO.

    Args:
        level: Level name such as ``"WARNING"`` (any case), or a logging int
        format: Record format; defaults to :data:`DEFAULT_FORMAT`
        stream: Destination stream, stderr when omitted
        file: Path of a log file written alongside the stream

    Example:
        from theme_token.logging import setup_logging

        setup_logging("DEBUG")  # show var() resolution and parse counts
        setup_logging("WARNING", file="theme-token.log")
    """
    level = _coerce_level(level)
    formatter = logging.Formatter(format or DEFAULT_FORMAT)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    _attach(logging.StreamHandler(stream or sys.stderr), formatter, level)
    if file:
        _attach(logging.FileHandler(file), formatter, level)


def get_logger(name: str) -> logging.Logger:
    """
    Return the ``theme_token.<name>`` logger.

    Names already qualified with ``theme_token.`` are used as given, so
    ``get_logger(__name__)`` works from inside the package.

    Example:
        logger = get_logger("parser")
        logger.debug("Parsed theme %r", name)
    """
    if name.startswith("theme_token."):
        return logging.getLogger(name)
    return logging.getLogger(f"theme_token.{name}")


def set_level(level: str | int) -> None:
    """Change the package level without touching handlers."""
    _root_logger.setLevel(_coerce_level(level))


def disable() -> None:
    """Silence every theme-token logger until :func:`enable` is called."""
    global _saved_level
    if _saved_level is None:
        _saved_level = _root_logger.level
    # Child loggers inherit this level; the disabled flag alone is not inherited.
    _root_logger.setLevel(logging.CRITICAL + 1)


def enable() -> None:
    """Restore the level that was active before :func:`disable`."""
    global _saved_level
    if _saved_level is not None:
        _root_logger.setLevel(_saved_level)
        _saved_level = None
