"""Logging helpers for nelmead.

Every module obtains its logger through :func:`get_logger` so that output is
namespaced under ``nelmead.`` and silent (WARNING) unless asked otherwise.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger below the ``nelmead`` namespace.

    Args:
        name: Logger name, usually ``__name__``. Names that do not already
            start with ``nelmead`` are prefixed with it.

    Returns:
        A cached logger writing to stderr.

    Example:
        >>> from nelmead.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("reflected worst vertex")
    """
    if name is None:
        name = "nelmead"

    if name == "nelmead" or name.startswith("nelmead."):
        logger_name = name
    else:
        logger_name = f"nelmead.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every nelmead logger, existing and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ...).
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Reconfigure handlers for all nelmead loggers.

    Typically called once at application startup, e.g. to watch the simplex
    moves with ``configure_logging(level="DEBUG")``.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


__all__ = ["configure_logging", "get_logger", "set_log_level"]
