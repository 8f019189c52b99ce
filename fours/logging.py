"""Logging helpers for fours.

Every module gets its logger through :func:`get_logger` so that handlers are
attached once and all loggers share the ``fours.`` namespace. The starting
level comes from the FOURS_LOG_LEVEL environment variable (a level name such
as ``DEBUG``), falling back to WARNING.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LEVEL_ENV_VAR = "FOURS_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        value = getattr(logging, level.strip().upper(), None)
        return value if isinstance(value, int) else logging.WARNING
    return level


_DEFAULT_LEVEL = _coerce_level(os.getenv(_LEVEL_ENV_VAR, "WARNING"))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Args:
        name: Logger name, usually ``__name__``. ``None`` gives the package
            logger.

    Returns:
        Cached logger writing to stderr.

    Example:
        >>> from fours.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("computing 16 bins")
    """
    if name is None:
        name = "fours"

    logger_name = name if name == "fours" or name.startswith("fours.") else f"fours.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every fours logger, including ones created later.

    Args:
        level: ``logging.DEBUG`` etc., or a level name such as ``"INFO"``.
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handlers of all fours loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. ``None`` keeps the default.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
