# src/recordcsv/logging.py
"""
Logging helpers.

All loggers live under the "recordcsv" namespace. The package logger carries a
NullHandler so that nothing is printed unless the application configures
logging. RECORDCSV_LOG_LEVEL (e.g. "DEBUG") sets the package level; a name
the logging module does not know is ignored with a warning.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Optional

_ROOT = "recordcsv"
LOG_LEVEL_ENV = "RECORDCSV_LOG_LEVEL"

_root_logger = logging.getLogger(_ROOT)
if not any(isinstance(h, logging.NullHandler) for h in _root_logger.handlers):
    _root_logger.addHandler(logging.NullHandler())


def level_from_env() -> Optional[int]:
    """
    Resolve RECORDCSV_LOG_LEVEL to a numeric level.

    Returns None when the variable is unset, empty or not a known level name.
    """
    raw = (os.getenv(LOG_LEVEL_ENV) or "").strip()
    if not raw:
        return None
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        warnings.warn(
            f"Ignoring {LOG_LEVEL_ENV}={raw!r}: not a known logging level",
            RuntimeWarning,
            stacklevel=2,
        )
        return None
    return level


_level = level_from_env()
if _level is not None:
    _root_logger.setLevel(_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package namespace."""
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def log_exception(logger: logging.Logger, message: str, exc: BaseException) -> None:
    """Log an exception at debug level with its traceback."""
    logger.debug("%s: %s", message, exc, exc_info=exc)
