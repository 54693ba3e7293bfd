# === FILE: robots_scout/logger.py ===
"""Logging for **RobotsScout**.

The library only *emits* records; it never decides where they go. On import the
``RobotsScout`` logger gets a :class:`logging.NullHandler` and keeps propagating,
so the host application's own logging setup receives parser and fetcher records.

Standalone scripts may opt into console/file output::

      from robots_scout.logger import init_logging
      init_logging("DEBUG")
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "RobotsScout"

_LevelT = Union[int, str]


def _stdout_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=1024 * 1024,
        backupCount=2,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the project logger or one of its children (``RobotsScout.<name>``)."""
    root = logging.getLogger(_LOGGER_NAME)
    return root.getChild(name) if name else root


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    propagate: bool = False,
) -> logging.Logger:
    """Send project records to stdout (and optionally a rotating *log_file*).

    Replaces whatever handlers the project logger had. With *propagate* left
    False, records stop here instead of also reaching the root logger.
    """
    lg = get_logger()
    _close_handlers(lg)
    lg.setLevel(level)
    lg.addHandler(_stdout_handler(log_format))
    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))
    lg.propagate = propagate
    return lg


def init_logging(level: _LevelT = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Opt-in console logging with the default format."""
    return configure(level=level, log_file=log_file)


def reset() -> logging.Logger:
    """Back to the import-time state: silent, level unset, propagating."""
    lg = get_logger()
    _close_handlers(lg)
    lg.setLevel(logging.NOTSET)
    lg.addHandler(logging.NullHandler())
    lg.propagate = True
    return lg


def _close_handlers(lg: logging.Logger) -> None:
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


get_logger().addHandler(logging.NullHandler())

__all__ = ["configure", "get_logger", "init_logging", "reset"]
