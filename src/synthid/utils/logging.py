"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``synthid`` namespace.
    - Allow optional verbose/debug modes from the CLI or configuration.

Public contracts:
    - ``get_logger(name)``: Return a logger below the package logger.
    - ``configure_logging(level)``: Attach a single stderr handler and set the
      package level.

Notes/Edge cases:
    - Logging configuration is idempotent; repeated calls only adjust the
      level.
    - Generated identifiers are never logged, only seeds and counts.

Dependencies:
    - Python ``logging`` module.
"""

from __future__ import annotations

import logging

__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]

PACKAGE_LOGGER = "synthid"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_FLAG = "_synthid_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Configure the package logger once and return it."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)
    if not any(getattr(h, _HANDLER_FLAG, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
    return logger
