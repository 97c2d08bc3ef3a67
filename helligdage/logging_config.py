"""Logging configuration.

Library modules only call ``get_logger``; the CLI calls ``setup_logging`` once.
The level comes from the argument, else ``HELLIGDAGE_LOG_LEVEL``, else WARNING.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "HELLIGDAGE_LOG_LEVEL"
LOG_FORMAT = "%(levelname)-8s %(asctime)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Ukendt log-niveau: {level!r}")
    return resolved


def setup_logging(level: str | int | None = None) -> None:
    root_logger = logging.getLogger("helligdage")
    root_logger.setLevel(_resolve_level(level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
