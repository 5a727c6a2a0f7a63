"""aoc24.logging_utils
======================

Logging setup for the package. Solvers log through module-level loggers under
the ``aoc24`` namespace; :func:`setup_logging` attaches a single stdout handler
to that namespace. The ``DEBUG`` environment variable switches on debug output
such as rendered grids and search paths.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .constants import DEBUG_ENV, LOG_DATEFMT, LOG_FORMAT, TRUTHY

PACKAGE_LOGGER = "aoc24"


def debug_enabled() -> bool:
    """``True`` when the ``DEBUG`` environment variable holds a truthy value."""

    return os.environ.get(DEBUG_ENV, "").strip().lower() in TRUTHY


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """Configure the ``aoc24`` logger and return it.

    Parameters
    ----------
    level:
        Explicit logging level. When omitted the level is ``DEBUG`` if
        :func:`debug_enabled` and ``INFO`` otherwise.

    Notes
    -----
    Existing handlers are cleared first so repeated calls (for example when
    running several days in one interpreter) never duplicate output.
    """

    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["PACKAGE_LOGGER", "debug_enabled", "setup_logging"]
