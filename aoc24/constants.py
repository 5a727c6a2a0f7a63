"""aoc24.constants
=================

Global constants used across the package. Keeping them here avoids import
cycles between modules and makes the configurable paths easy to discover.
"""

from __future__ import annotations

INPUT_DIR = "inputs"
INPUT_DIR_ENV = "AOC24_INPUT_DIR"
INPUT_TEMPLATE = "day{day:02d}.txt"

DEBUG_ENV = "DEBUG"
TRUTHY = ("1", "t", "true")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"

__all__ = [
    "INPUT_DIR",
    "INPUT_DIR_ENV",
    "INPUT_TEMPLATE",
    "DEBUG_ENV",
    "TRUTHY",
    "LOG_FORMAT",
    "LOG_DATEFMT",
]
