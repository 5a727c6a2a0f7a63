"""aoc24.io_utils
=================

Input loading and answer reporting shared by the daily solvers. Inputs live in
``inputs/dayNN.txt`` relative to the working directory unless the
``AOC24_INPUT_DIR`` environment variable points elsewhere.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path
from typing import List, Optional

from .constants import INPUT_DIR, INPUT_DIR_ENV, INPUT_TEMPLATE
from .types import Answer, InputSource

logger = logging.getLogger(__name__)


def input_path(day: int) -> Path:
    """Location of the input file for ``day``."""

    base = os.environ.get(INPUT_DIR_ENV) or INPUT_DIR
    return Path(base) / INPUT_TEMPLATE.format(day=day)


def resolve(source: InputSource) -> Path:
    """Turn a day number or explicit path into a :class:`~pathlib.Path`."""

    if isinstance(source, int):
        return input_path(source)
    return Path(source)


def read_input(source: InputSource) -> str:
    """Return the full text of a puzzle input.

    Raises
    ------
    FileNotFoundError
        If the resolved file does not exist.
    """

    path = resolve(source)
    logger.debug("Reading input from %s", path)
    return path.read_text()


def read_lines(source: InputSource) -> List[str]:
    """Lines of the input without their newline terminators."""

    return read_input(source).splitlines()


def split_sections(text: str) -> List[str]:
    """Blocks of ``text`` separated by blank or whitespace-only lines, empties dropped."""

    blocks = re.split(r"\n[ \t]*\n", text.replace("\r\n", "\n"))
    return [block.strip("\n") for block in blocks if block.strip()]


def report(part1: Optional[Answer], part2: Optional[Answer]) -> None:
    """Print both answers in the ``Part N: value`` format."""

    logger.info("answers: part1=%s part2=%s", part1, part2)
    print(f"Part 1: {part1}")
    print(f"Part 2: {part2}")


def clear_screen() -> None:
    """Clear the terminal before redrawing a debug frame."""

    sys.stdout.write("\x1b[2J\x1b[H")
    sys.stdout.flush()


__all__ = [
    "input_path",
    "resolve",
    "read_input",
    "read_lines",
    "split_sections",
    "report",
    "clear_screen",
]
