"""Day 3: Mull It Over.

The corrupted memory is scanned once with a single regular expression that
recognises ``mul(a,b)``, ``do()`` and ``don't()``; both parts are accumulated
in the same pass.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 3

INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|(do\(\))|(don't\(\))")


def scan(memory: str) -> Tuple[int, int]:
    """Return ``(all products, enabled products)`` for ``memory``."""

    # newlines carry no meaning in the corrupted memory
    memory = memory.replace("\n", "")
    total = 0
    enabled_total = 0
    enabled = True
    for match in INSTRUCTION.finditer(memory):
        if match.group(3):
            enabled = True
        elif match.group(4):
            enabled = False
        else:
            product = int(match.group(1)) * int(match.group(2))
            total += product
            if enabled:
                enabled_total += product
    return total, enabled_total


def parse_input(text: str) -> str:
    return text


def part1(memory: str) -> int:
    return scan(memory)[0]


def part2(memory: str) -> int:
    return scan(memory)[1]


def solve(path: Optional[InputSource] = None) -> Answers:
    answers = scan(parse_input(read_input(DAY if path is None else path)))
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
