"""Day 1: Historian Hysteria.

Two columns of location ids. Part 1 pairs them up smallest to smallest and
sums the distances; part 2 weights each left id by how often it appears on the
right.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 1


def parse_input(text: str) -> Tuple[List[int], List[int]]:
    """Return both columns, each sorted ascending."""

    left: List[int] = []
    right: List[int] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"Expected two ids per line, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return sorted(left), sorted(right)


def part1(left: List[int], right: List[int]) -> int:
    return sum(abs(a - b) for a, b in zip(left, right))


def part2(left: List[int], right: List[int]) -> int:
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def solve(path: Optional[InputSource] = None) -> Answers:
    left, right = parse_input(read_input(DAY if path is None else path))
    answers = part1(left, right), part2(left, right)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
