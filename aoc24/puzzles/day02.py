"""Day 2: Red-Nosed Reports."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 2


def parse_input(text: str) -> List[List[int]]:
    reports = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            reports.append([int(level) for level in line.split()])
        except ValueError as exc:
            raise ValueError(f"Error reading report {line!r}") from exc
    return reports


def is_safe(levels: Sequence[int]) -> bool:
    """Strictly monotonic with every step between 1 and 3 inclusive."""

    if len(levels) < 2:
        return True
    # first == last can never be strictly monotonic
    if levels[0] == levels[-1]:
        return False
    ascending = levels[0] < levels[-1]
    for a, b in zip(levels, levels[1:]):
        if (a < b) != ascending or not 1 <= abs(a - b) <= 3:
            return False
    return True


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """Safe as-is, or safe after removing any single level."""

    if is_safe(levels):
        return True
    return any(is_safe(list(levels[:i]) + list(levels[i + 1:])) for i in range(len(levels)))


def part1(reports: List[List[int]]) -> int:
    return sum(1 for levels in reports if is_safe(levels))


def part2(reports: List[List[int]]) -> int:
    return sum(1 for levels in reports if is_safe_dampened(levels))


def solve(path: Optional[InputSource] = None) -> Answers:
    reports = parse_input(read_input(DAY if path is None else path))
    answers = part1(reports), part2(reports)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
