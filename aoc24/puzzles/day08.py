"""Day 8: Resonant Collinearity."""

from __future__ import annotations

import math
from collections import defaultdict
from itertools import combinations
from typing import Dict, List, Optional, Set, Tuple

from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..point import ORIGIN, Point
from ..types import Answers, InputSource

DAY = 8
EMPTY = "."

Antennas = Dict[str, List[Point]]


def parse_input(text: str) -> Tuple[Antennas, Point]:
    """Antenna positions grouped by frequency, plus the inclusive max corner."""

    rows = [line for line in text.strip().splitlines() if line.strip()]
    antennas: Antennas = defaultdict(list)
    for y, row in enumerate(rows):
        for x, char in enumerate(row.strip()):
            if char != EMPTY:
                antennas[char].append(Point(x, y))
    return dict(antennas), Point(len(rows[0].strip()) - 1, len(rows) - 1)


def antinodes(a: Point, b: Point, limit: Point) -> Set[Point]:
    """The two points twice as far from one antenna as from the other."""

    delta = b - a
    return {p for p in (a - delta, b + delta) if p.in_bounds(ORIGIN, limit)}


def harmonics(a: Point, b: Point, limit: Point) -> Set[Point]:
    """Every in-bounds grid point on the line through ``a`` and ``b``.

    The delta is reduced by its gcd so no lattice point on the line is
    skipped.
    """

    delta = b - a
    step = math.gcd(delta.x, delta.y) or 1
    delta = Point(delta.x // step, delta.y // step)
    found = set()
    for direction in (delta, -delta):
        current = a
        while current.in_bounds(ORIGIN, limit):
            found.add(current)
            current = current + direction
    return found


def _collect(antennas: Antennas, limit: Point, locate) -> int:
    found: Set[Point] = set()
    for positions in antennas.values():
        for a, b in combinations(positions, 2):
            found |= locate(a, b, limit)
    return len(found)


def part1(antennas: Antennas, limit: Point) -> int:
    return _collect(antennas, limit, antinodes)


def part2(antennas: Antennas, limit: Point) -> int:
    return _collect(antennas, limit, harmonics)


def solve(path: Optional[InputSource] = None) -> Answers:
    antennas, limit = parse_input(read_input(DAY if path is None else path))
    answers = part1(antennas, limit), part2(antennas, limit)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
