"""Day 6: Guard Gallivant."""

from __future__ import annotations

import logging
from typing import Optional, Set, Tuple

from ..grid_utils import Grid
from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..point import Direction, Point
from ..types import Answers, InputSource

logger = logging.getLogger(__name__)

DAY = 6
EMPTY = "."
OBSTACLE = "#"
GUARD = "^"


def parse_input(text: str) -> Tuple[Grid, Point]:
    """Return the lab map with the guard removed, plus the guard's start."""

    grid = Grid.from_text(text)
    for point, cell in grid.items():
        if cell not in (EMPTY, OBSTACLE, GUARD):
            raise ValueError(f"Unrecognised map character {cell!r} at {point}")
    start = grid.find(GUARD)
    if start is None:
        raise ValueError("No guard on the map")
    grid[start] = EMPTY
    return grid, start


def walk(grid: Grid, start: Point) -> Set[Point]:
    """Cells visited by the guard before leaving the map, start included."""

    position, heading = start, Direction.UP
    visited = {position}
    while True:
        ahead = position + heading.delta
        cell = grid.get(ahead)
        if cell is None:
            return visited
        if cell == OBSTACLE:
            heading = heading.turn_right()
            continue
        position = ahead
        visited.add(position)


def is_loop(grid: Grid, start: Point, extra: Optional[Point] = None) -> bool:
    """Whether the guard loops forever once ``extra`` is also an obstacle.

    Only obstacle hits are recorded: meeting the same obstacle from the same
    heading twice means the route repeats.
    """

    position, heading = start, Direction.UP
    hits: Set[Tuple[Point, Direction]] = set()
    while True:
        ahead = position + heading.delta
        cell = grid.get(ahead)
        if cell is None:
            return False
        if cell == OBSTACLE or ahead == extra:
            if (ahead, heading) in hits:
                return True
            hits.add((ahead, heading))
            heading = heading.turn_right()
            continue
        position = ahead


def part1(grid: Grid, start: Point) -> int:
    return len(walk(grid, start))


def part2(grid: Grid, start: Point) -> int:
    """Count new obstruction spots that trap the guard.

    Only cells on the original route can change the guard's path, so those
    are the only candidates; the start cell is excluded.
    """

    candidates = walk(grid, start) - {start}
    logger.debug("Trying %d obstruction candidates", len(candidates))
    return sum(1 for candidate in candidates if is_loop(grid, start, candidate))


def solve(path: Optional[InputSource] = None) -> Answers:
    grid, start = parse_input(read_input(DAY if path is None else path))
    answers = part1(grid, start), part2(grid, start)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
