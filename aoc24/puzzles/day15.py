"""Day 15: Warehouse Woes.

A single push routine serves both warehouses. Starting from the robot it
gathers every cell that would have to move, pulling in the other half of any
wide box it touches; if none of them runs into a wall the whole group shifts
by one step.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import List, Optional, Tuple

from ..grid_utils import Grid
from ..io_utils import read_input, report, split_sections
from ..logging_utils import setup_logging
from ..point import Direction, Point
from ..types import Answers, InputSource

logger = logging.getLogger(__name__)

DAY = 15
WALL = "#"
EMPTY = "."
BOX = "O"
ROBOT = "@"
BOX_LEFT = "["
BOX_RIGHT = "]"
TILES = (WALL, EMPTY, BOX, ROBOT)

WIDEN = {WALL: "##", BOX: "[]", EMPTY: "..", ROBOT: "@."}


def parse_input(text: str) -> Tuple[Grid, List[Direction]]:
    sections = split_sections(text)
    if len(sections) != 2:
        raise ValueError(f"Expected a map and a move list, found {len(sections)} sections")
    grid = Grid.from_text(sections[0])
    for point, cell in grid.items():
        if cell not in TILES:
            raise ValueError(f"Invalid map character {cell!r} at {point}")
    moves = [Direction.from_char(char) for char in sections[1] if not char.isspace()]
    return grid, moves


def widen(grid: Grid) -> Grid:
    return Grid.from_text("\n".join("".join(WIDEN[cell] for cell in row) for row in grid.rows()))


def push(grid: Grid, robot: Point, direction: Direction) -> Point:
    """Try to move the robot one step; return its new position."""

    delta = direction.delta
    group = [robot]
    seen = {robot}
    queue = deque([robot])
    while queue:
        ahead = queue.popleft() + delta
        cell = grid[ahead]
        if cell == WALL:
            return robot
        if cell == EMPTY:
            continue
        parts = [ahead]
        if cell == BOX_LEFT:
            parts.append(ahead + Direction.RIGHT.delta)
        elif cell == BOX_RIGHT:
            parts.append(ahead + Direction.LEFT.delta)
        for part in parts:
            if part not in seen:
                seen.add(part)
                group.append(part)
                queue.append(part)

    values = [grid[cell] for cell in group]
    for cell in group:
        grid[cell] = EMPTY
    for cell, value in zip(group, values):
        grid[cell + delta] = value
    return robot + delta


def run(grid: Grid, moves: List[Direction]) -> Grid:
    """Apply every move to a copy of ``grid`` and return the final layout."""

    grid = grid.copy()
    robot = grid.find(ROBOT)
    if robot is None:
        raise ValueError("No robot in the warehouse")
    for direction in moves:
        robot = push(grid, robot, direction)
    logger.debug("Final warehouse:\n%s", grid)
    return grid


def gps_total(grid: Grid) -> int:
    return sum(100 * point.y + point.x for point, cell in grid.items() if cell in (BOX, BOX_LEFT))


def part1(grid: Grid, moves: List[Direction]) -> int:
    return gps_total(run(grid, moves))


def part2(grid: Grid, moves: List[Direction]) -> int:
    return gps_total(run(widen(grid), moves))


def solve(path: Optional[InputSource] = None) -> Answers:
    grid, moves = parse_input(read_input(DAY if path is None else path))
    answers = part1(grid, moves), part2(grid, moves)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
