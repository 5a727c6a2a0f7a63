"""Day 14: Restroom Redoubt.

Robots move on a torus, so a robot's position after ``t`` seconds is simply
``(p + v * t)`` wrapped by the room size. Part 2 looks for the first second
at which two rows each hold a run of at least 16 adjacent robots, which is
the frame drawn around the hidden Christmas tree.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ..grid_utils import Grid
from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..point import Point
from ..types import Answers, InputSource

logger = logging.getLogger(__name__)

DAY = 14
BOUNDS = Point(101, 103)
SECONDS = 100
RUN_LENGTH = 16
FRAME_ROWS = 2

ROBOT = re.compile(r"^p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)$")


@dataclass(frozen=True)
class Robot:
    position: Point
    velocity: Point

    def __str__(self) -> str:
        return f"pos: {self.position}, vec: {self.velocity}"


def parse_input(text: str) -> List[Robot]:
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = ROBOT.match(line.strip())
        if not match:
            raise ValueError(f"Invalid robot {line!r}")
        x, y, vx, vy = (int(value) for value in match.groups())
        robots.append(Robot(Point(x, y), Point(vx, vy)))
    return robots


def move_robot(robot: Robot, bounds: Point, seconds: int) -> Point:
    return (robot.position + robot.velocity * seconds).wrap(bounds)


def move_all(robots: Sequence[Robot], bounds: Point, seconds: int) -> Counter:
    """Robot count per occupied position after ``seconds``."""

    return Counter(move_robot(robot, bounds, seconds) for robot in robots)


def safety_factor(robots: Sequence[Robot], bounds: Point = BOUNDS, seconds: int = SECONDS) -> int:
    """Product of the robot counts in the four quadrants.

    Robots exactly on the middle row or column belong to no quadrant.
    """

    mid_x, mid_y = bounds.x // 2, bounds.y // 2
    quadrants = [0, 0, 0, 0]
    for position, count in move_all(robots, bounds, seconds).items():
        if position.x == mid_x or position.y == mid_y:
            continue
        quadrants[(position.x > mid_x) + 2 * (position.y > mid_y)] += count
    product = 1
    for count in quadrants:
        product *= count
    return product


def occupancy(robots: Sequence[Robot], bounds: Point, seconds: int) -> np.ndarray:
    """Boolean ``(height, width)`` map of occupied cells after ``seconds``."""

    positions = np.array([robot.position.tuple() for robot in robots], dtype=np.int64)
    velocities = np.array([robot.velocity.tuple() for robot in robots], dtype=np.int64)
    moved = np.mod(positions + velocities * seconds, np.array(bounds.tuple()))
    grid = np.zeros((bounds.y, bounds.x), dtype=bool)
    grid[moved[:, 1], moved[:, 0]] = True
    return grid


def rows_with_run(grid: np.ndarray, length: int = RUN_LENGTH) -> np.ndarray:
    """Per row, whether it holds at least ``length`` horizontally adjacent robots.

    A sliding-window sum over the row prefix sums equals ``length`` exactly
    where the window is fully occupied.
    """

    if grid.shape[1] < length:
        return np.zeros(grid.shape[0], dtype=bool)
    prefix = np.zeros((grid.shape[0], grid.shape[1] + 1), dtype=np.int64)
    prefix[:, 1:] = np.cumsum(grid, axis=1)
    windows = prefix[:, length:] - prefix[:, :-length]
    return np.any(windows == length, axis=1)


def find_tree(robots: Sequence[Robot], bounds: Point = BOUNDS) -> int:
    """First second showing at least two rows with a long run of robots.

    The layout repeats every ``width * height`` seconds, so that is the
    search limit.

    Raises
    ------
    ValueError
        If no second in the full cycle shows the pattern.
    """

    for seconds in range(bounds.x * bounds.y):
        rows = rows_with_run(occupancy(robots, bounds, seconds))
        if np.count_nonzero(rows) >= FRAME_ROWS:
            return seconds
    raise ValueError("No Christmas tree found within one full cycle")


def render(robots: Sequence[Robot], bounds: Point, seconds: int) -> str:
    grid = Grid.filled(bounds.x, bounds.y, ".")
    for position in move_all(robots, bounds, seconds):
        grid[position] = "#"
    return grid.to_text()


def part1(robots: Sequence[Robot], bounds: Point = BOUNDS) -> int:
    return safety_factor(robots, bounds, SECONDS)


def part2(robots: Sequence[Robot], bounds: Point = BOUNDS) -> int:
    seconds = find_tree(robots, bounds)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tree after %d seconds:\n%s", seconds, render(robots, bounds, seconds))
    return seconds


def solve(path: Optional[InputSource] = None) -> Answers:
    robots = parse_input(read_input(DAY if path is None else path))
    answers = part1(robots), part2(robots)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
