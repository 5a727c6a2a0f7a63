"""Day 12: Garden Groups.

Regions are found with a breadth-first flood fill over same-plant cardinal
neighbours. Fence sides are counted one facing at a time: collect the cells
just outside the region in that facing, then count only the cells that start
a run along the perpendicular axis.
"""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Set, Tuple

from ..grid_utils import Grid
from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..point import CARDINAL_OFFSETS, Point
from ..types import Answers, InputSource

DAY = 12

Region = Set[Point]


def parse_input(text: str) -> Grid:
    return Grid.from_text(text)


def flood(grid: Grid, start: Point) -> Tuple[Region, int]:
    """Return the region containing ``start`` and its perimeter."""

    plant = grid[start]
    region = {start}
    queue = deque([start])
    perimeter = 0
    while queue:
        current = queue.popleft()
        same = [nbr for nbr in grid.cardinal_neighbors(current) if grid[nbr] == plant]
        perimeter += 4 - len(same)
        for nbr in same:
            if nbr not in region:
                region.add(nbr)
                queue.append(nbr)
    return region, perimeter


def find_regions(grid: Grid) -> List[Tuple[Region, int]]:
    """Every region of the garden with its perimeter, in row-major discovery order."""

    seen: Set[Point] = set()
    regions = []
    for point in grid.points():
        if point in seen:
            continue
        region, perimeter = flood(grid, point)
        seen |= region
        regions.append((region, perimeter))
    return regions


def count_sides(region: Region) -> int:
    sides = 0
    for facing in CARDINAL_OFFSETS:
        outside = {cell + facing for cell in region} - region
        # perpendicular to the facing; each run of outside cells is one side
        along = Point(facing.y, facing.x)
        sides += sum(1 for cell in outside if cell + along not in outside)
    return sides


def part1(grid: Grid) -> int:
    return sum(len(region) * perimeter for region, perimeter in find_regions(grid))


def part2(grid: Grid) -> int:
    return sum(len(region) * count_sides(region) for region, _ in find_regions(grid))


def solve(path: Optional[InputSource] = None) -> Answers:
    grid = parse_input(read_input(DAY if path is None else path))
    answers = part1(grid), part2(grid)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
