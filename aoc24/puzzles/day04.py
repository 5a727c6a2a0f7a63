"""Day 4: Ceres Search.

Part 1 reads ``XMAS`` in all eight directions by scanning every row, column
and diagonal forwards and backwards. Part 2 looks for two ``MAS`` strings
crossing on an ``A``.
"""

from __future__ import annotations

from typing import Optional

from ..grid_utils import Grid, lines
from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 4
WORD = "XMAS"

# diagonal neighbours of an ``A`` read NW, NE, SE, SW
CROSS_PATTERNS = (
    ["M", "M", "S", "S"],
    ["M", "S", "S", "M"],
    ["S", "M", "M", "S"],
    ["S", "S", "M", "M"],
)


def parse_input(text: str) -> Grid:
    return Grid.from_text(text)


def part1(grid: Grid, word: str = WORD) -> int:
    reverse = word[::-1]
    total = 0
    for line in lines(grid, min_length=len(word)):
        text = "".join(line)
        total += text.count(word) + text.count(reverse)
    return total


def part2(grid: Grid) -> int:
    total = 0
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            if grid[x, y] == "A" and grid.diagonal_neighbors((x, y)) in CROSS_PATTERNS:
                total += 1
    return total


def solve(path: Optional[InputSource] = None) -> Answers:
    grid = parse_input(read_input(DAY if path is None else path))
    answers = part1(grid), part2(grid)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
