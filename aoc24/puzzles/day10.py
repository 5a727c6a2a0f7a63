"""Day 10: Hoof It.

The topographic map becomes a directed graph with an edge wherever a step
climbs by exactly one. A trailhead's score is the number of height-9 cells
reachable from it; its rating is the number of distinct trails, counted with
a pass over the graph in reverse topological order.
"""

from __future__ import annotations

from typing import Dict, Optional

import networkx as nx

from ..graph_utils import grid_digraph
from ..grid_utils import Grid
from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..point import Point
from ..types import Answers, InputSource

DAY = 10
TRAILHEAD = 0
SUMMIT = 9


def _height(char: str) -> int:
    if not char.isdigit():
        raise ValueError(f"Invalid height {char!r}")
    return int(char)


def parse_input(text: str) -> Grid:
    return Grid.from_text(text, convert=_height)


def trail_graph(grid: Grid) -> nx.DiGraph:
    return grid_digraph(grid, lambda here, there: there - here == 1)


def part1(grid: Grid) -> int:
    graph = trail_graph(grid)
    total = 0
    for head in grid.positions(TRAILHEAD):
        total += sum(1 for node in nx.descendants(graph, head) if grid[node] == SUMMIT)
    return total


def part2(grid: Grid) -> int:
    graph = trail_graph(grid)
    trails: Dict[Point, int] = {}
    for node in reversed(list(nx.topological_sort(graph))):
        if grid[node] == SUMMIT:
            trails[node] = 1
        else:
            trails[node] = sum(trails[nbr] for nbr in graph.successors(node))
    return sum(trails[head] for head in grid.positions(TRAILHEAD))


def solve(path: Optional[InputSource] = None) -> Answers:
    grid = parse_input(read_input(DAY if path is None else path))
    answers = part1(grid), part2(grid)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
