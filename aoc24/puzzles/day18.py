"""Day 18: RAM Run.

Falling bytes corrupt cells of a square memory space. Part 1 runs A* across
the lattice left after the first kilobyte has fallen. Part 2 keeps dropping
bytes, cutting the corrupted cell out of the graph, and reports the first one
that leaves the exit unreachable.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import networkx as nx

from ..graph_utils import astar, lattice_graph, manhattan_heuristic, node_index, remove_node_edges
from ..grid_utils import Grid
from ..io_utils import clear_screen, read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, Coord, InputSource

logger = logging.getLogger(__name__)

DAY = 18
SIZE = 71
FALLEN = 1024


def parse_input(text: str) -> List[Coord]:
    coords = []
    for line in text.splitlines():
        if not line.strip():
            continue
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"Invalid byte position {line!r}")
        coords.append((int(x), int(y)))
    return coords


def display_graph(path: Sequence[int], corrupted: Sequence[Coord], size: int) -> str:
    grid = Grid.filled(size, size, ".")
    for x, y in corrupted:
        grid[x, y] = "#"
    for index in path:
        grid[index % size, index // size] = "O"
    return grid.to_text(sep=" ")


def shortest_exit(graph: nx.Graph, size: int):
    return astar(graph, 0, node_index(size - 1, size - 1, size), heuristic=manhattan_heuristic(size))


def part1(coords: Sequence[Coord], size: int = SIZE, fallen: int = FALLEN) -> int:
    graph = lattice_graph(size, size, coords[:fallen])
    found = shortest_exit(graph, size)
    if found is None:
        raise ValueError(f"Exit unreachable after {fallen} bytes")
    cost, path = found
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("\n%s", display_graph(path, coords[:fallen], size))
    return cost


def part2(coords: Sequence[Coord], size: int = SIZE, fallen: int = FALLEN) -> str:
    """Position ``x,y`` of the first byte that cuts the start off from the exit.

    The search is only repeated when the new byte lands on the current best
    path; any other byte leaves that path intact.
    """

    graph = lattice_graph(size, size, coords[:fallen])
    found = shortest_exit(graph, size)
    if found is None:
        raise ValueError(f"Exit already unreachable after {fallen} bytes")
    on_path = set(found[1])
    for count, (x, y) in enumerate(coords[fallen:], start=fallen + 1):
        index = node_index(x, y, size)
        remove_node_edges(graph, index)
        if index not in on_path:
            continue
        found = shortest_exit(graph, size)
        if found is None:
            return f"{x},{y}"
        on_path = set(found[1])
        if logger.isEnabledFor(logging.DEBUG):
            clear_screen()
            logger.debug("\n%s", display_graph(found[1], coords[:count], size))
    raise ValueError("Exit never became unreachable")


def solve(path: Optional[InputSource] = None) -> Answers:
    coords = parse_input(read_input(DAY if path is None else path))
    answers = part1(coords), part2(coords)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
