"""Day 16: Reindeer Maze.

The maze is searched over ``(position, heading)`` states. Stepping forward
costs 1 and turning 90 degrees in place costs 1000. All end headings feed a
single sink node so one Dijkstra run from the start gives the best score, and
one run backwards from the sink marks every state that lies on some best
path.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Optional, Tuple

import networkx as nx

from ..grid_utils import Grid
from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..point import Direction, Point
from ..types import Answers, InputSource

logger = logging.getLogger(__name__)

DAY = 16
WALL = "#"
OPEN = "."
START = "S"
END = "E"
STEP_COST = 1
TURN_COST = 1000
SINK = "sink"

State = Tuple[Point, Direction]


class Maze:
    """Parsed maze plus its state graph."""

    def __init__(self, grid: Grid, start: Point, end: Point) -> None:
        self.grid = grid
        self.start = start
        self.end = end
        self.graph = self._build_graph()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def _build_graph(self) -> nx.DiGraph:
        graph = nx.DiGraph()
        for point, cell in self.grid.items():
            if cell == WALL:
                continue
            for heading in Direction:
                state = (point, heading)
                graph.add_edge(state, (point, heading.turn_left()), weight=TURN_COST)
                graph.add_edge(state, (point, heading.turn_right()), weight=TURN_COST)
                ahead = point + heading.delta
                if self.grid.get(ahead, WALL) != WALL:
                    graph.add_edge(state, (ahead, heading), weight=STEP_COST)
        for heading in Direction:
            graph.add_edge((self.end, heading), SINK, weight=0)
        return graph

    @property
    def start_state(self) -> State:
        return (self.start, Direction.RIGHT)

    def display_path(self, tiles) -> str:
        marked = self.grid.copy()
        for point in tiles:
            marked[point] = "O"
        return marked.to_text()


def parse_input(text: str) -> Maze:
    grid = Grid.from_text(text)
    start = grid.find(START)
    end = grid.find(END)
    if start is None:
        raise ValueError("Maze has no start tile")
    if end is None:
        raise ValueError("Maze has no end tile")
    for point, cell in grid.items():
        if cell not in (WALL, OPEN, START, END):
            raise ValueError(f"Invalid maze character {cell!r} at {point}")
    grid[start] = OPEN
    grid[end] = OPEN
    return Maze(grid, start, end)


def distances_from_start(maze: Maze) -> Dict[Hashable, int]:
    return nx.single_source_dijkstra_path_length(maze.graph, maze.start_state, weight="weight")


def distances_to_end(maze: Maze) -> Dict[Hashable, int]:
    return nx.single_source_dijkstra_path_length(maze.graph.reverse(copy=False), SINK, weight="weight")


def part1(maze: Maze) -> int:
    forward = distances_from_start(maze)
    if SINK not in forward:
        raise ValueError("End tile is unreachable")
    return int(forward[SINK])


def part2(maze: Maze) -> int:
    forward = distances_from_start(maze)
    if SINK not in forward:
        raise ValueError("End tile is unreachable")
    best = forward[SINK]
    backward = distances_to_end(maze)
    tiles = {
        state[0]
        for state, cost in forward.items()
        if state != SINK and state in backward and cost + backward[state] == best
    }
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Best path tiles:\n%s", maze.display_path(tiles))
    return len(tiles)


def solve(path: Optional[InputSource] = None) -> Answers:
    maze = parse_input(read_input(DAY if path is None else path))
    answers = part1(maze), part2(maze)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
