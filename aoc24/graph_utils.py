"""aoc24.graph_utils
=================

Thin adapters over :mod:`networkx` for grid-shaped graphs.

Two node conventions are supported. The *flat index* helpers number the cells
of a ``width`` x ``height`` lattice row-major (``y * width + x``), which keeps
node keys small when the grid itself is never materialised (day 18). The
*point keyed* builders turn a :class:`~aoc24.grid_utils.Grid` into a graph
whose nodes are :class:`~aoc24.point.Point` values so search results can be
mapped straight back onto the grid.
"""

from __future__ import annotations

import logging
from typing import Collection, List, Optional, Tuple

import networkx as nx

from .grid_utils import Grid
from .point import Direction, Point
from .types import Coord, EdgePredicate, Heuristic, Node, Predicate, SearchResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Flat index helpers
# ---------------------------------------------------------------------------
def node_index(x: int, y: int, width: int) -> int:
    """Row-major index of ``(x, y)`` in a lattice ``width`` cells wide."""

    return y * width + x


def node_xy(index: int, width: int) -> Coord:
    """Inverse of :func:`node_index`."""

    return index % width, index // width


def neighbor_indices(index: int, width: int, height: int) -> List[Tuple[Direction, int]]:
    """In-bounds cardinal neighbours of ``index`` as ``(direction, index)`` pairs.

    Neighbours are returned in up, right, down, left order; positions that
    would fall off the lattice (including wrapping across a row boundary) are
    skipped.
    """

    x, y = node_xy(index, width)
    out: List[Tuple[Direction, int]] = []
    for direction in Direction:
        col, row = Point(x, y) + direction.delta
        if 0 <= col < width and 0 <= row < height:
            out.append((direction, node_index(col, row, width)))
    return out


def lattice_graph(width: int, height: int, blocked: Collection[Coord] = ()) -> nx.Graph:
    """Undirected unit-weight lattice over the open cells of a ``width`` x ``height`` area.

    Parameters
    ----------
    width, height:
        Lattice dimensions.
    blocked:
        ``(x, y)`` coordinates that get no node at all.

    Returns
    -------
    networkx.Graph
        Nodes are flat indices (see :func:`node_index`); every edge carries
        ``weight=1``.
    """

    closed = {node_index(x, y, width) for x, y in blocked}
    graph = nx.Graph()
    for index in range(width * height):
        if index in closed:
            continue
        graph.add_node(index)
        for _, nbr in neighbor_indices(index, width, height):
            if nbr not in closed:
                graph.add_edge(index, nbr, weight=1)
    return graph


# ---------------------------------------------------------------------------
# Point keyed builders
# ---------------------------------------------------------------------------
def grid_graph(grid: Grid, passable: Predicate) -> nx.Graph:
    """Undirected graph over the cells of ``grid`` accepted by ``passable``."""

    graph = nx.Graph()
    for point, cell in grid.items():
        if not passable(cell):
            continue
        graph.add_node(point)
        for nbr in grid.cardinal_neighbors(point):
            if passable(grid[nbr]):
                graph.add_edge(point, nbr, weight=1)
    return graph


def grid_digraph(grid: Grid, connects: EdgePredicate) -> nx.DiGraph:
    """Directed graph with an edge ``a -> b`` wherever ``connects(grid[a], grid[b])``.

    Every cell becomes a node, even when it has no outgoing or incoming
    edges.
    """

    graph = nx.DiGraph()
    for point, cell in grid.items():
        graph.add_node(point)
        for nbr in grid.cardinal_neighbors(point):
            if connects(cell, grid[nbr]):
                graph.add_edge(point, nbr, weight=1)
    return graph


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def astar(graph: nx.Graph, start: Node, goal: Node, heuristic: Optional[Heuristic] = None) -> SearchResult:
    """Run A* from ``start`` to ``goal``.

    Parameters
    ----------
    graph:
        Any :mod:`networkx` graph. Edge cost is the ``weight`` attribute,
        defaulting to 1 for edges without one.
    start, goal:
        Node keys. Either one missing from ``graph`` counts as unreachable.
    heuristic:
        Admissible estimate ``h(node, goal)``; ``None`` degrades to Dijkstra.

    Returns
    -------
    tuple[int, list] | None
        ``(cost, path)`` with ``path`` running from ``start`` to ``goal``
        inclusive, or ``None`` when no path exists.
    """

    if start not in graph or goal not in graph:
        logger.debug("A* endpoint missing from graph: start=%s goal=%s", start, goal)
        return None
    try:
        path = nx.astar_path(graph, start, goal, heuristic=heuristic, weight="weight")
    except nx.NetworkXNoPath:
        return None
    cost = sum(graph[u][v].get("weight", 1) for u, v in zip(path, path[1:]))
    return int(cost), path


def manhattan_heuristic(width: int):
    """A* heuristic for flat-index lattices ``width`` cells wide."""

    def estimate(node: int, goal: int) -> int:
        return Point(*node_xy(node, width)).manhattan(Point(*node_xy(goal, width)))

    return estimate


def point_heuristic(node: Point, goal: Point) -> int:
    """Manhattan distance between point keyed nodes."""

    return Point(*node).manhattan(Point(*goal))


def remove_node_edges(graph: nx.Graph, node: Node) -> None:
    """Drop every edge incident to ``node`` while keeping the node itself."""

    if node not in graph:
        return
    edges = list(graph.edges(node))
    if graph.is_directed():
        edges.extend(graph.in_edges(node))
    graph.remove_edges_from(edges)


__all__ = [
    "node_index",
    "node_xy",
    "neighbor_indices",
    "lattice_graph",
    "grid_graph",
    "grid_digraph",
    "astar",
    "manhattan_heuristic",
    "point_heuristic",
    "remove_node_edges",
]
