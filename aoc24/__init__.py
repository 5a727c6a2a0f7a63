"""Public package interface for aoc24."""

from .graph_utils import astar, grid_digraph, grid_graph, lattice_graph
from .grid_utils import Grid, iter_diag_nesw, iter_diag_nwse
from .point import Direction, Point

__all__ = [
    "Point",
    "Direction",
    "Grid",
    "iter_diag_nesw",
    "iter_diag_nwse",
    "astar",
    "grid_graph",
    "grid_digraph",
    "lattice_graph",
]
