"""aoc24.types
=================

Type aliases shared by the helper modules and the daily solvers. The module is
definitions-only so importing it never triggers runtime side effects.
"""

from __future__ import annotations

from os import PathLike
from typing import Any, Callable, Hashable, List, Optional, Tuple, Union

# ---------------------------------------------------------------------------
# Spatial aliases
# ---------------------------------------------------------------------------
Coord = Tuple[int, int]
Cell = Any
Converter = Callable[[str], Cell]
Predicate = Callable[[Cell], bool]
EdgePredicate = Callable[[Cell, Cell], bool]

# ---------------------------------------------------------------------------
# Graph / search aliases
# ---------------------------------------------------------------------------
Node = Hashable
NodePath = List[Node]
SearchResult = Optional[Tuple[int, NodePath]]
Heuristic = Callable[[Node, Node], int]

# ---------------------------------------------------------------------------
# Inputs and answers
# ---------------------------------------------------------------------------
InputSource = Union[int, str, "PathLike[str]"]
Answer = Union[int, str]
Answers = Tuple[Answer, Answer]


__all__ = [
    "Coord",
    "Cell",
    "Converter",
    "Predicate",
    "EdgePredicate",
    "Node",
    "NodePath",
    "SearchResult",
    "Heuristic",
    "InputSource",
    "Answer",
    "Answers",
]
