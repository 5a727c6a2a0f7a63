"""aoc24.point
=================

Integer 2D points and the four compass directions. Coordinates follow screen
conventions: ``x`` grows to the right and ``y`` grows downward, so ``UP`` is
``y - 1``. Points double as vectors, which keeps neighbour offsets, robot
velocities and antenna deltas in the same type.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import List, NamedTuple, Tuple

from .types import Coord


class Point(NamedTuple):
    """Immutable, hashable 2D point / vector.

    ``Point`` is a :class:`~typing.NamedTuple` so it sorts by ``x`` and then
    ``y``, unpacks like a tuple and can be used directly as a set member,
    dict key or graph node.
    """

    x: int
    y: int

    @classmethod
    def from_tuple(cls, value: Coord) -> "Point":
        x, y = value
        return cls(int(x), int(y))

    def tuple(self) -> Coord:
        return (self.x, self.y)

    # NamedTuple would otherwise concatenate / repeat.
    def __add__(self, other: Tuple[int, int]) -> "Point":  # type: ignore[override]
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other: Tuple[int, int]) -> "Point":
        return Point(self.x - other[0], self.y - other[1])

    def __mul__(self, factor: int) -> "Point":  # type: ignore[override]
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # -----------------------------------------------------------------------
    # Metrics
    # -----------------------------------------------------------------------
    def manhattan(self, other: "Point") -> int:
        """Taxicab distance between ``self`` and ``other``."""

        return abs(self.x - other.x) + abs(self.y - other.y)

    def distance(self, other: "Point") -> float:
        """Euclidean distance between ``self`` and ``other``."""

        return math.hypot(other.x - self.x, other.y - self.y)

    def slope(self, other: "Point") -> float:
        """Slope of the line through ``self`` and ``other``.

        Raises
        ------
        ZeroDivisionError
            When both points share an ``x`` coordinate.
        """

        return (other.y - self.y) / (other.x - self.x)

    def normal_vector(self, other: "Point") -> Tuple[float, float]:
        """Return ``self`` scaled by the inverse of its distance to ``other``."""

        dist = self.distance(other)
        return self.x / dist, self.y / dist

    # -----------------------------------------------------------------------
    # Bounds
    # -----------------------------------------------------------------------
    def in_bounds(self, lo: "Point", hi: "Point") -> bool:
        """Check ``lo <= self <= hi`` component-wise, inclusive on both ends."""

        return lo.x <= self.x <= hi.x and lo.y <= self.y <= hi.y

    def wrap(self, bounds: "Point") -> "Point":
        """Wrap onto a torus of size ``bounds``; the result is never negative."""

        return Point(self.x % bounds.x, self.y % bounds.y)

    # -----------------------------------------------------------------------
    # Neighbourhoods
    # -----------------------------------------------------------------------
    def cardinal_neighbors(self) -> List["Point"]:
        """Up, right, down and left of ``self``, in that order."""

        return [self + offset for offset in CARDINAL_OFFSETS]

    def diagonal_neighbors(self) -> List["Point"]:
        """North-west, north-east, south-east and south-west of ``self``."""

        return [self + offset for offset in DIAGONAL_OFFSETS]

    def neighbors(self) -> List["Point"]:
        """All eight surrounding points, cardinal ones first."""

        return self.cardinal_neighbors() + self.diagonal_neighbors()


ORIGIN = Point(0, 0)
CARDINAL_OFFSETS: Tuple[Point, ...] = (Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0))
DIAGONAL_OFFSETS: Tuple[Point, ...] = (Point(-1, -1), Point(1, -1), Point(1, 1), Point(-1, 1))


class Direction(Enum):
    """Compass directions in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Point:
        return CARDINAL_OFFSETS[self.value]

    def turn_right(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    def turn_left(self) -> "Direction":
        return Direction((self.value + 3) % 4)

    def reverse(self) -> "Direction":
        return Direction((self.value + 2) % 4)

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Parse one of ``^ > v <``."""

        try:
            return _ARROWS[char]
        except KeyError as exc:
            raise ValueError(f"Unknown direction character {char!r}") from exc

    def to_char(self) -> str:
        return "^>v<"[self.value]


_ARROWS = {"^": Direction.UP, ">": Direction.RIGHT, "v": Direction.DOWN, "<": Direction.LEFT}


__all__ = [
    "Point",
    "Direction",
    "ORIGIN",
    "CARDINAL_OFFSETS",
    "DIAGONAL_OFFSETS",
]
