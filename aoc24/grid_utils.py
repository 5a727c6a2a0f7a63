"""aoc24.grid_utils
=================

Rectangular grids and the neighbourhood / diagonal traversals the daily
solvers keep needing. A :class:`Grid` wraps a two dimensional ``numpy`` array
and is indexed with :class:`~aoc24.point.Point` values in ``(x, y)`` order, so
``grid[Point(3, 1)]`` reads column 3 of row 1. Out-of-bounds lookups never wrap
around on negative coordinates the way raw ``numpy`` indexing would.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .point import Point
from .types import Cell, Converter, Coord


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _to_array(rows: Sequence[Sequence[Any]]) -> np.ndarray:
    """Integer array when every cell is an ``int``, ``object`` array otherwise."""

    rows = [list(row) for row in rows]
    width = len(rows[0]) if rows else 0
    for number, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {number} has width {len(row)}, expected {width}")
    if rows and all(_is_int(cell) for row in rows for cell in row):
        return np.array(rows)
    array = np.empty((len(rows), width), dtype=object)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            array[y, x] = cell
    return array


# ---------------------------------------------------------------------------
# Grid container
# ---------------------------------------------------------------------------
class Grid:
    """Two dimensional cell container backed by ``numpy``.

    Parameters
    ----------
    data:
        Array (or nested sequence) of shape ``(height, width)``. Nested
        sequences of ``int`` become an integer array; anything else is stored
        cell by cell in an ``object`` array.

    Notes
    -----
    Only all-integer data keeps a numeric dtype. Strings and mixed cells are
    stored in an ``object`` array, so assigning ``"[]"`` into a grid parsed
    from single characters keeps the whole string.

    Reads go through :meth:`numpy.ndarray.item` so callers always receive
    native Python values (``str``, ``int`` or the stored object) rather than
    ``numpy`` scalars.
    """

    def __init__(self, data: Any) -> None:
        array = data if isinstance(data, np.ndarray) else _to_array(data)
        if array.ndim != 2:
            raise ValueError(f"Grid data must be two dimensional, got shape {array.shape}")
        if array.dtype.kind in "US":
            array = array.astype(object)
        self.data = array

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------
    @classmethod
    def from_text(cls, text: str, convert: Optional[Converter] = None) -> "Grid":
        """Parse one grid row per non-empty line of ``text``.

        Parameters
        ----------
        text:
            Raw puzzle text. Blank lines and surrounding whitespace are
            ignored.
        convert:
            Optional callable applied to every character, e.g. ``int`` for
            digit maps or an enum constructor for tile maps.

        Raises
        ------
        ValueError
            If the text is empty or the rows have different lengths.
        """

        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if not lines:
            raise ValueError("Cannot build a grid from empty text")
        width = len(lines[0])
        for number, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Row {number} has width {len(line)}, expected {width}")
        if convert is None:
            return cls([list(line) for line in lines])
        return cls([[convert(char) for char in line] for line in lines])

    @classmethod
    def filled(cls, width: int, height: int, fill: Cell) -> "Grid":
        """Grid of ``width`` x ``height`` cells all holding ``fill``."""

        if _is_int(fill):
            return cls(np.full((height, width), fill))
        return cls(np.full((height, width), fill, dtype=object))

    def copy(self) -> "Grid":
        return Grid(self.data.copy())

    # -----------------------------------------------------------------------
    # Shape
    # -----------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def __len__(self) -> int:
        return int(self.data.size)

    def in_bounds(self, point: Coord) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    # -----------------------------------------------------------------------
    # Cell access
    # -----------------------------------------------------------------------
    def get(self, point: Coord, default: Any = None) -> Any:
        """Return the cell at ``point`` or ``default`` when out of bounds."""

        if not self.in_bounds(point):
            return default
        x, y = point
        return self.data.item(y, x)

    def __getitem__(self, point: Coord) -> Any:
        if not self.in_bounds(point):
            raise IndexError(f"{Point(*point)} outside {self.width}x{self.height} grid")
        x, y = point
        return self.data.item(y, x)

    def __setitem__(self, point: Coord, value: Cell) -> None:
        if not self.in_bounds(point):
            raise IndexError(f"{Point(*point)} outside {self.width}x{self.height} grid")
        # numeric arrays would cast anything else silently
        if self.data.dtype != object and not (self.data.dtype.kind in "iu" and _is_int(value)):
            self.data = self.data.astype(object)
        x, y = point
        self.data[y, x] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.data.shape == other.data.shape and bool(np.all(self.data == other.data))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    # -----------------------------------------------------------------------
    # Iteration
    # -----------------------------------------------------------------------
    def rows(self) -> Iterator[List[Any]]:
        for row in self.data:
            yield row.tolist()

    def cols(self) -> Iterator[List[Any]]:
        for col in self.data.T:
            yield col.tolist()

    def points(self) -> Iterator[Point]:
        """Every point of the grid in row-major order."""

        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def items(self) -> Iterator[Tuple[Point, Any]]:
        for point in self.points():
            yield point, self.data.item(point.y, point.x)

    def find(self, value: Cell) -> Optional[Point]:
        """First point (row-major) holding ``value``, or ``None``."""

        for point, cell in self.items():
            if cell == value:
                return point
        return None

    def positions(self, value: Cell) -> List[Point]:
        return [point for point, cell in self.items() if cell == value]

    def count(self, value: Cell) -> int:
        return sum(1 for _, cell in self.items() if cell == value)

    # -----------------------------------------------------------------------
    # Neighbourhoods
    # -----------------------------------------------------------------------
    def cardinal_neighbors(self, point: Coord) -> List[Point]:
        """In-bounds neighbours of ``point`` in up, right, down, left order."""

        return [nbr for nbr in Point(*point).cardinal_neighbors() if self.in_bounds(nbr)]

    def neighbors(self, point: Coord, diagonal: bool = True) -> List[Point]:
        """In-bounds neighbours of ``point``; all eight unless ``diagonal`` is off."""

        origin = Point(*point)
        candidates = origin.neighbors() if diagonal else origin.cardinal_neighbors()
        return [nbr for nbr in candidates if self.in_bounds(nbr)]

    def diagonal_neighbors(self, point: Coord) -> List[Any]:
        """Cell values north-west, north-east, south-east and south-west of ``point``.

        Positions outside the grid contribute ``None`` so the result always has
        four entries and can be compared against fixed patterns.
        """

        return [self.get(nbr) for nbr in Point(*point).diagonal_neighbors()]

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------
    def to_text(self, render=str, sep: str = "") -> str:
        """Render the grid one line per row; inverse of :meth:`from_text`."""

        return "\n".join(sep.join(render(cell) for cell in row) for row in self.rows())

    def __str__(self) -> str:
        return self.to_text()


# ---------------------------------------------------------------------------
# Diagonal traversal
# ---------------------------------------------------------------------------
def iter_diag_nwse(grid: Grid) -> Iterator[List[Any]]:
    """Yield every top-left to bottom-right diagonal of ``grid``.

    Each diagonal is read from its top cell downward. Diagonals are produced
    from the bottom-left corner (a single cell) to the top-right corner, so a
    ``width`` x ``height`` grid yields ``width + height - 1`` of them.
    """

    for offset in range(-(grid.height - 1), grid.width):
        yield grid.data.diagonal(offset).tolist()


def iter_diag_nesw(grid: Grid) -> Iterator[List[Any]]:
    """Yield every top-right to bottom-left diagonal of ``grid``.

    Each diagonal is read from its top cell downward, moving one column left
    per row. Diagonals are produced from the top-left corner to the
    bottom-right corner.
    """

    mirrored = np.fliplr(grid.data)
    for offset in range(grid.width - 1, -grid.height, -1):
        yield mirrored.diagonal(offset).tolist()


def lines(grid: Grid, min_length: int = 1) -> Iterator[Sequence[Any]]:
    """Rows, columns and both diagonal families with at least ``min_length`` cells."""

    for family in (grid.rows(), grid.cols(), iter_diag_nwse(grid), iter_diag_nesw(grid)):
        for line in family:
            if len(line) >= min_length:
                yield line


__all__ = ["Grid", "iter_diag_nwse", "iter_diag_nesw", "lines"]
