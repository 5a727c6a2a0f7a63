from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc24.grid_utils import Grid, iter_diag_nesw, iter_diag_nwse, lines
from aoc24.point import Point

LETTERS = "abc\ndef\nghi\n"


def test_from_text_shape_and_access():
    grid = Grid.from_text("abc\ndef")
    assert (grid.width, grid.height, len(grid)) == (3, 2, 6)
    assert grid[Point(1, 0)] == "b"
    assert grid[2, 1] == "f"
    assert grid.get((-1, 0)) is None
    assert grid.get((3, 0), "#") == "#"
    with pytest.raises(IndexError):
        grid[5, 5]


def test_from_text_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Grid.from_text("abc\nde")
    with pytest.raises(ValueError):
        Grid.from_text("\n\n")


def test_from_text_with_converter_returns_native_values():
    grid = Grid.from_text("12\n34", convert=int)
    assert grid[1, 1] == 4
    assert type(grid[0, 0]) is int


def test_setitem_and_copy_are_independent():
    grid = Grid.from_text("..\n..")
    clone = grid.copy()
    clone[Point(1, 1)] = "#"
    assert grid[1, 1] == "."
    assert clone.to_text() == "..\n.#"
    assert grid != clone


def test_filled_and_to_text():
    grid = Grid.filled(3, 2, ".")
    grid[0, 1] = "#"
    assert grid.to_text() == "...\n#.."
    assert grid.to_text(sep=" ") == ". . .\n# . ."
    assert Grid.from_text(LETTERS).to_text() == LETTERS.strip()


def test_find_positions_and_count():
    grid = Grid.from_text("a.a\n.b.")
    assert grid.find("a") == Point(0, 0)
    assert grid.find("z") is None
    assert grid.positions("a") == [Point(0, 0), Point(2, 0)]
    assert grid.count(".") == 3


def test_rows_and_cols():
    grid = Grid.from_text("abc\ndef")
    assert list(grid.rows()) == [["a", "b", "c"], ["d", "e", "f"]]
    assert list(grid.cols()) == [["a", "d"], ["b", "e"], ["c", "f"]]


def test_cardinal_neighbors_clip_to_grid():
    grid = Grid.from_text(LETTERS)
    assert grid.cardinal_neighbors(Point(0, 0)) == [Point(1, 0), Point(0, 1)]
    assert grid.cardinal_neighbors(Point(1, 1)) == [Point(1, 0), Point(2, 1), Point(1, 2), Point(0, 1)]
    assert len(grid.neighbors(Point(1, 1))) == 8
    assert len(grid.neighbors(Point(1, 1), diagonal=False)) == 4
    assert len(grid.neighbors(Point(2, 2))) == 3


def test_diagonal_neighbors_pad_with_none():
    grid = Grid.from_text(LETTERS)
    assert grid.diagonal_neighbors(Point(1, 1)) == ["a", "c", "i", "g"]
    assert grid.diagonal_neighbors(Point(0, 0)) == [None, None, "e", None]


def test_iter_diag_nwse():
    grid = Grid.from_text("abc\ndef")
    assert list(iter_diag_nwse(grid)) == [["d"], ["a", "e"], ["b", "f"], ["c"]]


def test_iter_diag_nesw():
    grid = Grid.from_text("abc\ndef")
    assert list(iter_diag_nesw(grid)) == [["a"], ["b", "d"], ["c", "e"], ["f"]]


def test_diagonals_cover_tall_grids_once():
    grid = Grid.from_text("ab\ncd\nef\ngh")
    for family in (iter_diag_nwse(grid), iter_diag_nesw(grid)):
        diagonals = list(family)
        assert len(diagonals) == grid.width + grid.height - 1
        assert sorted(cell for diag in diagonals for cell in diag) == list("abcdefgh")


def test_lines_filters_short_lines():
    grid = Grid.from_text(LETTERS)
    # 3 rows, 3 columns and the two main diagonals
    assert len(list(lines(grid, min_length=3))) == 8
    assert len(list(lines(grid))) == 3 + 3 + 5 + 5


def test_setitem_keeps_whole_strings():
    grid = Grid.filled(2, 1, ".")
    grid[0, 0] = "[]"
    assert grid[0, 0] == "[]"
    parsed = Grid.from_text("..")
    parsed[1, 0] = "[]"
    assert parsed.to_text() == ".[]"


def test_setitem_keeps_value_types():
    grid = Grid.from_text("..")
    grid[0, 0] = 12
    assert grid[0, 0] == 12
    assert type(grid[0, 0]) is int

    numbers = Grid.from_text("12", convert=int)
    numbers[1, 0] = "#"
    numbers[0, 0] = 2.5
    assert numbers[1, 0] == "#"
    assert numbers[0, 0] == 2.5

    counts = Grid.filled(2, 2, 0)
    counts[1, 1] = 7
    assert counts.data.dtype.kind == "i"
    assert counts[1, 1] == 7


def test_mixed_converter_output_keeps_ints():
    grid = Grid.from_text("0.\n12", convert=lambda char: int(char) if char.isdigit() else char)
    assert grid[0, 0] == 0
    assert type(grid[0, 0]) is int
    assert grid[1, 0] == "."
    assert list(grid.rows()) == [[0, "."], [1, 2]]
