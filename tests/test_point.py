from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc24.point import CARDINAL_OFFSETS, ORIGIN, Direction, Point


def test_point_arithmetic():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)
    assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
    assert Point(2, -3) * 5 == Point(10, -15)
    assert 2 * Point(1, 1) == Point(2, 2)
    assert -Point(1, -1) == Point(-1, 1)


def test_point_is_hashable_and_prints_like_a_pair():
    points = {Point(1, 2), Point.from_tuple((1, 2)), Point(2, 1)}
    assert len(points) == 2
    assert str(Point(1, 2)) == "(1, 2)"
    assert Point(3, 4).tuple() == (3, 4)


def test_metrics():
    assert Point(1, 1).manhattan(Point(4, -3)) == 7
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)
    assert Point(0, 0).slope(Point(2, 4)) == pytest.approx(2.0)
    assert Point(3, 4).normal_vector(ORIGIN) == pytest.approx((0.6, 0.8))


def test_slope_of_vertical_line_raises():
    with pytest.raises(ZeroDivisionError):
        Point(1, 0).slope(Point(1, 5))


def test_in_bounds_is_inclusive():
    lo, hi = Point(0, 0), Point(9, 4)
    assert Point(0, 0).in_bounds(lo, hi)
    assert Point(9, 4).in_bounds(lo, hi)
    assert not Point(10, 4).in_bounds(lo, hi)
    assert not Point(-1, 2).in_bounds(lo, hi)


def test_wrap_never_goes_negative():
    assert Point(-1, 8).wrap(Point(11, 7)) == Point(10, 1)
    assert Point(22, -14).wrap(Point(11, 7)) == Point(0, 0)


def test_neighbour_orders():
    assert ORIGIN.cardinal_neighbors() == [Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0)]
    assert ORIGIN.cardinal_neighbors() == list(CARDINAL_OFFSETS)
    assert Point(5, 5).diagonal_neighbors() == [Point(4, 4), Point(6, 4), Point(6, 6), Point(4, 6)]
    assert len(set(Point(5, 5).neighbors())) == 8


def test_direction_turns():
    assert Direction.UP.turn_right() is Direction.RIGHT
    assert Direction.LEFT.turn_right() is Direction.UP
    assert Direction.UP.turn_left() is Direction.LEFT
    assert Direction.DOWN.reverse() is Direction.UP
    assert Direction.RIGHT.delta == Point(1, 0)


def test_direction_from_char():
    assert [Direction.from_char(c) for c in "^>v<"] == list(Direction)
    assert "".join(d.to_char() for d in Direction) == "^>v<"
    with pytest.raises(ValueError):
        Direction.from_char("x")
