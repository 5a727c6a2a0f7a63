from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc24.point import Point
from aoc24.puzzles import day01, day02, day03, day04, day05, day06, day07, day08, day09

DAY01_INPUT = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"

DAY02_INPUT = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""

DAY03_INPUT = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"

DAY04_INPUT = """\
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""

DAY05_INPUT = """\
47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""

DAY06_INPUT = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

DAY07_INPUT = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""

DAY08_INPUT = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

DAY09_INPUT = "2333133121414131402\n"


def _blocks(layout: str):
    return [day09.FREE if char == "." else int(char) for char in layout]


# ---------------------------------------------------------------------------
# Day 01
# ---------------------------------------------------------------------------
def test_day01_example():
    left, right = day01.parse_input(DAY01_INPUT)
    assert left == [1, 2, 3, 3, 3, 4]
    assert day01.part1(left, right) == 11
    assert day01.part2(left, right) == 31


def test_day01_solve_reads_file(tmp_path: Path, capsys):
    source = tmp_path / "day01.txt"
    source.write_text(DAY01_INPUT)
    assert day01.solve(source) == (11, 31)
    assert "Part 1: 11" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Day 02
# ---------------------------------------------------------------------------
def test_day02_safety_per_report():
    reports = day02.parse_input(DAY02_INPUT)
    assert [day02.is_safe(levels) for levels in reports] == [True, False, False, False, False, True]
    assert [day02.is_safe_dampened(levels) for levels in reports] == [True, False, False, True, True, True]
    assert day02.part1(reports) == 2
    assert day02.part2(reports) == 4


# ---------------------------------------------------------------------------
# Day 03
# ---------------------------------------------------------------------------
def test_day03_enabled_products():
    memory = day03.parse_input(DAY03_INPUT)
    assert day03.scan(memory) == (161, 48)
    assert day03.part1(memory) == 161
    assert day03.part2(memory) == 48


def test_day03_ignores_malformed_calls():
    assert day03.part1("mul(4*mul(6,9!?(12,34)mul ( 2 , 4 )mul[3,7]") == 0


def test_day03_accepts_long_operands():
    assert day03.part1("mul(1234,5)do_mul(2,4)") == 6178


# ---------------------------------------------------------------------------
# Day 04
# ---------------------------------------------------------------------------
def test_day04_example():
    grid = day04.parse_input(DAY04_INPUT)
    assert day04.part1(grid) == 18
    assert day04.part2(grid) == 9


def test_day04_reads_every_direction():
    grid = day04.parse_input("S..S..S\n.A.A.A.\n..MMM..\nSAMXMAS\n..MMM..\n.A.A.A.\nS..S..S")
    assert day04.part1(grid) == 8


# ---------------------------------------------------------------------------
# Day 05
# ---------------------------------------------------------------------------
def test_day05_example():
    rules, updates = day05.parse_input(DAY05_INPUT)
    matrix = day05.create_matrix(rules)
    assert matrix[47, 53] == -1 and matrix[53, 47] == 1
    assert [day05.is_ordered(update, matrix) for update in updates] == [True, True, True, False, False, False]
    assert day05.reorder([75, 97, 47, 61, 53], matrix) == [97, 75, 47, 61, 53]
    assert day05.part1(updates, matrix) == 143
    assert day05.part2(updates, matrix) == 123


def test_day05_tolerates_padded_separator():
    rules, updates = day05.parse_input(DAY05_INPUT.replace("\n\n", "\n   \n"))
    assert len(rules) == 21
    assert len(updates) == 6


def test_day05_rejects_missing_section():
    with pytest.raises(ValueError):
        day05.parse_input("47|53\n97|13\n")


# ---------------------------------------------------------------------------
# Day 06
# ---------------------------------------------------------------------------
def test_day06_example():
    grid, start = day06.parse_input(DAY06_INPUT)
    assert start == Point(4, 6)
    assert grid[start] == "."
    assert day06.part1(grid, start) == 41
    assert day06.part2(grid, start) == 6


def test_day06_loop_detection():
    grid, start = day06.parse_input(DAY06_INPUT)
    assert day06.is_loop(grid, start, Point(3, 6))
    assert not day06.is_loop(grid, start)


def test_day06_rejects_unknown_tile():
    with pytest.raises(ValueError):
        day06.parse_input("..^\n.x.")


# ---------------------------------------------------------------------------
# Day 07
# ---------------------------------------------------------------------------
def test_day07_example():
    equations = day07.parse_input(DAY07_INPUT)
    assert equations[0] == (190, [10, 19])
    assert day07.part1(equations) == 3749
    assert day07.part2(equations) == 11387


def test_day07_operators():
    assert day07.concat(15, 6) == 156
    assert day07.concat(12, 345) == 12345
    assert day07.is_solvable(190, [10, 19], "+*")
    assert not day07.is_solvable(156, [15, 6], "+*")
    assert day07.is_solvable(7290, [6, 8, 6, 15], "+*|")


# ---------------------------------------------------------------------------
# Day 08
# ---------------------------------------------------------------------------
def test_day08_example():
    antennas, limit = day08.parse_input(DAY08_INPUT)
    assert limit == Point(11, 11)
    assert day08.part1(antennas, limit) == 14
    assert day08.part2(antennas, limit) == 34


def test_day08_antinode_pair():
    antennas, limit = day08.parse_input(DAY08_INPUT)
    a, b = antennas["0"][1:3]
    assert day08.antinodes(a, b, limit) == {Point(9, 4), Point(3, 1)}


def test_day08_harmonics_include_antennas():
    limit = Point(9, 9)
    found = day08.harmonics(Point(0, 0), Point(3, 1), limit)
    assert found == {Point(0, 0), Point(3, 1), Point(6, 2), Point(9, 3)}


# ---------------------------------------------------------------------------
# Day 09
# ---------------------------------------------------------------------------
def test_day09_layouts():
    disk_map = day09.parse_input(DAY09_INPUT)
    blocks = day09.expand(disk_map)
    assert blocks == _blocks("00...111...2...333.44.5555.6666.777.888899")
    assert day09.compact_blocks(blocks) == _blocks("0099811188827773336446555566..............")
    assert day09.compact_files(disk_map) == _blocks("00992111777.44.333....5555.6666.....8888..")


def test_day09_example():
    disk_map = day09.parse_input(DAY09_INPUT)
    assert day09.part1(disk_map) == 1928
    assert day09.part2(disk_map) == 2858


def test_day09_rejects_non_digits():
    with pytest.raises(ValueError):
        day09.parse_input("12a4")
