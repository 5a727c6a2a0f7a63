"""Day 13: Claw Contraption.

Each machine is a 2x2 linear system ``a * A + b * B = prize``. Cramer's rule
gives the unique solution; a machine only counts when both press counts are
non-negative integers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..io_utils import read_input, report, split_sections
from ..logging_utils import setup_logging
from ..point import Point
from ..types import Answers, InputSource

DAY = 13
A_COST = 3
B_COST = 1
PRIZE_OFFSET = 10_000_000_000_000

LINE = re.compile(r"^(Button A|Button B|Prize): X[+=](\d+), Y[+=](\d+)$")


@dataclass(frozen=True)
class Machine:
    a: Point
    b: Point
    prize: Point


def parse_machine(block: str) -> Machine:
    found = {}
    for line in block.splitlines():
        match = LINE.match(line.strip())
        if not match:
            raise ValueError(f"Invalid machine line {line!r}")
        found[match.group(1)] = Point(int(match.group(2)), int(match.group(3)))
    if len(found) != 3:
        raise ValueError(f"Incomplete machine description {block!r}")
    return Machine(found["Button A"], found["Button B"], found["Prize"])


def parse_input(text: str) -> List[Machine]:
    return [parse_machine(block) for block in split_sections(text)]


def presses(machine: Machine, offset: int = 0) -> Optional[Point]:
    """``(a, b)`` press counts reaching the prize, or ``None`` if impossible."""

    a, b = machine.a, machine.b
    px, py = machine.prize.x + offset, machine.prize.y + offset
    det = a.x * b.y - a.y * b.x
    if det == 0:
        return None
    a_num = px * b.y - py * b.x
    b_num = a.x * py - a.y * px
    if a_num % det or b_num % det:
        return None
    a_count, b_count = a_num // det, b_num // det
    if a_count < 0 or b_count < 0:
        return None
    return Point(a_count, b_count)


def tokens(machines: Sequence[Machine], offset: int = 0) -> int:
    total = 0
    for machine in machines:
        counts = presses(machine, offset)
        if counts is not None:
            total += A_COST * counts.x + B_COST * counts.y
    return total


def part1(machines: Sequence[Machine]) -> int:
    return tokens(machines)


def part2(machines: Sequence[Machine]) -> int:
    return tokens(machines, PRIZE_OFFSET)


def solve(path: Optional[InputSource] = None) -> Answers:
    machines = parse_input(read_input(DAY if path is None else path))
    answers = part1(machines), part2(machines)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
