"""Day 7: Bridge Repair.

Every equation is checked against every combination of operators, applied
strictly left to right.
"""

from __future__ import annotations

from itertools import product
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 7

Equation = Tuple[int, List[int]]


def concat(acc: int, value: int) -> int:
    """``12 || 345 == 12345`` without going through strings."""

    return acc * 10 ** len(str(value)) + value


OPERATORS: Dict[str, Callable[[int, int], int]] = {
    "+": lambda acc, value: acc + value,
    "*": lambda acc, value: acc * value,
    "|": concat,
}


def parse_input(text: str) -> List[Equation]:
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        target, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"Invalid equation {line!r}")
        equations.append((int(target), [int(value) for value in rest.split()]))
    return equations


def is_solvable(target: int, values: Sequence[int], ops: str) -> bool:
    first, rest = values[0], values[1:]
    for combo in product(ops, repeat=len(rest)):
        acc = first
        for op, value in zip(combo, rest):
            acc = OPERATORS[op](acc, value)
            # every operator is non-decreasing on positive inputs
            if acc > target:
                break
        if acc == target:
            return True
    return False


def calibrate(equations: Sequence[Equation], ops: str) -> int:
    return sum(target for target, values in equations if is_solvable(target, values, ops))


def part1(equations: Sequence[Equation]) -> int:
    return calibrate(equations, "+*")


def part2(equations: Sequence[Equation]) -> int:
    return calibrate(equations, "+*|")


def solve(path: Optional[InputSource] = None) -> Answers:
    equations = parse_input(read_input(DAY if path is None else path))
    answers = part1(equations), part2(equations)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
