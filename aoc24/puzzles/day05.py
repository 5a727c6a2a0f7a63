"""Day 5: Print Queue.

Ordering rules ``a|b`` are loaded into a square ``numpy`` matrix where
``matrix[a, b]`` is ``-1`` when ``a`` must come before ``b``, ``1`` when it
must come after and ``0`` when no rule relates them. The matrix then acts
directly as a comparison function for checking and fixing updates.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..io_utils import read_input, report, split_sections
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 5

Rule = Tuple[int, int]


def parse_rules(block: str) -> List[Rule]:
    rules = []
    for line in block.splitlines():
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"Invalid ordering rule {line!r}")
        rules.append((int(before), int(after)))
    return rules


def parse_updates(block: str) -> List[List[int]]:
    updates = []
    for line in block.splitlines():
        try:
            updates.append([int(page) for page in line.split(",")])
        except ValueError as exc:
            raise ValueError(f"Invalid update {line!r}") from exc
    return updates


def parse_input(text: str) -> Tuple[List[Rule], List[List[int]]]:
    sections = split_sections(text)
    if len(sections) != 2:
        raise ValueError(f"Expected rules and updates sections, found {len(sections)}")
    return parse_rules(sections[0]), parse_updates(sections[1])


def create_matrix(rules: Sequence[Rule], size: Optional[int] = None) -> np.ndarray:
    """Build the ordering matrix for ``rules``.

    Parameters
    ----------
    rules:
        ``(before, after)`` page pairs.
    size:
        Matrix dimension; defaults to one past the largest page number.
    """

    if size is None:
        size = max(max(pair) for pair in rules) + 1
    matrix = np.zeros((size, size), dtype=np.int8)
    for before, after in rules:
        matrix[before, after] = -1
        matrix[after, before] = 1
    return matrix


def is_ordered(update: Sequence[int], matrix: np.ndarray) -> bool:
    return all(matrix[a, b] == -1 for a, b in zip(update, update[1:]))


def reorder(update: Sequence[int], matrix: np.ndarray) -> List[int]:
    return sorted(update, key=cmp_to_key(lambda a, b: int(matrix[a, b])))


def middle(update: Sequence[int]) -> int:
    return update[len(update) // 2]


def part1(updates: Sequence[Sequence[int]], matrix: np.ndarray) -> int:
    return sum(middle(update) for update in updates if is_ordered(update, matrix))


def part2(updates: Sequence[Sequence[int]], matrix: np.ndarray) -> int:
    return sum(middle(reorder(update, matrix)) for update in updates if not is_ordered(update, matrix))


def solve(path: Optional[InputSource] = None) -> Answers:
    rules, updates = parse_input(read_input(DAY if path is None else path))
    matrix = create_matrix(rules)
    answers = part1(updates, matrix), part2(updates, matrix)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
