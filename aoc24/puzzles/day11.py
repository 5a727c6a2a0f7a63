"""Day 11: Plutonian Pebbles.

Stones with the same engraving always evolve identically, so only the count
of each engraving is tracked between blinks.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Tuple

from ..io_utils import input_path, read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 11
PUZZLE_STONES = "5178527 8525 22 376299 3 69312 0 275"
PART1_BLINKS = 25
PART2_BLINKS = 75


def parse_input(text: str) -> Counter:
    try:
        return Counter(int(stone) for stone in text.split())
    except ValueError as exc:
        raise ValueError(f"Invalid stone list {text!r}") from exc


def split_stone(stone: int, digits: int) -> Tuple[int, int]:
    return divmod(stone, 10 ** (digits // 2))


def blink(stones: Counter) -> Counter:
    after: Counter = Counter()
    for stone, count in stones.items():
        if stone == 0:
            after[1] += count
            continue
        digits = len(str(stone))
        if digits % 2 == 0:
            left, right = split_stone(stone, digits)
            after[left] += count
            after[right] += count
        else:
            after[stone * 2024] += count
    return after


def blink_many(stones: Counter, times: int) -> Counter:
    for _ in range(times):
        stones = blink(stones)
    return stones


def part1(stones: Counter) -> int:
    return sum(blink_many(stones, PART1_BLINKS).values())


def part2(stones: Counter) -> int:
    return sum(blink_many(stones, PART2_BLINKS).values())


def solve(path: Optional[InputSource] = None) -> Answers:
    """Use the day's input file when there is one, else the inline stone list."""

    if path is None and not input_path(DAY).exists():
        text = PUZZLE_STONES
    else:
        text = read_input(DAY if path is None else path)
    stones = parse_input(text)
    answers = part1(stones), part2(stones)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
