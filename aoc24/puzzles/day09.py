"""Day 9: Disk Fragmenter.

The dense disk map alternates file lengths and free-space lengths. Part 1
moves single blocks from the end of the disk into the leftmost gap; part 2
moves whole files, highest id first, into the leftmost gap large enough to
hold them.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..io_utils import read_input, report
from ..logging_utils import setup_logging
from ..types import Answers, InputSource

DAY = 9
FREE = -1

Span = Tuple[int, int]


def parse_input(text: str) -> List[int]:
    digits = text.strip()
    if not digits.isdigit():
        raise ValueError("Disk map must consist of digits only")
    return [int(digit) for digit in digits]


def expand(disk_map: Sequence[int]) -> List[int]:
    """Block-level layout: file ids, with :data:`FREE` marking empty blocks."""

    blocks: List[int] = []
    for index, length in enumerate(disk_map):
        blocks.extend([index // 2 if index % 2 == 0 else FREE] * length)
    return blocks


def compact_blocks(blocks: List[int]) -> List[int]:
    """Fill gaps from the left with blocks taken from the right, in place."""

    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] != FREE:
            left += 1
        while right >= 0 and blocks[right] == FREE:
            right -= 1
        if left >= right:
            return blocks
        blocks[left], blocks[right] = blocks[right], FREE


def compact_files(disk_map: Sequence[int]) -> List[int]:
    """Move each whole file once, from the highest id down, into the first gap that fits."""

    files: List[Span] = []
    gaps: List[Span] = []
    position = 0
    for index, length in enumerate(disk_map):
        (files if index % 2 == 0 else gaps).append((position, length))
        position += length

    for file_id in range(len(files) - 1, -1, -1):
        start, length = files[file_id]
        for slot, (gap_start, gap_length) in enumerate(gaps):
            if gap_start >= start:
                break
            if gap_length >= length:
                files[file_id] = (gap_start, length)
                gaps[slot] = (gap_start + length, gap_length - length)
                break

    blocks = [FREE] * position
    for file_id, (start, length) in enumerate(files):
        blocks[start:start + length] = [file_id] * length
    return blocks


def checksum(blocks: Sequence[int]) -> int:
    return sum(index * block for index, block in enumerate(blocks) if block != FREE)


def part1(disk_map: Sequence[int]) -> int:
    return checksum(compact_blocks(expand(disk_map)))


def part2(disk_map: Sequence[int]) -> int:
    return checksum(compact_files(disk_map))


def solve(path: Optional[InputSource] = None) -> Answers:
    disk_map = parse_input(read_input(DAY if path is None else path))
    answers = part1(disk_map), part2(disk_map)
    report(*answers)
    return answers


if __name__ == "__main__":
    setup_logging()
    solve()
