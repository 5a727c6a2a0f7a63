"""aoc24.puzzles
=================

One module per puzzle day. Every module exposes ``parse_input``, ``part1``,
``part2`` and ``solve``; ``solve`` reads the day's input, prints both answers
and returns them. Modules can be run directly, e.g.
``python -m aoc24.puzzles.day05``.
"""
