"""Day 4: finding paper rolls that a forklift can reach."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

from aoc2025.runner import Day, execute_day, load_details

PAPER_ROLL = "@"
EMPTY = "."

_CROWD_LIMIT = 4
_OFFSETS = tuple(
    (row, column)
    for row in (-1, 0, 1)
    for column in (-1, 0, 1)
    if (row, column) != (0, 0)
)

Cell = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _rolls(text: str) -> set[Cell]:
    """Positions of every paper roll; all rows must have the same width."""
    lines = _lines(text)
    widths = {len(line) for line in lines}
    if len(widths) > 1:
        raise ValueError("grid rows have unequal lengths")
    return {
        (row, column)
        for row, line in enumerate(lines)
        for column, char in enumerate(line)
        if char == PAPER_ROLL
    }


def _accessible(cell: Cell, rolls: set[Cell]) -> bool:
    row, column = cell
    neighbours = sum((row + dr, column + dc) in rolls for dr, dc in _OFFSETS)
    return neighbours < _CROWD_LIMIT


def part1(input: str) -> int:
    """Count the rolls with fewer than four rolls among their eight neighbours."""
    rolls = _rolls(input)
    return sum(_accessible(cell, rolls) for cell in rolls)


def _remove_pass(pending: Iterable[Cell], rolls: set[Cell]) -> list[Cell]:
    """Remove accessible rolls in order, in place, and return those left."""
    kept = []
    for cell in pending:
        if _accessible(cell, rolls):
            rolls.discard(cell)
        else:
            kept.append(cell)
    return kept


def part2(input: str) -> int:
    """Count the rolls removed when accessible rolls are taken away until none are left."""
    if "\n" not in input:
        raise ValueError("grid must hold at least one newline")
    rolls = _rolls(input)
    pending = sorted(rolls)
    removed = 0
    while True:
        kept = _remove_pass(pending, rolls)
        taken = len(pending) - len(kept)
        if taken == 0:
            return removed
        removed += taken
        pending = kept


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 4 on an example and an input file.")
    parser.add_argument("test", type=Path, help="file holding the example")
    parser.add_argument("input", type=Path, help="file holding the puzzle input")
    args = parser.parse_args(argv)
    details = load_details(Day.DAY4, args.test, args.input)
    execute_day(details.day, details.test, details.input, part1, part2)
    return 0