"""Day 1: counting how often a 100-position dial lands on or passes zero."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

from aoc2025.runner import Day, execute_day, load_details

_START = 50
_SIZE = 100


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Division and remainder that truncate toward zero."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def _movements(text: str) -> Iterator[tuple[int, int]]:
    for line in text.splitlines():
        if not line:
            raise ValueError("empty rotation line")
        direction = -1 if line[0] == "L" else 1
        yield direction, int(line[1:])


def part1(input: str) -> int:
    """Count the rotations after which the dial points at zero."""
    count = 0
    position = _START
    for direction, distance in _movements(input):
        _, rest = _trunc_divmod(distance, _SIZE)
        position += rest * direction
        if position > _SIZE - 1:
            position -= _SIZE
        elif position < 0:
            position += _SIZE
        if position == 0:
            count += 1
    return count


def part2(input: str) -> int:
    """Count every click at which the dial reaches zero during the rotations."""
    count = 0
    position = _START
    for direction, distance in _movements(input):
        laps, rest = _trunc_divmod(distance, _SIZE)
        count += laps
        update = position + rest * direction
        if update > _SIZE - 1:
            position = update - _SIZE
            count += 1
        elif update < 0:
            if position != 0:
                count += 1
        else:
            position = update
            if update == 0:
                count += 1
    if position == 0:
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 1 on an example and an input file.")
    parser.add_argument("test", type=Path, help="file holding the example")
    parser.add_argument("input", type=Path, help="file holding the puzzle input")
    args = parser.parse_args(argv)
    details = load_details(Day.DAY1, args.test, args.input)
    execute_day(details.day, details.test, details.input, part1, part2)
    return 0