"""Day 3: picking the largest number from a bank of battery digits."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from aoc2025.runner import Day, execute_day, load_details

_MAX_SIZE = 12


def _digit(char: str) -> int:
    if not "0" <= char <= "9":
        raise ValueError(f"not a digit: {char!r}")
    return int(char)


def part1(input: str) -> int:
    """Sum, over all lines, the largest two-digit number keeping digit order."""
    result = 0
    for line in input.splitlines():
        if not line:
            raise ValueError("empty battery bank")
        upper = len(line) - 1
        tens = 0
        ones = 0
        for index, char in enumerate(line):
            value = _digit(char)
            if value > tens and index < upper:
                tens = value
                ones = 0
            else:
                ones = max(value, ones)
        result += tens * 10 + ones
    return result


def part2(input: str) -> int:
    """Sum, over all lines, the largest twelve-digit number keeping digit order."""
    result = 0
    for line in input.splitlines():
        digits = [0] * _MAX_SIZE
        remaining = len(line)
        for char in line:
            value = _digit(char)
            start = max(0, _MAX_SIZE - remaining)
            slot = next(
                (i for i in range(start, _MAX_SIZE) if value > digits[i]), None
            )
            if slot is not None:
                digits[slot] = value
                if slot < _MAX_SIZE - 1:
                    digits[slot + 1] = 0
            remaining -= 1
        result += int("".join(map(str, digits)))
    return result


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 3 on an example and an input file.")
    parser.add_argument("test", type=Path, help="file holding the example")
    parser.add_argument("input", type=Path, help="file holding the puzzle input")
    args = parser.parse_args(argv)
    details = load_details(Day.DAY3, args.test, args.input)
    execute_day(details.day, details.test, details.input, part1, part2)
    return 0