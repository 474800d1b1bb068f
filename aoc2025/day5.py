"""Day 5: checking ingredient identifiers against ranges of fresh ones."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from aoc2025.runner import Day, execute_day, load_details


def _digits_value(text: str) -> int:
    """The number written by the digits of ``text``, other characters ignored."""
    digits = "".join(char for char in text if "0" <= char <= "9")
    return int(digits) if digits else 0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _bounds(line: str, start: int) -> tuple[int, int]:
    """Read ``start-end``; a line without a dash keeps the previous start."""
    *heads, tail = line.split("-")
    if heads:
        start = _digits_value(heads[-1])
    return start, _digits_value(tail)


def part1(input: str) -> int:
    """Count the newline-terminated identifiers that fall inside any fresh range."""
    terminated = input.split("\n")[:-1]
    ranges: list[tuple[int, int]] = []
    start = 0
    lines = iter(terminated)
    for line in lines:
        start, end = _bounds(line, start)
        if end == 0:
            break
        ranges.append((start, end))
    return sum(
        any(low <= identifier <= high for low, high in ranges)
        for identifier in map(_digits_value, lines)
    )


def part2(input: str) -> int:
    """Count the identifiers covered by the union of the fresh ranges."""
    ranges: list[tuple[int, int]] = []
    low = 0
    for line in _lines(input):
        if not line:
            break
        low, high = _bounds(line, low)
        while True:
            hit = next((r for r in ranges if low <= r[1] and high >= r[0]), None)
            if hit is None:
                break
            ranges.remove(hit)
            low = min(low, hit[0])
            high = max(high, hit[1])
        ranges.append((low, high))

    total = 0
    for first, last in ranges:
        if first == 0 or last == 0:
            continue
        size = last - first + 1
        if size < 0:
            raise ValueError(f"range {first}-{last} ends before it starts")
        total += size
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 5 on an example and an input file.")
    parser.add_argument("test", type=Path, help="file holding the example")
    parser.add_argument("input", type=Path, help="file holding the puzzle input")
    args = parser.parse_args(argv)
    details = load_details(Day.DAY5, args.test, args.input)
    execute_day(details.day, details.test, details.input, part1, part2)
    return 0