"""Day 2: summing identifiers made of a repeated block of digits."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

from aoc2025.runner import Day, execute_day, load_details


def _parse_number(text: str) -> int:
    if not text or not all("0" <= c <= "9" for c in text):
        raise ValueError(f"not a number: {text!r}")
    return int(text)


def _ranges(text: str) -> Iterator[tuple[str, int]]:
    for chunk in text.strip().split(","):
        first, _, second = chunk.partition("-")
        if second and not all("0" <= c <= "9" for c in second):
            raise ValueError(f"not a number: {second!r}")
        yield first, int(second) if second else 0


def _prime_factors(number: int) -> set[int]:
    factors = set()
    candidate = 2
    while candidate * candidate <= number:
        while number % candidate == 0:
            factors.add(candidate)
            number //= candidate
        candidate += 1
    if number > 1:
        factors.add(number)
    return factors


def find_doubles(text: str, target: int) -> int:
    """Sum the numbers from ``text`` up to ``target`` that are one block written twice."""
    length = len(text)
    if length % 2 == 1:
        power = 10 ** (length // 2 + 1)
        start = power // 10
    else:
        half = length // 2
        left = _parse_number(text[:half])
        right = _parse_number(text[half:])
        start = left + 1 if right > left else left
        power = 10**half
    boundary = power - start

    total = 0
    value = start + start * power
    while value <= target:
        start += 1
        boundary -= 1
        if boundary == 0:
            power *= 10
            boundary = power
        total += value
        value = start + start * power
    return total


def _repeated_values(start: int, end: int, repeats: int, length: int) -> Iterator[int]:
    """Yield numbers of ``length`` digits in [start, end] made of ``repeats`` equal blocks."""
    if repeats == 1 or length % repeats != 0:
        return
    block_power = 10 ** (length // repeats - 1)
    gap_power = block_power * 10
    value = 0
    increment = 0
    for _ in range(repeats):
        value = value * gap_power + block_power
        increment = increment * gap_power + 1
    for _ in range(block_power, gap_power):
        if value > end:
            return
        if value >= start:
            yield value
        value += increment


def find_sequences(text: str, target: int) -> int:
    """Sum the numbers from ``text`` up to ``target`` made of a block repeated at least twice."""
    start = _parse_number(text)
    length = len(text)
    lower_boundary = 10 ** (length - 1)
    found: set[int] = set()
    while lower_boundary < target:
        for repeats in _prime_factors(length):
            found.update(_repeated_values(start, target, repeats, length))
        length += 1
        lower_boundary *= 10
    return sum(found)


def part1(input: str) -> int:
    """Sum the doubled identifiers over all comma-separated ranges."""
    return sum(find_doubles(first, last) for first, last in _ranges(input))


def part2(input: str) -> int:
    """Sum the repeated-block identifiers over all comma-separated ranges."""
    return sum(find_sequences(first, last) for first, last in _ranges(input))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 2 on an example and an input file.")
    parser.add_argument("test", type=Path, help="file holding the example")
    parser.add_argument("input", type=Path, help="file holding the puzzle input")
    args = parser.parse_args(argv)
    details = load_details(Day.DAY2, args.test, args.input)
    execute_day(details.day, details.test, details.input, part1, part2)
    return 0