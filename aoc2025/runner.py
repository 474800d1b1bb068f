"""Shared machinery for running a day's two puzzle parts and timing them."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, TypeVar

T = TypeVar("T")
P = TypeVar("P")


class Day(IntEnum):
    """Puzzle days of the calendar."""

    DAY1 = 1
    DAY2 = 2
    DAY3 = 3
    DAY4 = 4
    DAY5 = 5
    DAY6 = 6
    DAY7 = 7
    DAY8 = 8
    DAY9 = 9
    DAY10 = 10
    DAY11 = 11
    DAY12 = 12


@dataclass(frozen=True)
class ExecuteDetails:
    """A day together with its example text and its real puzzle input."""

    day: Day
    test: str
    input: str


def _format_elapsed(nanoseconds: int) -> str:
    for unit, scale in (("s", 1_000_000_000), ("ms", 1_000_000), ("µs", 1_000)):
        if nanoseconds >= scale:
            return f"{nanoseconds / scale:.3f}{unit}"
    return f"{nanoseconds}ns"


def execute(input: str, runner: Callable[[str], T]) -> T:
    """Run one part on ``input``, print its result and timing, and return the result."""
    start = time.perf_counter_ns()
    result = runner(input)
    elapsed = time.perf_counter_ns() - start
    print(f"Result: {result} elapsed: {_format_elapsed(elapsed)}")
    return result


def execute_day(
    day: Day | int,
    test: str,
    input: str,
    first: Callable[[str], T],
    second: Callable[[str], P],
) -> tuple[T, T, P, P]:
    """Run both parts on the example and on the real input, printing each result.

    Returns the four results in the order they were printed.
    """
    print(f"------ Day: {int(Day(day))} ------")
    print("Part 1 Test ", end="")
    first_test = execute(test, first)
    print("Part 1 Actual ", end="")
    first_actual = execute(input, first)
    print("Part 2 Test ", end="")
    second_test = execute(test, second)
    print("Part 2 Actual ", end="")
    second_actual = execute(input, second)
    print()
    return first_test, first_actual, second_test, second_actual


def load_details(
    day: Day | int, test_path: str | Path, input_path: str | Path
) -> ExecuteDetails:
    """Read the example and the puzzle input of ``day`` from the given files."""
    return ExecuteDetails(
        day=Day(day),
        test=Path(test_path).read_text(encoding="utf-8"),
        input=Path(input_path).read_text(encoding="utf-8"),
    )