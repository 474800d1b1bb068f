# aoc2025

Solutions to the first five days of the 2025 Advent of Code puzzles, with a
small runner that times each part.

Every day has a module, `aoc2025.day1` to `aoc2025.day5`, with two functions,
`part1` and `part2`. Each takes the puzzle text as a string and returns the
answer as an integer.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a day

Every day has its own command:

```
aoc2025-day1
aoc2025-day2
aoc2025-day3
aoc2025-day4
aoc2025-day5
```

Each command takes two file paths: the example text from the puzzle page and
your own puzzle input.

```
aoc2025-day1 test.txt input.txt
```

It prints a header such as `------ Day: 1 ------`, then the result and the
elapsed time of part 1 on the example, part 1 on the input, part 2 on the
example and part 2 on the input, in that order.

## Using the solutions from Python

```python
from pathlib import Path

from aoc2025 import day3

text = Path("input.txt").read_text()
print(day3.part1(text))
print(day3.part2(text))
```

The runner in `aoc2025.runner` can be used directly as well:

```python
from aoc2025 import day5
from aoc2025.runner import Day, execute_day, load_details

details = load_details(Day.DAY5, "test.txt", "input.txt")
results = execute_day(details.day, details.test, details.input, day5.part1, day5.part2)
```

- `execute(input, runner)` calls `runner(input)`, prints the result with the
  elapsed time and returns the result.
- `execute_day(day, test, input, first, second)` does that for both parts on
  the example and on the input, and returns the four results in the order
  they were printed.
- `load_details(day, test_path, input_path)` reads both files as UTF-8 into an
  `ExecuteDetails` record with the fields `day`, `test` and `input`.
- `Day` is an integer enumeration with members `DAY1` to `DAY12`.

Day 2 also exposes the helpers it is built on: `find_doubles(text, target)`
and `find_sequences(text, target)`, which sum the repeated-digit identifiers
from the number written in `text` up to `target`.

## The days

| Day | Puzzle                                                              |
|-----|---------------------------------------------------------------------|
| 1   | A dial of 100 positions turned left and right; count the stops on 0 |
| 2   | Sum of the IDs made of repeated digit blocks inside ranges          |
| 3   | Largest numbers formed by picking digits in order from each line    |
| 4   | Paper rolls on a grid that have fewer than four neighbouring rolls  |
| 5   | Fresh ingredient IDs and merged ID ranges                           |

## What the package does not do

- Only days 1 to 5 are solved. `Day` lists all twelve days, but there are no
  modules or commands for days 6 to 12.
- No puzzle inputs or examples are shipped; every command needs both files
  given to it.
- There is no single command that runs all days, and no benchmarking beyond
  the elapsed time printed for each part.