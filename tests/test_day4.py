import pytest

from aoc2025.day4 import main, part1, part2

EXAMPLE = (
    "..@@.@@@@.\n"
    "@@@.@.@.@@\n"
    "@@@@@.@.@@\n"
    "@.@@@@..@.\n"
    "@@.@@@@.@@\n"
    ".@@@@@@@.@\n"
    ".@.@.@.@@@\n"
    "@.@@@.@@@@\n"
    ".@@@@@@@@.\n"
    "@.@.@@@.@.\n"
)

FULL = "@@@\n@@@\n@@@\n"
SCATTERED = "@.@\n...\n@.@\n"


def _transpose(text: str) -> str:
    rows = text.splitlines()
    return "".join("".join(column) + "\n" for column in zip(*rows))


def test_full_block_only_corners_are_reachable():
    assert part1(FULL) == 4


def test_full_block_is_cleared_entirely():
    assert part2(FULL) == 9
    assert part2(FULL) == FULL.count("@")


def test_isolated_rolls_are_all_reachable():
    assert part1(SCATTERED) == SCATTERED.count("@")
    assert part2(SCATTERED) == SCATTERED.count("@")


def test_empty_floor_has_nothing_to_take():
    grid = "...\n...\n"
    assert part1(grid) == 0
    assert part2(grid) == 0


@pytest.mark.parametrize("grid", [EXAMPLE, FULL, SCATTERED, "@@.@\n@@@@\n.@@@\n"])
def test_part2_bounds(grid):
    assert part1(grid) <= part2(grid) <= grid.count("@")


@pytest.mark.parametrize("grid", [EXAMPLE, "@@.@\n@@@@\n.@@@\n"])
def test_results_do_not_depend_on_orientation(grid):
    flipped = _transpose(grid)
    assert part1(flipped) == part1(grid)
    assert part2(flipped) == part2(grid)


def test_crlf_matches_lf():
    assert part1(EXAMPLE.replace("\n", "\r\n")) == part1(EXAMPLE)
    assert part2(EXAMPLE.replace("\n", "\r\n")) == part2(EXAMPLE)


def test_unequal_rows_are_rejected():
    with pytest.raises(ValueError):
        part1("@@@\n@@\n")
    with pytest.raises(ValueError):
        part2("@@@\n@@\n")


def test_part2_needs_a_newline():
    with pytest.raises(ValueError):
        part2("@@@")


def test_main_prints_both_parts(tmp_path, capsys):
    test_file = tmp_path / "test"
    input_file = tmp_path / "input"
    test_file.write_text(FULL, encoding="utf-8")
    input_file.write_text(SCATTERED, encoding="utf-8")
    assert main([str(test_file), str(input_file)]) == 0
    out = capsys.readouterr().out
    assert "------ Day: 4 ------" in out
    assert out.count("Result: ") == 4