import pytest

from aoc2025.day2 import find_doubles, find_sequences, main, part1, part2

RANGES = [
    "11-22",
    "95-115",
    "998-1012",
    "1188511880-1188511890",
    "222220-222224",
    "1698522-1698528",
    "446443-446449",
    "38593856-38593862",
    "565653-565659",
    "824824821-824824827",
    "2121212118-2121212124",
]
EXAMPLE = ",".join(RANGES)


def test_part1_worked_example():
    assert part1(EXAMPLE) == 1227775554


def test_part2_worked_example():
    assert part2(EXAMPLE) == 4174379265


def test_part1_is_sum_over_ranges():
    assert part1(EXAMPLE) == sum(part1(chunk) for chunk in RANGES)


def test_part2_is_sum_over_ranges():
    assert part2(EXAMPLE) == sum(part2(chunk) for chunk in RANGES)


@pytest.mark.parametrize("chunk", RANGES)
def test_every_double_is_a_sequence(chunk):
    assert part2(chunk) >= part1(chunk)


def test_trailing_newline_tolerated():
    assert part1(EXAMPLE + "\n") == part1(EXAMPLE)
    assert part2(EXAMPLE + "\n") == part2(EXAMPLE)


def test_find_doubles_crosses_into_longer_numbers():
    assert find_doubles("95", 115) == 99


@pytest.mark.parametrize("number", ["1212", "111111", "123123"])
def test_single_doubled_number_range(number):
    assert find_doubles(number, int(number)) == int(number)
    assert find_sequences(number, int(number)) == int(number)


def test_find_sequences_counts_each_number_once():
    # 111111 is both three blocks of two and two blocks of three digits.
    assert find_sequences("111111", 111111) == 111111


def test_find_sequences_includes_odd_repeats():
    assert find_sequences("111", 111) == 111
    assert find_doubles("111", 111) < 111


def test_bad_upper_bound_is_rejected():
    with pytest.raises(ValueError):
        part1("12-3x")
    with pytest.raises(ValueError):
        part2("1-2-3")


def test_missing_lower_bound_is_rejected():
    with pytest.raises(ValueError):
        part1("-5")
    with pytest.raises(ValueError):
        part2("-5")


def test_main_prints_results(tmp_path, capsys):
    test_file = tmp_path / "test"
    input_file = tmp_path / "input"
    test_file.write_text(EXAMPLE, encoding="utf-8")
    input_file.write_text("11-22", encoding="utf-8")
    assert main([str(test_file), str(input_file)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "------ Day: 2 ------"
    assert "Part 1 Test Result: 1227775554 elapsed:" in out
    assert "Part 2 Test Result: 4174379265 elapsed:" in out