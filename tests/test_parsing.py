import pytest

from pushswap.parsing import (
    ParseError,
    atoi,
    atol,
    count_numbers,
    is_valid_number,
    parse_numbers,
    split_words,
    within_int_limits,
)


def test_split_words_skips_repeated_spaces():
    assert split_words("  1 2   3 ") == ["1", "2", "3"]


def test_split_words_only_splits_on_space():
    assert split_words("1\t2") == ["1\t2"]


def test_split_words_blank_text():
    assert split_words("    ") == []


@pytest.mark.parametrize("text", ["42", "-17", "+5", "0", "2147483647", "-2147483648"])
def test_atoi_matches_python_int(text):
    assert atoi(text) == int(text)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42


def test_atoi_overflow_clamps():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atol_reads_beyond_int_range():
    assert atol("2147483648") == 2147483648
    assert atol("  -3000000000x") == -3000000000


def test_atol_without_digits():
    assert atol("abc") == 0


@pytest.mark.parametrize("text", ["1", "-1", "+1", "007", "2147483648"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["-", "+", "1a", "a1", "--1", "1-", " 1", "1.0"])
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2147483647", True),
        ("-2147483648", True),
        ("2147483648", False),
        ("-2147483649", False),
        ("0", True),
    ],
)
def test_within_int_limits(text, expected):
    assert within_int_limits(text) is expected


def test_count_numbers_agrees_with_split():
    args = ["1 2", "3", "  4  5 "]
    assert count_numbers(args) == sum(len(split_words(a)) for a in args)
    assert count_numbers(args) == len(parse_numbers(args))


def test_parse_numbers_keeps_order_across_arguments():
    assert parse_numbers(["3 2 1", "4"]) == [3, 2, 1, 4]


def test_parse_numbers_limits():
    assert parse_numbers(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_parse_numbers_no_arguments():
    assert parse_numbers([]) == []


@pytest.mark.parametrize(
    "args",
    [
        ["1 2 1"],
        ["1", "1"],
        ["+1", "1"],
        [""],
        ["   "],
        ["1", ""],
        ["abc"],
        ["1 + 2"],
        ["2147483648"],
        ["-2147483649"],
        ["1\t2"],
    ],
)
def test_parse_numbers_errors(args):
    with pytest.raises(ParseError):
        parse_numbers(args)


def test_parse_error_message():
    with pytest.raises(ParseError, match="^Error$"):
        parse_numbers(["x"])