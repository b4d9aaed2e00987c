"""Tests for the shared tokenising helpers."""
import pytest

from string_calculator.errors import InvalidFormatError, InvalidNumberError, NegativesPresentError
from string_calculator.parsing import (
    is_blank,
    parse_delimiter_header,
    parse_token,
    parse_tokens,
    reject_negatives,
    split_tokens,
    sum_tokens,
)


def test_is_blank():
    assert is_blank(None) is True
    assert is_blank("") is True
    assert is_blank(" \t\n") is True
    assert is_blank("0") is False


def test_split_tokens_single_delimiter():
    assert split_tokens("1,2,3", ",") == ["1", "2", "3"]


def test_split_tokens_keeps_interior_empty_tokens():
    assert split_tokens("1,,2", ",") == ["1", "", "2"]


def test_split_tokens_drops_trailing_empty_tokens():
    assert split_tokens("1,2,,", ",") == ["1", "2"]
    assert split_tokens("1\n2,", ",", "\n") == ["1", "2"]
    assert split_tokens(",", ",") == []
    assert split_tokens("1, ", ",") == ["1", " "]


def test_split_tokens_several_delimiters_are_literal():
    assert split_tokens("1.2*3", ".", "*") == ["1", "2", "3"]
    assert split_tokens("1\n2,3", ",", "\n") == ["1", "2", "3"]


@pytest.mark.parametrize("token, expected", [("7", 7), (" 42 ", 42), ("-3", -3), ("+5", 5), ("007", 7)])
def test_parse_token_valid(token, expected):
    assert parse_token(token) == expected


@pytest.mark.parametrize("token", ["", " ", "abc", "1.5", "1_000", "1 2", "--1", "١"])
def test_parse_token_invalid(token):
    with pytest.raises(InvalidNumberError):
        parse_token(token)


def test_parse_tokens_and_sum():
    assert parse_tokens(["1", " 2", "-3 "]) == [1, 2, -3]
    assert sum_tokens(["1", " 2", "-3 "]) == 0
    assert sum_tokens([]) == 0


def test_parse_delimiter_header_default():
    assert parse_delimiter_header("1;2") == (";", "1;2")
    assert parse_delimiter_header("1,2", default=",") == (",", "1,2")


def test_parse_delimiter_header_declared():
    assert parse_delimiter_header("//#\n4#5") == ("#", "4#5")
    assert parse_delimiter_header("//ab\n1ab2\n3") == ("ab", "1ab2\n3")


def test_parse_delimiter_header_empty_delimiter_falls_back():
    assert parse_delimiter_header("//\n1;2") == (";", "1;2")


@pytest.mark.parametrize("numbers", ["//;", "//;\n", "//"])
def test_parse_delimiter_header_missing_numbers(numbers):
    with pytest.raises(InvalidFormatError):
        parse_delimiter_header(numbers)


def test_reject_negatives():
    reject_negatives([0, 1, 2])
    with pytest.raises(NegativesPresentError) as exc_info:
        reject_negatives([1, -1, 3, -4])
    assert exc_info.value.negatives == [-1, -4]
