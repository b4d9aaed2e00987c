"""Tests for calculator error types."""
import pytest

from string_calculator.errors import (
    CalculatorError,
    ErrorKind,
    InvalidFormatError,
    InvalidNumberError,
    NegativesPresentError,
    TooManyNumbersError,
)


@pytest.mark.parametrize(
    "error_cls, kind, message",
    [
        (TooManyNumbersError, ErrorKind.TOO_MANY_NUMBERS, "The method can only take 0, 1, or 2 numbers."),
        (InvalidNumberError, ErrorKind.INVALID_NUMBER, "All inputs must be valid numbers."),
        (
            InvalidFormatError,
            ErrorKind.INVALID_FORMAT,
            "Invalid format: Custom delimiter must be followed by numbers.",
        ),
    ],
)
def test_default_messages(error_cls, kind, message):
    err = error_cls()
    assert err.kind is kind
    assert err.message == message
    assert str(err) == message


def test_negatives_message_format():
    err = NegativesPresentError([-2, -30, -1])
    assert str(err) == "Negatives not allowed: [-2, -30, -1]"
    assert err.negatives == [-2, -30, -1]


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        raise InvalidNumberError()
    assert issubclass(NegativesPresentError, CalculatorError)
