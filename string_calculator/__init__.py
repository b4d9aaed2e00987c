"""Delimited-string integer calculator."""

from string_calculator.calculator import OPERATIONS, StringCalculator
from string_calculator.errors import (
    CalculatorError,
    ErrorKind,
    InvalidFormatError,
    InvalidNumberError,
    NegativesPresentError,
    TooManyNumbersError,
)

__all__ = [
    "OPERATIONS",
    "StringCalculator",
    "CalculatorError",
    "ErrorKind",
    "InvalidFormatError",
    "InvalidNumberError",
    "NegativesPresentError",
    "TooManyNumbersError",
]
