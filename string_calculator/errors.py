"""Error types raised by the string calculator."""

from enum import Enum


class ErrorKind(Enum):
    TOO_MANY_NUMBERS = "too_many_numbers"
    INVALID_NUMBER = "invalid_number"
    INVALID_FORMAT = "invalid_format"
    NEGATIVES_PRESENT = "negatives_present"


class CalculatorError(ValueError):
    """Base class for every input the calculator refuses to sum.

    ``kind`` lets callers branch without matching on message text;
    ``str(err)`` is the exact message the calculator has always reported.
    """

    kind: ErrorKind
    default_message = ""

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TooManyNumbersError(CalculatorError):
    """Raised when add_v1 gets more than two numbers."""

    kind = ErrorKind.TOO_MANY_NUMBERS
    default_message = "The method can only take 0, 1, or 2 numbers."


class InvalidNumberError(CalculatorError):
    """Raised when a token is not a base-10 integer."""

    kind = ErrorKind.INVALID_NUMBER
    default_message = "All inputs must be valid numbers."


class InvalidFormatError(CalculatorError):
    """Raised when a ``//`` delimiter header is not followed by numbers."""

    kind = ErrorKind.INVALID_FORMAT
    default_message = "Invalid format: Custom delimiter must be followed by numbers."


class NegativesPresentError(CalculatorError):
    """Raised by add_v5 when any number is negative."""

    kind = ErrorKind.NEGATIVES_PRESENT

    def __init__(self, negatives: list[int]):
        self.negatives = list(negatives)
        listed = ", ".join(str(n) for n in self.negatives)
        super().__init__(f"Negatives not allowed: [{listed}]")
