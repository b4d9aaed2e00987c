"""String calculator that sums delimited integers, in five kata versions."""

import logging

from string_calculator.errors import TooManyNumbersError
from string_calculator.parsing import (
    is_blank,
    parse_delimiter_header,
    parse_tokens,
    reject_negatives,
    split_tokens,
    sum_tokens,
)

logger = logging.getLogger(__name__)

MAX_V1_NUMBERS = 2

# Version name -> method name, used by the command line harness.
OPERATIONS = {
    "v1": "add_v1",
    "v2": "add_v2",
    "v3": "add_v3",
    "v4": "add_v4",
    "v5": "add_v5",
}


class StringCalculator:
    """Sums integers written in a string and counts how often it was asked to.

    Each ``add_vN`` method is a separate, still supported version of the
    parsing rules. Every call counts, including ones that raise.
    """

    def __init__(self):
        self._called_count = 0

    @property
    def called_count(self) -> int:
        return self._called_count

    def get_called_count(self) -> int:
        """Return the number of add_v* calls made on this instance."""
        return self._called_count

    def _record_call(self, operation: str) -> None:
        self._called_count += 1
        logger.debug("%s call #%d", operation, self._called_count)

    def add_v1(self, numbers: str | None) -> int:
        """Add up to two comma-separated numbers."""
        self._record_call("add_v1")
        if is_blank(numbers):
            return 0

        tokens = split_tokens(numbers, ",")
        if len(tokens) > MAX_V1_NUMBERS:
            error = TooManyNumbersError()
            logger.debug("%s: add_v1 got %d numbers", error.kind.name, len(tokens))
            raise error

        return sum_tokens(tokens)

    def add_v2(self, numbers: str | None) -> int:
        """Add any count of comma-separated numbers."""
        self._record_call("add_v2")
        if is_blank(numbers):
            return 0
        return sum_tokens(split_tokens(numbers, ","))

    def add_v3(self, numbers: str | None) -> int:
        """Add numbers separated by commas or newlines."""
        self._record_call("add_v3")
        if is_blank(numbers):
            return 0
        return sum_tokens(split_tokens(numbers, ",", "\n"))

    def add_v4(self, numbers: str | None) -> int:
        """Add numbers separated by ``;`` or by a delimiter declared as
        ``//<delimiter>\\n<numbers>``.

        The declared delimiter is matched literally. Any other separator in
        the body is left inside a token and fails as an invalid number.
        """
        self._record_call("add_v4")
        if is_blank(numbers):
            return 0

        delimiter, body = parse_delimiter_header(numbers)
        return sum_tokens(split_tokens(body, delimiter))

    def add_v5(self, numbers: str | None) -> int:
        """Same input rules as add_v4, but negative numbers are refused.

        Every token is parsed before negatives are checked, so a bad token
        wins over a negative one. The error lists all negatives in order.
        """
        self._record_call("add_v5")
        if is_blank(numbers):
            return 0

        delimiter, body = parse_delimiter_header(numbers)
        values = parse_tokens(split_tokens(body, delimiter))
        reject_negatives(values)
        return sum(values)
