"""Tokenising and summing helpers shared by every calculator version."""

import logging
import re

from string_calculator.errors import (
    InvalidFormatError,
    InvalidNumberError,
    NegativesPresentError,
)

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"
HEADER_PREFIX = "//"

# Optional sign and ASCII digits only; int() would also take "1_000" or "١".
# No width limit: values outside 32 bits are summed, not rejected.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_blank(numbers: str | None) -> bool:
    """True for a missing input or one that is only whitespace."""
    return numbers is None or not numbers.strip()


def split_tokens(text: str, *delimiters: str) -> list[str]:
    """Split text on any of the given literal delimiters.

    Every occurrence is a boundary, so adjacent delimiters yield an empty
    token rather than being collapsed. Empty tokens at the end are dropped,
    so a trailing delimiter is allowed.
    """
    if len(delimiters) == 1:
        tokens = text.split(delimiters[0])
    else:
        pattern = "|".join(re.escape(d) for d in delimiters)
        tokens = re.split(pattern, text)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_token(token: str) -> int:
    cleaned = token.strip()
    if not _INTEGER_RE.fullmatch(cleaned):
        error = InvalidNumberError()
        logger.debug("%s: rejected token %r", error.kind.name, token)
        raise error
    return int(cleaned)


def parse_tokens(tokens: list[str]) -> list[int]:
    """Parse every token, failing on the first one that is not an integer."""
    return [parse_token(token) for token in tokens]


def sum_tokens(tokens: list[str]) -> int:
    return sum(parse_tokens(tokens))


def parse_delimiter_header(
    numbers: str, default: str = DEFAULT_DELIMITER
) -> tuple[str, str]:
    """Return (delimiter, body) for input that may start with ``//<delim>\\n``.

    Without the header the whole input is the body and ``default`` is the
    delimiter. An empty declared delimiter also falls back to ``default``.
    Raises InvalidFormatError when the header has no newline or nothing
    follows it.
    """
    if not numbers.startswith(HEADER_PREFIX):
        return default, numbers

    header, newline, body = numbers.partition("\n")
    if not newline or not body:
        error = InvalidFormatError()
        logger.debug("%s: delimiter header without numbers %r", error.kind.name, numbers)
        raise error

    delimiter = header[len(HEADER_PREFIX):] or default
    return delimiter, body


def reject_negatives(values: list[int]) -> None:
    negatives = [v for v in values if v < 0]
    if negatives:
        error = NegativesPresentError(negatives)
        logger.debug("%s: %s", error.kind.name, negatives)
        raise error
