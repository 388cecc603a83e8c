"""Argument parsing and validation for the stack sorter."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LLONG_MAX = 2**63 - 1

_NUMBER_PREFIX = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_VALID_NUMBER = re.compile(r"(?:[+-]?[0-9]+)?")


class ParseError(ValueError):
    """Raised when the command-line numbers are malformed or repeated."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str) -> list[str]:
    """Split on single spaces only, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def _leading_number(text: str) -> tuple[int, int]:
    match = _NUMBER_PREFIX.match(text)
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    return sign, int(digits) if digits else 0


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Read a leading integer as a 32-bit int.

    Magnitudes past the 64-bit range give -1 for positive input and 0 for
    negative input; other values wrap to 32 bits.
    """
    sign, magnitude = _leading_number(text)
    if magnitude > _LLONG_MAX:
        return -1 if sign == 1 else 0
    return _to_int32(sign * magnitude)


def atol(text: str) -> int:
    """Read a leading integer with optional whitespace and sign."""
    sign, magnitude = _leading_number(text)
    return sign * magnitude


def is_valid_number(text: str) -> bool:
    """Tell whether the text is an optional sign followed by ASCII digits.

    A lone sign is rejected; the empty string is accepted.
    """
    return _VALID_NUMBER.fullmatch(text) is not None


def within_int_limits(text: str) -> bool:
    """Tell whether the number fits in a signed 32-bit int."""
    return INT_MIN <= atol(text) <= INT_MAX


def count_numbers(args: Iterable[str]) -> int:
    """Count the space-separated words across all arguments."""
    return sum(len(split_words(arg)) for arg in args)


def _validate(args: list[str]) -> None:
    for arg in args:
        words = split_words(arg)
        if not words:
            raise ParseError()
        for word in words:
            if not is_valid_number(word) or not within_int_limits(word):
                raise ParseError()


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn the arguments into a list of distinct 32-bit integers.

    Each argument may hold several numbers separated by spaces. An empty
    argument list yields an empty list; anything malformed, out of range or
    repeated raises ParseError.
    """
    args = list(args)
    if not args:
        return []
    _validate(args)
    if count_numbers(args) <= 0:
        raise ParseError()
    numbers = [atoi(word) for arg in args for word in split_words(arg)]
    if len(set(numbers)) != len(numbers):
        raise ParseError()
    return numbers