"""Turning command-line arguments into a pair of stacks."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import groupby

from pushswap.stacks import Stacks, has_duplicates

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_NUMBER = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def atol(text: str) -> int:
    """Read an optionally signed decimal integer at the start of ``text``.

    Leading whitespace is skipped and reading stops at the first non-digit;
    text with no digits reads as zero.
    """
    match = _LEADING.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def is_valid_number(text: str) -> bool:
    """Return whether ``text`` is an optional sign followed by one or more digits."""
    return _NUMBER.fullmatch(text) is not None


def has_overflow(text: str) -> bool:
    """Return whether ``text`` is not a number that fits in a signed 32-bit int."""
    if not is_valid_number(text):
        return True
    return not INT_MIN <= atol(text) <= INT_MAX


def split(text: str, charset: str) -> list[str]:
    """Split ``text`` into the non-empty runs of characters not in ``charset``."""
    return [
        "".join(run)
        for is_separator, run in groupby(text, key=lambda char: char in charset)
        if not is_separator
    ]


def get_args(argv: Sequence[str]) -> list[str]:
    """Return the words to parse from the program arguments.

    A single argument is split on spaces; several are taken as they are.
    """
    if not argv:
        return []
    if len(argv) == 1:
        return split(argv[0], " ")
    return list(argv)


def parse_arguments(argv: Sequence[str]) -> Stacks:
    """Build stacks whose ``a`` holds the numbers given, first on top.

    Raises ``ParseError`` when there is nothing to read, when a word is not
    an integer within 32-bit range, or when a number repeats.
    """
    words = get_args(argv)
    if not words:
        raise ParseError("Error")
    values = []
    for word in words:
        if has_overflow(word):
            raise ParseError("Error")
        values.append(atol(word))
    if has_duplicates(values):
        raise ParseError("Error")
    return Stacks.from_values(values)