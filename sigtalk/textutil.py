"""Small string helpers: integer parsing, splitting, trimming and searching."""

from __future__ import annotations

import operator
import re
from itertools import islice, zip_longest

_ATOI_PATTERN = re.compile(r"[ \t\n\x0b\x0c\r]*([+-]?)([0-9]*)")
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    An optional single sign is accepted; parsing stops at the first
    non-digit.  Text without a leading number yields 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(number))


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty fields."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    if separator == "\0":
        return [text] if text else []
    return [field for field in text.split(separator) if field]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` entirely within the first ``length`` characters.

    Returns the index of the first match, or None when there is none.
    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    position = haystack.find(needle, 0, length)
    return None if position < 0 else position


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns 0 when they agree, otherwise the difference between the code
    points of the first differing characters.  The end of a string
    compares as a NUL character.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    first = first.split("\0", 1)[0]
    second = second.split("\0", 1)[0]
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, count):
        if left != right:
            return ord(left) - ord(right)
    return 0


def is_all_digits(text: str) -> bool:
    """Return True if every character is an ASCII decimal digit."""
    return all(char in _DIGITS for char in text)