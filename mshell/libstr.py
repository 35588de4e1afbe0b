"""Character classification and small string helpers used across the shell."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"
_NARROW_WHITESPACE = " \t\n"
_LEADING_SKIP = "\t\n\v\f\r "
_NARROW_WORD = re.compile(r"[^ \t\n]+")
_NARROW_PREFIX = re.compile(r"[^ \t\n]*")


def c_is_white(c: str) -> bool:
    """Return True if ``c`` is one whitespace character (space, \\t, \\n, \\v, \\f, \\r)."""
    return len(c) == 1 and c in _WHITESPACE


def str_is_empty(s: str) -> bool:
    """Return True if ``s`` holds nothing but whitespace (or nothing at all)."""
    return all(c_is_white(ch) for ch in s)


def is_space(c: str) -> bool:
    """Return True if ``c`` is a plain space."""
    return c == " "


def is_alpha(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    return len(c) == 1 and ("A" <= c <= "Z" or "a" <= c <= "z")


def is_digit(c: str) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def is_alnum(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def _fits(res: int, digit: int, negative: bool) -> bool:
    if negative:
        # smallest magnitude bound, rounded toward zero
        bound = -((-(INT_MIN + digit)) // 10)
        return -res >= bound
    return res <= (INT_MAX - digit) // 10


def atoi(text: str) -> int:
    """Parse a leading decimal integer within the 32-bit signed range.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. A value that would leave the 32-bit range
    yields 0.
    """
    stripped = text.lstrip(_LEADING_SKIP)
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    res = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        digit = ord(ch) - ord("0")
        if not _fits(res, digit, negative):
            return 0
        res = res * 10 + digit
    return -res if negative else res


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def count_words_delim(s: str, c: str) -> int:
    """Count maximal runs of characters other than the delimiter ``c``."""
    if not c:
        return 1 if s else 0
    return sum(1 for part in s.split(c) if part)


def count_words_whitespace(s: str) -> int:
    """Count words separated by spaces, tabs or newlines.

    A run is not counted when everything from its start onwards is
    whitespace in the wider sense (so trailing \\v, \\f or \\r are ignored).
    """
    return sum(
        1 for match in _NARROW_WORD.finditer(s) if not str_is_empty(s[match.start():])
    )


def is_one_word_delim(s: str, c: str) -> int:
    """Return the length of ``s`` if it has no ``c`` in it, else 0."""
    if not c:
        return len(s)
    return 0 if c in s else len(s)


def is_one_word_whitespace(s: str) -> int:
    """Return the length of the leading run free of spaces, tabs and newlines."""
    match = _NARROW_PREFIX.match(s)
    return match.end() if match else 0