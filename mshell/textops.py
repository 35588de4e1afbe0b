"""String operations with the exact edge-case rules the shell relies on."""

from __future__ import annotations

from typing import Optional


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces.

    An empty delimiter never matches, so a non-empty ``s`` comes back whole.
    """
    if not c:
        return [s] if s else []
    return [part for part in s.split(c) if part]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of ``s`` yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 for an empty ``little``, or None
    when there is no match lying wholly inside the window.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    index = big[:length].find(little)
    return index if index >= 0 else None


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings by code point.

    Returns the difference of the first differing characters, where the end
    of a string counts as 0, or 0 when the strings are equal.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n <= 0:
        return 0
    return strcmp(s1[:n], s2[:n])


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` as if into a buffer of ``size`` slots.

    Returns the resulting string and the length that was attempted, i.e. the
    length ``dst`` (capped at ``size``) plus the length of ``src``. When
    ``dst`` already fills the buffer it is returned unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dst), size)
    attempted = used + len(src)
    if used == size:
        return dst, attempted
    room = size - used - 1
    return dst + src[:room], attempted


def join_three(s1: str, s2: str, s3: str) -> str:
    """Concatenate three strings."""
    return "".join((s1, s2, s3))