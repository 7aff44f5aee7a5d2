"""String helpers for splitting, trimming, slicing, searching and comparing."""

from __future__ import annotations


def _single_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields.

    Runs of separators, and separators at either end, produce no empty
    words.
    """
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in ``chars``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, or ``None`` when there is none.
    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(left: str, right: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    The result is negative, zero or positive as ``left`` sorts before,
    equal to or after ``right``; it is the difference of the first pair
    of character codes that differ. Comparison stops at a NUL character
    or the end of either string.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for index in range(count):
        a = _code_at(left, index)
        b = _code_at(right, index)
        if a != b or a == 0:
            return a - b
    return 0


def strjoin(left: str, right: str) -> str:
    """Return ``left`` followed by ``right``."""
    return left + right