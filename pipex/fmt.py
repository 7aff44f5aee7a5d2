"""A small printf-style formatter with the conversions c, s, p, d, i, u, x, X.

Unknown conversions produce no output, and a lone trailing ``%`` is dropped.
``%s`` with ``None`` prints ``(null)`` and ``%p`` with a null value prints
``(nil)``.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Callable, TextIO

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _int32(value: Any) -> int:
    number = int(value) & _MASK32
    return number - (1 << 32) if number >= 1 << 31 else number


def _uint32(value: Any) -> int:
    return int(value) & _MASK32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(int(value) & _MASK64, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_int32(value)),
    "i": lambda value: str(_int32(value)),
    "u": lambda value: str(_uint32(value)),
    "x": lambda value: format(_uint32(value), "x"),
    "X": lambda value: format(_uint32(value), "X"),
}


def format_message(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    Raises ``ValueError`` when a conversion has no argument left to use.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(f"no argument left for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def fprintf(stream: int | TextIO, template: str, *args: Any) -> int:
    """Write the formatted text to a file descriptor or a text stream.

    Returns the number of characters written.
    """
    text = format_message(template, *args)
    if isinstance(stream, int):
        os.write(stream, text.encode("utf-8", "surrogateescape"))
    else:
        stream.write(text)
        stream.flush()
    return len(text)


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output."""
    return fprintf(sys.stdout, template, *args)