"""Formatted output with a small printf-like language, and stream writers.

The formatter understands ``%d``, ``%i``, ``%c``, ``%u``, ``%s``, ``%x``,
``%X``, ``%p`` and ``%%``.  Integer conversions work on 32-bit values the
way a C ``int`` or ``unsigned int`` would.  An unknown conversion prints
nothing and consumes no argument, and a lone ``%`` at the end of the
template is dropped.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

from minirt.numbers import int_to_str

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _to_uint32(value: int) -> int:
    return int(value) & _UINT32_MASK


def _to_int32(value: int) -> int:
    wrapped = _to_uint32(value)
    return wrapped - (1 << 32) if wrapped >= 1 << 31 else wrapped


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _as_pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "dicusxXp":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if conversion in "di":
        return int_to_str(_to_int32(arg))
    if conversion == "c":
        return _as_char(arg)
    if conversion == "u":
        return int_to_str(_to_uint32(arg))
    if conversion == "s":
        return _NULL_STRING if arg is None else str(arg)
    if conversion == "x":
        return format(_to_uint32(arg), "x")
    if conversion == "X":
        return format(_to_uint32(arg), "X")
    return _as_pointer(arg)


def format_string(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        pieces.append(_convert(conversion, values))
    return "".join(pieces)


def print_formatted(template: str, *args: Any) -> int:
    """Write the expanded template to standard output; return its length."""
    text = format_string(template, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream`` (standard output by default)."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    _target(stream).write(text + "\n")


def put_number(value: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of an integer."""
    _target(stream).write(int_to_str(value))