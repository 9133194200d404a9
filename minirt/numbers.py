"""Lenient number parsing in the style of the C library routines.

Parsing skips leading whitespace, accepts one sign, reads as many digits as
it can and ignores whatever follows.  Text with no digits yields zero.
"""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_HEX_VALUES = {
    **{ch: ord(ch) - ord("0") for ch in _DIGITS},
    **{ch: ord(ch) - ord("a") + 10 for ch in "abcdef"},
    **{ch: ord(ch) - ord("A") + 10 for ch in "ABCDEF"},
}


def _skip_space(text: str) -> int:
    return len(text) - len(text.lstrip(_WHITESPACE))


def _leading_digits(text: str, start: int) -> str:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[start:end]


def _power_of_ten(exponent: int) -> float:
    result = 1.0
    for _ in range(exponent):
        result *= 10
    for _ in range(-exponent):
        result /= 10
    return result


def parse_double(text: str) -> float:
    """Parse a decimal number such as ``"-12.5"``; trailing text is ignored."""
    pos = _skip_space(text)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    whole_digits = _leading_digits(text, pos)
    pos += len(whole_digits)
    whole = 0.0
    for digit in whole_digits:
        whole = whole * 10 + int(digit)
    fraction = 0.0
    exponent = 0
    if pos < len(text) and text[pos] == ".":
        for digit in _leading_digits(text, pos + 1):
            fraction = fraction * 10 + int(digit)
            exponent -= 1
    return sign * (whole + fraction * _power_of_ten(exponent))


def _parse_integer(text: str) -> int:
    pos = _skip_space(text)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    digits = _leading_digits(text, pos)
    return sign * int(digits) if digits else 0


def parse_int(text: str) -> int:
    """Parse a leading decimal integer; trailing text is ignored."""
    return _parse_integer(text)


def parse_long(text: str) -> int:
    """Parse a leading decimal integer of any size; trailing text is ignored."""
    return _parse_integer(text)


def parse_int_base(text: str, base: int) -> int:
    """Parse an integer written with hexadecimal-style digits in ``base``.

    No whitespace is skipped.  Every digit 0-9, a-f and A-F is accepted
    regardless of the base, and parsing stops at the first other character.
    """
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    value = 0
    for ch in text:
        digit = _HEX_VALUES.get(ch)
        if digit is None:
            break
        value = value * base + digit
    return value * sign


def int_to_str(value: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return f"{value:d}"