"""ASCII character classification and case conversion."""

from __future__ import annotations


def _code(char: str) -> int:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def is_alpha(char: str) -> bool:
    """Tell whether ``char`` is an ASCII letter."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(char: str) -> bool:
    """Tell whether ``char`` is an ASCII decimal digit."""
    return 48 <= _code(char) <= 57


def is_alnum(char: str) -> bool:
    """Tell whether ``char`` is an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str) -> bool:
    """Tell whether ``char`` lies in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str) -> bool:
    """Tell whether ``char`` is a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def is_space(char: str) -> bool:
    """Tell whether ``char`` is a blank: a space or a horizontal tab."""
    _code(char)
    return char in " \t"


def to_lower(char: str) -> str:
    """Return the lower-case form of an ASCII upper-case letter; else ``char``."""
    code = _code(char)
    return chr(code + 32) if 65 <= code <= 90 else char


def to_upper(char: str) -> str:
    """Return the upper-case form of an ASCII lower-case letter; else ``char``."""
    code = _code(char)
    return chr(code - 32) if 97 <= code <= 122 else char