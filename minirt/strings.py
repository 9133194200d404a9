"""String helpers: splitting, searching, comparing, trimming and bounded copies.

Strings behave as if they ended in an implicit NUL character, so a search
for ``"\\0"`` finds the end of the text and a comparison treats a shorter
string as followed by a NUL.
"""

from __future__ import annotations

from typing import Callable, MutableSequence

_NUL = "\0"


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else _NUL


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    _single_char(separator)
    return [piece for piece in text.split(separator) if piece]


def find_char(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL gives the length of the text.
    """
    _single_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def rfind_char(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL gives the length of the text.
    """
    _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def compare(first: str, second: str) -> int:
    """Compare two strings and return the difference of the first mismatch.

    The difference is taken as ``second`` minus ``first``, so the result is
    positive when ``second`` sorts after ``first`` and zero when they match.
    """
    for index, char in enumerate(second):
        other = _char_at(first, index)
        if char != other:
            return ord(char) - ord(other)
    return -ord(_char_at(first, len(second)))


def compare_n(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; return -1, 0 or 1."""
    for index in range(max(limit, 0)):
        left = _char_at(first, index)
        right = _char_at(second, index)
        if left > right:
            return 1
        if left < right:
            return -1
        if left == _NUL:
            break
    return 0


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters.

    An empty needle is found at index 0.  Returns None when absent.
    """
    if not needle:
        return 0
    index = haystack[: max(limit, 0)].find(needle)
    return index if index >= 0 else None


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    if not isinstance(chars, str):
        raise TypeError("chars must be a string")
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return first + second


def truncate(text: str, limit: int) -> str:
    """Return at most the first ``limit`` characters of ``text``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return text[:limit]


def pad_copy(text: str, length: int) -> str:
    """Copy at most ``length`` characters, padding with NUL up to ``length``."""
    if length < 0:
        raise ValueError("length must not be negative")
    return text[:length].ljust(length, _NUL)


def bounded_copy(text: str, size: int) -> tuple[str, int]:
    """Copy ``text`` into a buffer of ``size`` slots, one kept for the NUL.

    Returns the part that fits and the full length of ``text``, so a
    truncated copy shows as a length at least ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    return text[: max(size - 1, 0)], len(text)


def bounded_concat(dest: str, text: str, size: int) -> tuple[str, int]:
    """Append ``text`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting string and the length the full result would have
    had, counting ``dest`` as at most ``size`` characters long.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = min(len(dest), size)
    if len(dest) >= size:
        return dest, dest_len + len(text)
    room = max(size - len(dest) - 1, 0)
    return dest + text[:room], dest_len + len(text)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def apply_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character, in place.

    A non-None result replaces the character at that index.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement