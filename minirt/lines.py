"""Line-by-line reading of text streams and files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional, TextIO

BUFFER_SIZE = 50


class LineReader:
    """Read lines from a text stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._exhausted = False

    def _fill(self) -> None:
        while "\n" not in self._pending and not self._exhausted:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._exhausted = True
            else:
                self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the stream is used up."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line = self._pending[: end + 1]
            self._pending = self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def _open(path: str | os.PathLike[str]) -> TextIO:
    return open(path, encoding="utf-8", newline="")


def count_lines(path: str | os.PathLike[str]) -> int:
    """Return the number of lines in the file at ``path``."""
    with _open(path) as stream:
        return sum(1 for _ in LineReader(stream))


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of the file at ``path``, newlines kept.

    Raises OSError when the file cannot be opened.
    """
    with _open(path) as stream:
        return list(LineReader(stream))