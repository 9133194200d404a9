"""Byte-buffer helpers: searching, comparing, filling, copying and allocating."""

from __future__ import annotations

from collections.abc import Sequence

MAX_ALLOCATION = 4294967295


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def find_byte(data: bytes | bytearray, value: int, limit: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first
    ``limit`` bytes, or None.  ``value`` is taken modulo 256."""
    _check_count(limit, data)
    index = bytes(data[:limit]).find(value & 0xFF)
    return index if index >= 0 else None


def compare_bytes(
    first: bytes | bytearray, second: bytes | bytearray, limit: int
) -> int:
    """Compare the first ``limit`` bytes; return ``first - second`` at the
    first mismatch, or zero when they agree."""
    _check_count(limit, first, second)
    for left, right in zip(first[:limit], second[:limit]):
        if left != right:
            return left - right
    return 0


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes to ``value`` modulo 256; return the buffer."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes to zero; return the buffer."""
    return fill(buffer, 0, count)


def copy_into(
    dest: bytearray, src: bytes | bytearray, count: int
) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def move_within(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from ``src_offset`` to
    ``dest_offset``; overlapping regions are handled correctly."""
    if dest_offset < 0 or src_offset < 0 or count < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest_offset, src_offset) + count > len(buffer):
        raise ValueError("region lies outside the buffer")
    chunk = bytes(buffer[src_offset : src_offset + count])
    buffer[dest_offset : dest_offset + count] = chunk
    return buffer


def allocate(count: int, size: int) -> bytearray:
    """Return a zeroed buffer for ``count`` items of ``size`` bytes.

    A request for nothing still yields a one-byte buffer.  Raises
    MemoryError when the total would exceed the allocation limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    if count > MAX_ALLOCATION // size:
        raise MemoryError(f"cannot allocate {count} items of {size} bytes")
    return bytearray(count * size)