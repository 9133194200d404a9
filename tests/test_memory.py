import pytest

from minirt.memory import (
    MAX_ALLOCATION,
    allocate,
    compare_bytes,
    copy_into,
    fill,
    find_byte,
    move_within,
    zero,
)


def test_find_byte_first_occurrence():
    data = b"hello world"
    assert find_byte(data, ord("o"), len(data)) == data.index(b"o")


def test_find_byte_respects_limit():
    data = b"hello world"
    assert find_byte(data, ord("w"), 5) is None


def test_find_byte_value_wraps_modulo_256():
    data = bytes([1, 2, 3])
    assert find_byte(data, 256 + 2, 3) == data.index(2)


def test_find_byte_limit_too_large():
    with pytest.raises(ValueError):
        find_byte(b"ab", 1, 3)


def test_compare_bytes_equal():
    assert compare_bytes(b"abc", b"abc", 3) == 0


def test_compare_bytes_difference():
    assert compare_bytes(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert compare_bytes(b"abd", b"abc", 3) == ord("d") - ord("c")


def test_compare_bytes_zero_limit():
    assert compare_bytes(b"x", b"y", 0) == 0


def test_compare_bytes_stops_at_limit():
    assert compare_bytes(b"abX", b"abY", 2) == 0


def test_fill_sets_prefix_only():
    buffer = bytearray(b"abcdef")
    result = fill(buffer, ord("z"), 3)
    assert result is buffer
    assert buffer == bytearray(b"zzzdef")


def test_fill_count_too_large():
    with pytest.raises(ValueError):
        fill(bytearray(2), 0, 5)


def test_zero_clears_prefix():
    buffer = bytearray(b"abcd")
    zero(buffer, 2)
    assert buffer == bytearray(b"\x00\x00cd")


def test_copy_into():
    dest = bytearray(b"......")
    copy_into(dest, b"abc", 3)
    assert dest == bytearray(b"abc...")


def test_move_within_forward_overlap():
    buffer = bytearray(b"abcdef")
    move_within(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_move_within_backward_overlap():
    buffer = bytearray(b"abcdef")
    move_within(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_move_within_out_of_range():
    with pytest.raises(ValueError):
        move_within(bytearray(4), 2, 0, 3)


def test_allocate_zeroed():
    buffer = allocate(4, 3)
    assert buffer == bytearray(12)


def test_allocate_empty_request_gives_one_byte():
    assert len(allocate(0, 8)) == 1
    assert len(allocate(8, 0)) == 1


def test_allocate_too_large():
    with pytest.raises(MemoryError):
        allocate(MAX_ALLOCATION, 2)