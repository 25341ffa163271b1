import pytest

from minishell.memory import (
    compare_bytes,
    copy_bytes,
    copy_until,
    fill,
    find_byte,
    move_bytes,
    zero,
    zeroed,
)


def test_fill_sets_prefix_only():
    buf = bytearray(b"abcdef")
    result = fill(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_fill_takes_value_modulo_256():
    buf = bytearray(2)
    fill(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_fill_past_end_raises():
    with pytest.raises(IndexError):
        fill(bytearray(2), 0, 3)


def test_fill_negative_count_raises():
    with pytest.raises(ValueError):
        fill(bytearray(2), 0, -1)


def test_zero_clears_prefix():
    buf = bytearray(b"hello")
    zero(buf, 4)
    assert buf == bytearray(b"\0\0\0\0o")


def test_zeroed_size_and_content():
    buf = zeroed(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_zeroed_negative_raises():
    with pytest.raises(ValueError):
        zeroed(-1, 4)


def test_copy_until_stops_after_match():
    dst = bytearray(b"........")
    end = copy_until(dst, b"abc:def", ord(":"), 7)
    assert end == 4
    assert dst[:end] == bytearray(b"abc:")
    assert dst[end:] == bytearray(b"....")


def test_copy_until_without_match_copies_n():
    dst = bytearray(b"......")
    assert copy_until(dst, b"abcdef", ord("z"), 4) is None
    assert dst == bytearray(b"abcd..")


def test_copy_until_match_beyond_n_is_ignored():
    dst = bytearray(6)
    assert copy_until(dst, b"abcdef", ord("e"), 3) is None
    assert dst[:3] == bytearray(b"abc")


def test_copy_until_short_source_raises():
    with pytest.raises(IndexError):
        copy_until(bytearray(10), b"ab", ord("z"), 5)


def test_find_byte_found_and_missing():
    data = b"hello world"
    assert find_byte(data, ord("o"), len(data)) == data.index(b"o")
    assert find_byte(data, ord("w"), 5) is None


def test_find_byte_null_byte():
    data = b"ab\0cd"
    assert find_byte(data, 0, 5) == 2


def test_find_byte_unsigned_value():
    data = bytes([1, 255, 3])
    assert find_byte(data, -1, 3) == 1


def test_compare_bytes_equal():
    assert compare_bytes(b"abcx", b"abcy", 3) == 0
    assert compare_bytes(b"", b"", 0) == 0


def test_compare_bytes_difference():
    assert compare_bytes(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert compare_bytes(b"b", b"a", 1) > 0


def test_compare_bytes_unsigned():
    assert compare_bytes(bytes([200]), bytes([1]), 1) > 0


def test_compare_bytes_continues_past_nul():
    assert compare_bytes(b"a\0b", b"a\0c", 3) < 0


def test_compare_bytes_too_short_raises():
    with pytest.raises(IndexError):
        compare_bytes(b"ab", b"ab", 3)


def test_copy_bytes_round_trip():
    src = b"payload!"
    dst = bytearray(len(src))
    assert copy_bytes(dst, src, len(src)) is dst
    assert bytes(dst) == src


def test_copy_bytes_partial():
    dst = bytearray(b"------")
    copy_bytes(dst, b"abc", 3)
    assert dst == bytearray(b"abc---")


def test_copy_bytes_destination_too_small():
    with pytest.raises(IndexError):
        copy_bytes(bytearray(2), b"abc", 3)


def test_move_bytes_forward_overlap():
    buf = bytearray(b"abcdef")
    move_bytes(buf, 2, 0, 4)
    assert buf[2:] == bytearray(b"abcd")
    assert buf[:2] == bytearray(b"ab")


def test_move_bytes_backward_overlap():
    buf = bytearray(b"abcdef")
    move_bytes(buf, 0, 2, 4)
    assert buf[:4] == bytearray(b"cdef")
    assert buf[4:] == bytearray(b"ef")


def test_move_bytes_out_of_range():
    with pytest.raises(IndexError):
        move_bytes(bytearray(b"abc"), 1, 0, 3)