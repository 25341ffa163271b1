"""Byte-buffer primitives: filling, searching, comparing and copying.

Buffers are ``bytearray`` objects, or any read-only bytes-like object where
nothing is written. Byte values are taken modulo 256, as unsigned chars.
Positions that C would return as pointers are returned as indices.
Touching bytes past the end of a buffer raises ``IndexError``.
"""

from __future__ import annotations

import operator
from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]


def _count(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    return n


def _require(buffer: ReadableBuffer, end: int, role: str) -> None:
    if len(buffer) < end:
        raise IndexError(
            f"{role} buffer holds {len(buffer)} bytes, {end} are needed"
        )


def _byte(value: int) -> int:
    return operator.index(value) & 0xFF


def fill(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first *count* bytes of *buffer* to *value* and return it."""
    count = _count(count)
    _require(buffer, count, "destination")
    buffer[:count] = bytes([_byte(value)]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> None:
    """Set the first *count* bytes of *buffer* to zero."""
    fill(buffer, 0, count)


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer for *count* elements of *size* bytes each."""
    return bytearray(_count(count) * _count(size))


def copy_until(
    dst: bytearray, src: ReadableBuffer, stop: int, n: int
) -> Optional[int]:
    """Copy bytes from *src* to *dst*, stopping after the first *stop* byte.

    At most *n* bytes are copied. Returns the index in *dst* just past the
    copied *stop* byte, or None when it did not occur in the first *n* bytes.
    """
    n = _count(n)
    index = bytes(src[:n]).find(bytes([_byte(stop)]))
    copied = n if index < 0 else index + 1
    _require(src, copied, "source")
    _require(dst, copied, "destination")
    dst[:copied] = src[:copied]
    return None if index < 0 else copied


def find_byte(buffer: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first *value* byte among the first *n*, or None."""
    n = _count(n)
    index = bytes(buffer[:n]).find(bytes([_byte(value)]))
    if index >= 0:
        return index
    _require(buffer, n, "source")
    return None


def compare_bytes(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    n = _count(n)
    for position, (a, b) in enumerate(zip(bytes(first[:n]), bytes(second[:n]))):
        if a != b:
            return a - b
    _require(first, n, "first")
    _require(second, n, "second")
    return 0


def copy_bytes(dst: bytearray, src: ReadableBuffer, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dst*; return *dst*."""
    n = _count(n)
    _require(src, n, "source")
    _require(dst, n, "destination")
    dst[:n] = src[:n]
    return dst


def move_bytes(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes inside *buffer* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buffer*.
    """
    n = _count(n)
    dest = operator.index(dest)
    src = operator.index(src)
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    _require(buffer, src + n, "source")
    _require(buffer, dest + n, "destination")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer