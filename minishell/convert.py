"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
from typing import Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(b" \t\n\v\f\r")
_DIGITS = frozenset(b"0123456789")
_LIMIT = 922337203685477580  # LONG_MAX // 10
_ULONG_MASK = 2**64 - 1


def _to_signed_byte(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: Union[str, bytes]) -> int:
    """Parse a leading decimal integer, truncating the result to 32 bits.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit. Text without digits yields 0. Magnitudes past the 64-bit
    limit give -1 when positive and 0 when negative.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data += b"\0"
    pos = 0
    while data[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if data[pos] == ord("-"):
        sign = -1
    if data[pos] in (ord("-"), ord("+")):
        pos += 1

    value = 0
    while data[pos] in _DIGITS and value < _LIMIT:
        value = value * 10 + data[pos] - ord("0")
        pos += 1

    current = _to_signed_byte(data[pos])
    if value == _LIMIT and (
        (sign == 1 and current <= ord("7")) or (sign == -1 and current <= ord("8"))
    ):
        value = (value * 10 + current - ord("0")) & _ULONG_MASK
    elif value >= _LIMIT:
        return -1 if sign == 1 else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return f"{n:d}"