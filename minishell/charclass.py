"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

import operator
from typing import Union

Char = Union[str, int]

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return _LOWER_A <= code <= _LOWER_Z or _UPPER_A <= code <= _UPPER_Z


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, codes 32 through 126."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        return _same_kind(c, code - _CASE_OFFSET)
    return c