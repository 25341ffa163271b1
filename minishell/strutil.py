"""String helpers with C-string semantics.

Text is treated like a C string: anything from the first NUL character on
is ignored. Where a C routine would hand back a pointer into the string,
these functions return an index, or None when there is no match.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

Text = Union[str, bytes]


def _cstr(text: str) -> str:
    """Return *text* cut at its first NUL character."""
    if text is None:
        raise TypeError("expected a string, got None")
    return text.split("\0", 1)[0]


def _cbytes(text: Text) -> bytes:
    if text is None:
        raise TypeError("expected a string, got None")
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return data.split(b"\0", 1)[0]


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first *char* in *text*.

    Searching for NUL finds the end of the string.
    """
    index = (_cstr(text) + "\0").find(_single_char(char))
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last *char* in *text*.

    Searching for NUL finds the end of the string.
    """
    index = (_cstr(text) + "\0").rfind(_single_char(char))
    return None if index < 0 else index


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty needle is always found at index 0.
    """
    _non_negative(length, "length")
    needle = _cstr(needle)
    if not needle:
        return 0
    index = _cstr(haystack)[:length].find(needle)
    return None if index < 0 else index


def compare(first: Text, second: Text, n: int) -> int:
    """Compare at most *n* bytes of two strings.

    Returns the difference of the first pair of differing bytes, taken as
    unsigned values, or 0 when the compared parts are equal.
    """
    _non_negative(n, "n")
    left, right = _cbytes(first), _cbytes(second)
    pairs = islice(zip_longest(left, right, fillvalue=0), n)
    for a, b in pairs:
        if a != b:
            return a - b
    return 0


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("cannot join None")
    return _cstr(first) + _cstr(second)


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, NUL included.

    Returns what fits (at most ``size - 1`` characters) and the full length
    of *src*, so truncation happened when that length is ``>= size``.
    """
    _non_negative(size, "size")
    src = _cstr(src)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting string and the length the full result would have
    needed. When *size* does not exceed the length of *dst*, nothing is
    appended and the length reported is ``size + len(src)``.
    """
    _non_negative(size, "size")
    dst, src = _cstr(dst), _cstr(src)
    if size > len(dst):
        return dst + src[: size - len(dst) - 1], len(dst) + len(src)
    return dst, size + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for every character.

    The function is applied from the last character to the first.
    """
    if func is None:
        raise TypeError("func must be callable, got None")
    text = _cstr(text)
    mapped = [func(index, char) for index, char in reversed(list(enumerate(text)))]
    return "".join(reversed(mapped))


def trim(text: str, charset: str) -> str:
    """Remove characters in *charset* from both ends of *text*."""
    if charset is None:
        raise TypeError("charset must be a string, got None")
    return _cstr(text).strip(_cstr(charset))


def substr(text: str, start: int, length: int) -> str:
    """At most *length* characters of *text* beginning at *start*.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    return _cstr(text)[start : start + length]


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    text = _cstr(text)
    sep = _single_char(sep)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]