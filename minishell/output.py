"""Writing characters, strings and numbers to text streams.

Every function takes the stream to write to; when it is omitted, standard
output is used. Strings are written up to their first NUL character.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from minishell.convert import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character *c*."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text*; None writes nothing."""
    if text is None:
        return
    _target(stream).write(_cstr(text))


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text* followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(_cstr(text) + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(n))