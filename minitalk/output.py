"""Writing characters, strings and integers to a text stream.

Every function writes to ``stream``, which defaults to standard output
as it is at the time of the call. Strings end at their first NUL.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from minitalk.strings import itoa, strdup

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")
    return chr(char & 0xFF)


def put_char(char: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is taken modulo 256."""
    _target(stream).write(_char(char))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    _target(stream).write(strdup(text))


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL, then a newline."""
    put_str(text, stream)
    put_char("\n", stream)


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(stream).write(itoa(number))