"""Character classification and case conversion for single ASCII codes.

Every function accepts either an integer code or a one-character string.
The predicates return a bool. The converters return a value of the same
kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(value: CharLike) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int or a one-character str, got {type(value).__name__}")
    return value


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(code: CharLike) -> bool:
    """Return True for an ASCII letter."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def isdigit(code: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    c = _code(code)
    return ord("0") <= c <= ord("9")


def isalnum(code: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: CharLike) -> bool:
    """Return True for a code in the range 0 to 127."""
    return 0 <= _code(code) <= 127


def isprint(code: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(code) <= 126


def tolower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    c = _code(code)
    if ord("A") <= c <= ord("Z"):
        return _same_kind(code, c + 32)
    return code


def toupper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    c = _code(code)
    if ord("a") <= c <= ord("z"):
        return _same_kind(code, c - 32)
    return code