"""String slicing, joining, trimming, splitting and per-character mapping.

As elsewhere in the package, a NUL character ends a string and anything
after it is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence

from minitalk.strings import strdup


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = strdup(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return strdup(first) + strdup(second)


def strtrim(text: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("both the text and the character set are required")
    return strdup(text).strip(strdup(charset))


def split(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    if text is None:
        raise TypeError("text is required")
    sep = _single_char(delimiter)
    body = strdup(text)
    if sep == "\0":
        return [body] if body else []
    return [piece for piece in body.split(sep) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(strdup(text)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in ``chars`` with ``func(index, char)``, in place.

    Processing stops at the first NUL element.
    """
    for index, char in enumerate(chars):
        if char == "\0":
            break
        chars[index] = func(index, char)