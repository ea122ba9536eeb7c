"""String searching, comparison, copying and integer conversion.

These functions treat a NUL character (``"\\0"``) as the end of a string,
so text after it is ignored. Positions are returned as indices; a search
that finds nothing returns None.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _terminated(text: str) -> str:
    """Return ``text`` up to, not including, its first NUL."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _as_char(char: CharLike) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")
    return chr(char & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer."""
    return (value - _INT_MIN) % (1 << 32) + _INT_MIN


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(text))


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    target = _as_char(char)
    body = _terminated(text)
    if target == "\0":
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    target = _as_char(char)
    body = _terminated(text)
    if target == "\0":
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns 0 when they match, otherwise the difference of the codes of the
    first differing pair. The end of a string compares as code 0.
    """
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    a_text, b_text = _terminated(first), _terminated(second)
    for i in range(count):
        a = ord(a_text[i]) if i < len(a_text) else 0
        b = ord(b_text[i]) if i < len(b_text) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    target = _terminated(needle)
    if not target:
        return 0
    body = _terminated(haystack)
    index = body.find(target, 0, min(length, len(body)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters, and the full
    length of ``src``, which tells whether the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    body = _terminated(src)
    if size == 0:
        return "", len(body)
    return body[: size - 1], len(body)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length the untruncated result would
    have had. When ``dest`` already fills the buffer it is returned
    unchanged and the length reported is ``size + strlen(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    head, tail = _terminated(dest), _terminated(src)
    if size == 0:
        return head, len(tail)
    dest_len = min(len(head), size)
    if dest_len >= size:
        return head, size + len(tail)
    room = size - dest_len - 1
    return head + tail[:room], dest_len + len(tail)


def strdup(text: str) -> str:
    """Return a copy of ``text`` up to its first NUL."""
    return _terminated(text)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is read; parsing
    stops at the first non-digit. Text with no digits gives 0. The result
    wraps to a 32-bit signed integer.
    """
    body = _terminated(text)
    pos = 0
    while pos < len(body) and body[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(body) and body[pos] in "+-":
        if body[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(body) and "0" <= body[pos] <= "9":
        pos += 1
    digits = body[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} is outside the 32-bit signed range")
    return str(number)