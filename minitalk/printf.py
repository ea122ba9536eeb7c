"""A small formatter for the conversions %c, %s, %p, %d, %i, %u, %x, %X and %%.

Integer arguments are reduced to the width of their conversion: 32 bits
for %d, %i, %u, %x and %X, 64 bits for %p. A conversion letter that is
not recognised produces nothing, and a lone ``%`` at the end of the
template is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, Sequence

from minitalk.strings import itoa, strdup

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT_MIN = -2147483648


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    return (value - _INT_MIN) % (1 << 32) + _INT_MIN


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_integer(value) & 0xFF)


def format_hex(number: int, upper: bool = False) -> str:
    """Return the hexadecimal text of ``number`` as a 32-bit unsigned value."""
    text = format(_integer(number) & _MASK32, "x")
    return text.upper() if upper else text


def format_pointer(address: Optional[int]) -> str:
    """Return ``0x`` and the lower-case hexadecimal text of an address."""
    value = 0 if address is None else _integer(address) & _MASK64
    return "0x" + format(value, "x")


def format_unsigned(number: int) -> str:
    """Return the decimal text of ``number`` as a 32-bit unsigned value."""
    return str(_integer(number) & _MASK32)


def format_string(text: Optional[str]) -> str:
    """Return ``text`` up to its first NUL, or ``(null)`` for None."""
    if text is None:
        return "(null)"
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return strdup(text)


def _pieces(template: str, args: Sequence[Any]) -> Iterator[str]:
    remaining = iter(args)

    def take(kind: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{kind}") from None

    chars = iter(strdup(template))
    for char in chars:
        if char != "%":
            yield char
            continue
        kind = next(chars, None)
        if kind is None:
            break
        if kind == "%":
            yield "%"
        elif kind == "c":
            yield _format_char(take(kind))
        elif kind == "s":
            yield format_string(take(kind))
        elif kind == "p":
            yield format_pointer(take(kind))
        elif kind in "di":
            yield itoa(_signed32(_integer(take(kind))))
        elif kind == "u":
            yield format_unsigned(take(kind))
        elif kind in "xX":
            yield format_hex(take(kind), upper=kind == "X")


def sprintf(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions filled from ``args``."""
    return "".join(_pieces(template, args))


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(template, *args)
    sys.stdout.write(text)
    return len(text)