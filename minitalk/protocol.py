"""The one-bit-per-signal wire format shared by client and server.

Each byte travels as eight bits, most significant first. A set bit is
carried by SIGUSR1 and a clear bit by SIGUSR2. A message ends with a
zero byte, which the receiving side shows as a newline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from minitalk.chars import isdigit

BITS_PER_BYTE = 8
TERMINATOR = 0

ByteLike = Union[int, str, bytes]
MessageLike = Union[str, bytes]


def is_digit_str(text: Optional[str]) -> bool:
    """Return True when every character of ``text`` is an ASCII digit.

    None is rejected. An empty string has no non-digit in it and passes.
    """
    if text is None:
        return False
    return all(isdigit(char) for char in text)


def _byte_value(value: ByteLike) -> int:
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value) & 0xFF
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int or a single character, got {type(value).__name__}")
    return value & 0xFF


def byte_bits(value: ByteLike) -> List[bool]:
    """Return the eight bits of a byte, most significant first."""
    byte = _byte_value(value)
    return [bool(byte & (1 << shift)) for shift in reversed(range(BITS_PER_BYTE))]


def _payload(message: MessageLike) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def message_bytes(message: MessageLike) -> bytes:
    """Return the bytes sent for ``message``: its text up to any NUL, then a zero byte."""
    return _payload(message) + bytes([TERMINATOR])


def message_bits(message: MessageLike) -> Iterator[bool]:
    """Yield every bit sent for ``message``, the terminating zero byte included."""
    for byte in message_bytes(message):
        yield from byte_bits(byte)


def render_byte(value: int) -> bytes:
    """Return what the receiver prints for a byte: a newline for zero, else the byte."""
    byte = _byte_value(value)
    return b"\n" if byte == TERMINATOR else bytes([byte])


@dataclass
class ByteDecoder:
    """Gathers bits, most significant first, into whole bytes."""

    bit_count: int = 0
    value: int = 0

    def push(self, bit: Union[bool, int]) -> Optional[int]:
        """Add one bit; return the finished byte after the eighth, else None."""
        if bit:
            self.value |= 1 << (BITS_PER_BYTE - 1 - self.bit_count)
        self.bit_count += 1
        if self.bit_count < BITS_PER_BYTE:
            return None
        byte = self.value
        self.bit_count = 0
        self.value = 0
        return byte