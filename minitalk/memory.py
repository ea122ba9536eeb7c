"""Byte buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional

_ALLOC_LIMIT = 2147483647


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buf in buffers:
        if count > len(buf):
            raise ValueError(f"count {count} exceeds buffer length {len(buf)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer``."""
    return memset(buffer, 0, count)


def memcpy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    dest: bytearray,
    src: bytes,
    count: int,
    dest_start: int = 0,
    src_start: int = 0,
) -> bytearray:
    """Copy ``count`` bytes between regions that may overlap.

    The regions start at ``src_start`` in ``src`` and ``dest_start`` in
    ``dest``; ``dest`` and ``src`` may be the same buffer.
    """
    if dest_start < 0 or src_start < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count)
    if src_start + count > len(src) or dest_start + count > len(dest):
        raise ValueError("region exceeds buffer length")
    chunk = bytes(src[src_start:src_start + count])
    dest[dest_start:dest_start + count] = chunk
    return dest


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    A zero count or size yields a single byte. A request whose total would
    pass 2147483647 bytes raises MemoryError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        count = size = 1
    if count > _ALLOC_LIMIT // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first differing pair, or 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0