"""Byte-buffer operations on bytes and bytearray objects."""

from __future__ import annotations

_SIZE_MAX = (1 << 64) - 1


def _check_span(buffer, start: int, length: int, name: str) -> None:
    if length < 0 or start < 0 or start + length > len(buffer):
        raise IndexError(
            f"{name}: span [{start}, {start + length}) outside buffer of size {len(buffer)}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first length bytes of buffer with value's low byte."""
    _check_span(buffer, 0, length, "memset")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first length bytes of buffer."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count and size > _SIZE_MAX // count:
        raise OverflowError(f"calloc: {count} * {size} bytes exceeds the size limit")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Index of the first byte equal to value's low byte within length bytes."""
    _check_span(data, 0, length, "memchr")
    index = data[:length].find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Difference of the first differing bytes within length, or 0."""
    _check_span(first, 0, length, "memcmp")
    _check_span(second, 0, length, "memcmp")
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(
    dst: bytearray | None, src: bytes | bytearray | None, length: int
) -> bytearray | None:
    """Copy length bytes from src into the start of dst and return dst."""
    if dst is None and src is None:
        return None
    if dst is src:
        return dst
    if dst is None or src is None:
        raise TypeError("memcpy: both buffers are required")
    _check_span(dst, 0, length, "memcpy")
    _check_span(src, 0, length, "memcpy")
    dst[:length] = src[:length]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy length bytes inside buffer from offset src to offset dst.

    Overlapping regions are handled correctly.
    """
    _check_span(buffer, dst, length, "memmove")
    _check_span(buffer, src, length, "memmove")
    buffer[dst:dst + length] = buffer[src:src + length]
    return buffer