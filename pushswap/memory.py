"""Byte-buffer routines over mutable bytearrays."""

from __future__ import annotations

import sys
from typing import Optional

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of the buffer to zero, in place."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer for nmemb items of size bytes each.

    Raises OverflowError where the total size would not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > _SIZE_MAX:
        raise OverflowError(f"{nmemb} * {size} bytes overflows the size limit")
    return bytearray(total)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair."""
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest and return dest."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes at offset src to offset dest within one buffer, overlap-safe."""
    _check_count(n)
    if min(dest, src) < 0 or max(dest, src) + n > len(buffer):
        raise ValueError("source or destination range lies outside the buffer")
    if dest != src and n:
        buffer[dest : dest + n] = buffer[src : src + n]
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes with the low byte of c and return the buffer."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer