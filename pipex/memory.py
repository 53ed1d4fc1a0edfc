"""Byte-buffer helpers: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

# Allocations at or above this many bytes are refused.
ALLOCATION_LIMIT = 4294967295


def _check_length(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf``; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total >= ALLOCATION_LIMIT:
        raise MemoryError(f"refusing to allocate {total} bytes")
    return bytearray(total)