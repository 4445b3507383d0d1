"""Byte buffer helpers working on mutable byte sequences such as bytearray."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadBuffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ReadBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: ReadBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value's low byte in buf[:n], or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadBuffer, b: ReadBuffer, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: ReadBuffer, n: int) -> Buffer:
    """Copy n bytes from src to the start of dest."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: ReadBuffer, n: int) -> Buffer:
    """Copy n bytes from src to dest; correct even when the two overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest