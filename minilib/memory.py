"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_fits(length: int, n: int, what: str) -> None:
    if n > length:
        raise ValueError(f"{what} holds {length} bytes, cannot touch {n}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with value (truncated to a byte)."""
    _check_count(n)
    _check_fits(len(buf), n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src over the start of dest."""
    _check_count(n)
    _check_fits(len(dest), n, "destination")
    _check_fits(len(src), n, "source")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes from offset src to offset dest within buf; regions may overlap."""
    _check_count(n)
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_fits(len(buf), dest + n, "buffer")
    _check_fits(len(buf), src + n, "buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value among the first n, or None."""
    _check_count(n)
    _check_fits(len(data), n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing byte within n bytes, or 0."""
    _check_count(n)
    _check_fits(len(a), n, "first operand")
    _check_fits(len(b), n, "second operand")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0