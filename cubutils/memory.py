"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(block: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of block to value (taken modulo 256)."""
    _check_length(n, block)
    block[:n] = bytes([value & 0xFF]) * n
    return block


def bzero(block: bytearray, n: int) -> None:
    """Set the first n bytes of block to zero."""
    memset(block, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _SIZE_MAX // size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def memchr(block, value: int, n: int) -> int | None:
    """Index of the first byte equal to value among the first n, or None."""
    _check_length(n, block)
    target = value & 0xFF
    index = bytes(block[:n]).find(target)
    return None if index < 0 else index


def memcmp(first, second, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buffer from offset src to offset dest.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer