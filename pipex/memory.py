"""Byte-buffer operations over mutable and immutable byte sequences."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: bytes | bytearray | memoryview) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(f"count {count} exceeds buffer length {len(buffer)}")


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(count * size)


def memchr(buffer: bytes | bytearray, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``count`` bytes."""
    _check_count(count, buffer)
    index = bytes(buffer[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(left: bytes | bytearray, right: bytes | bytearray, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(count, left, right)
    for a, b in zip(left[:count], right[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer``, correct even where the ranges overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count)
    end = max(dest_offset, src_offset) + count
    if end > len(buffer):
        raise IndexError(f"range ends at {end}, beyond buffer length {len(buffer)}")
    buffer[dest_offset:dest_offset + count] = buffer[src_offset:src_offset + count]
    return buffer


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer