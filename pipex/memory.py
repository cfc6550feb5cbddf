"""Byte-buffer primitives: fill, copy, search, compare and bounded string copies."""

from __future__ import annotations

_SIZE_MAX = 2**64 - 1


def _check_range(buffer, offset: int, length: int) -> None:
    if offset < 0 or length < 0:
        raise ValueError("offset and length must not be negative")
    if offset + length > len(buffer):
        raise IndexError(
            f"range {offset}:{offset + length} exceeds buffer of {len(buffer)} bytes"
        )


def _cstr(data) -> bytes:
    """Return ``data`` up to, not including, its first NUL byte."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end == -1 else raw[:end]


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_range(buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def memcpy(dst: bytearray, src, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_range(dst, 0, length)
    _check_range(src, 0, length)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Copy ``length`` bytes within ``buffer``; overlapping ranges are handled."""
    _check_range(buffer, dst_offset, length)
    _check_range(buffer, src_offset, length)
    if dst_offset != src_offset:
        buffer[dst_offset:dst_offset + length] = bytes(
            buffer[src_offset:src_offset + length]
        )
    return buffer


def memchr(data, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` in the first ``length`` bytes."""
    _check_range(data, 0, length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(first, second, length: int) -> int:
    """Difference of the first unequal bytes within ``length``, or 0."""
    _check_range(first, 0, length)
    _check_range(second, 0, length)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def strlcpy(dst: bytearray, src, size: int) -> int:
    """Copy the C string ``src`` into ``dst`` of capacity ``size``, NUL-terminated.

    Returns the length of ``src``.
    """
    source = _cstr(src)
    if size < 1:
        return len(source)
    count = min(len(source), size - 1)
    _check_range(dst, 0, count + 1)
    dst[:count] = source[:count]
    dst[count] = 0
    return len(source)


def strlcat(dst: bytearray | None, src, size: int) -> int:
    """Append the C string ``src`` to the C string in ``dst`` of capacity ``size``.

    Returns the length the full result would have had.
    """
    if (dst is None or src is None) and size == 0:
        return 0
    current = len(_cstr(dst))
    source = _cstr(src)
    if current >= size:
        return size + len(source)
    count = min(len(source), size - 1 - current)
    _check_range(dst, current, count + 1)
    dst[current:current + count] = source[:count]
    dst[current + count] = 0
    return current + len(source)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise MemoryError("requested allocation size overflows")
    return bytearray(total)