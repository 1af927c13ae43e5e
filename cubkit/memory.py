"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

UINT_MAX = 4294967295

BytesLike = Union[bytes, bytearray, memoryview]


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:n])):
        if byte == target:
            return index
    return None


def compare_bytes(a: BytesLike, b: BytesLike, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if equal."""
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` and return it."""
    if n > len(buffer):
        raise IndexError("fill length exceeds buffer size")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> bytearray:
    """Clear the first ``n`` bytes of ``buffer``."""
    return fill(buffer, 0, n)


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if size != 0 and count > UINT_MAX // size:
        raise OverflowError("requested allocation is too large")
    return bytearray(count * size)


def copy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if n > len(dest) or n > len(src):
        raise IndexError("copy length exceeds buffer size")
    dest[:n] = bytes(src[:n])
    return dest


def move(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``; overlap is safe."""
    if min(dest, src, n) < 0 or max(dest, src) + n > len(buffer):
        raise IndexError("move range lies outside the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def c_length(data: Union[BytesLike, str]) -> int:
    """Length up to the first NUL, or the whole length if there is none."""
    terminator = "\0" if isinstance(data, str) else 0
    for index, item in enumerate(data if isinstance(data, str) else bytes(data)):
        if item == terminator:
            return index
    return len(data)


def bounded_copy(dest: bytearray, src: BytesLike) -> int:
    """Copy the string in ``src`` into ``dest``, truncating and NUL-terminating.

    Returns the length of ``src``, so a result of ``len(dest)`` or more means
    the copy was truncated.
    """
    src_len = c_length(src)
    if dest:
        count = min(src_len, len(dest) - 1)
        dest[:count] = bytes(src[:count])
        dest[count] = 0
    return src_len


def bounded_concat(dest: bytearray, src: BytesLike) -> int:
    """Append the string in ``src`` to the string in ``dest`` within its size.

    Returns the length the combined string would have had without truncation.
    """
    size = len(dest)
    dest_len = c_length(dest)
    src_len = c_length(src)
    room = max(size - 1 - dest_len, 0)
    count = min(room, src_len)
    dest[dest_len:dest_len + count] = bytes(src[:count])
    end = dest_len + count
    if end < size:
        dest[end] = 0
    if dest_len > size:
        return size + src_len
    return dest_len + src_len