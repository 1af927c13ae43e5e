"""Minimal formatted output and plain writers for text streams.

Supported conversions: ``%c %s %p %d %i %u %x %X %%``. Unknown
conversions produce nothing.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

from .memory import c_length

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _as_int(value: Any) -> int:
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def _char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    return value[:c_length(value)]


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def _signed(value: Any) -> str:
    return str(_int32(_as_int(value)))


def _unsigned(value: Any) -> str:
    return str(_as_int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(_as_int(value) & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(_as_int(value) & _UINT_MASK, "X")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_message(fmt: str, *args: Any) -> str:
    """The text that :func:`printf` would write for ``fmt`` and ``args``."""
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(remaining, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    message = format_message(fmt, *args)
    sys.stdout.write(message)
    return len(message)


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(stream).write(_char(c))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL."""
    _stream(stream).write(text[:c_length(text)])


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    out = _stream(stream)
    out.write(text[:c_length(text)])
    out.write("\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal."""
    _stream(stream).write(str(_as_int(n)))


def count_digits(num: int) -> int:
    """Characters needed to print ``num`` in decimal, sign included."""
    num = _as_int(num)
    count = 1 if num < 0 else 0
    if num == 0:
        return 1
    num = abs(num)
    while num:
        num //= 10
        count += 1
    return count