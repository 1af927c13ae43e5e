"""Number conversion, splitting and trimming of text."""

from __future__ import annotations

from typing import List, Optional

from .memory import c_length

_LEADING_SPACE = " \t\n\v\f\r"
_TRAILING_BLANKS = " \t\n"


def _terminated(text: str) -> str:
    return text[:c_length(text)]


def parse_int(text: str) -> int:
    """Read a decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    reading stops at the first non-digit. Text with no digits gives 0.
    """
    body = _terminated(text).lstrip(_LEADING_SPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    result = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def int_to_str(n: int) -> str:
    """The decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    return str(n)


def remove_trailing_newline(text: Optional[str]) -> Optional[str]:
    """``text`` without trailing spaces, tabs and newlines; None stays None."""
    if text is None:
        return None
    return _terminated(text).rstrip(_TRAILING_BLANKS)


def split(text: str, sep: str) -> List[str]:
    """The non-empty pieces of ``text`` between occurrences of ``sep``.

    The last piece also loses its trailing spaces, tabs and newlines.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    words = [word for word in _terminated(text).split(sep) if word]
    if words:
        words[-1] = remove_trailing_newline(words[-1])
    return words


def trim(text: str, charset: str) -> str:
    """``text`` with characters from ``charset`` removed from both ends."""
    body = _terminated(text)
    chars = _terminated(charset)
    if not chars:
        return body
    return body.strip(chars)


def rtrim(text: Optional[str], charset: str) -> Optional[str]:
    """``text`` with characters from ``charset`` removed from its end."""
    if text is None:
        return None
    body = _terminated(text)
    chars = _terminated(charset)
    if not chars:
        return body
    return body.rstrip(chars)


def substring(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to ``length`` characters of ``text`` from index ``start``.

    A start past the end gives an empty text; None text gives None.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _terminated(text)
    if start > len(body):
        return ""
    return body[start:start + length]