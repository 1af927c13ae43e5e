"""Searching, comparing and building NUL-terminated-style text.

Text is treated the way a C string is: it ends at the first ``"\\0"``
character if there is one.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from itertools import islice, zip_longest
from typing import Any, Callable, Optional, Union

from .memory import c_length

CharLike = Union[str, int]


def _terminated(text: str) -> str:
    return text[:c_length(text)]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c & 0xFF)


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, at the text's length.
    """
    body = _terminated(text)
    target = _char(c)
    if target == "\0":
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def rfind_char(text: Optional[str], c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None; None text gives None."""
    if text is None:
        return None
    body = _terminated(text)
    target = _char(c)
    if target == "\0":
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def find_bounded(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in ``big`` where the match lies within ``length``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _terminated(big)
    needle = _terminated(little)
    if not needle:
        return 0
    for pos in range(len(haystack)):
        if length - pos < len(needle):
            break
        if haystack.startswith(needle, pos):
            return pos
    return None


def _difference(pairs) -> int:
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    return 0


def compare(s1: str, s2: str) -> int:
    """Zero if equal, else the code difference of the first differing characters."""
    return _difference(zip_longest(_terminated(s1), _terminated(s2), fillvalue="\0"))


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue="\0")
    return _difference(islice(pairs, n))


def join(s1: str, s2: str) -> str:
    """The two texts one after the other."""
    if s1 is None or s2 is None:
        raise TypeError("both texts are required")
    return _terminated(s1) + _terminated(s2)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """A new text made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(_terminated(text)))


def for_each_indexed(
    text: Union[str, MutableSequence], func: Callable[[int, Any], Any]
) -> None:
    """Call ``func(index, item)`` for every character or item.

    When ``text`` is a mutable sequence, a result other than None replaces
    the item in place.
    """
    if isinstance(text, str):
        for index, char in enumerate(_terminated(text)):
            func(index, char)
        return
    for index, item in enumerate(list(text)):
        result = func(index, item)
        if result is not None:
            text[index] = result