"""Raycaster value types and error codes, with text, byte-buffer, linked-list, formatting and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "settings",
    "chars",
    "memory",
    "strings",
    "linked",
    "text",
    "printf",
    "line_reader",
]