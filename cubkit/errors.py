"""Error codes reported while loading and running a scene."""

from __future__ import annotations

from enum import IntEnum

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"


class ErrorCode(IntEnum):
    """Every failure the program can report, in its fixed numbering."""

    OK = 0
    USAGE = 1
    INVALID_FILENAME = 2
    INVALID_PATH = 3
    INVALID_ORDER = 4
    DUP_TEXTURE = 5
    UNKNOWN_TEXTURE_ID = 6
    INVALID_COLORS = 7
    DUP_COLOR = 8
    ALLOC = 9
    INVALID_DATA_FORMAT = 10
    INVALID_MAP_CHARACTER = 11
    INVALID_MAP_FORMAT = 12
    DUP_PLAYER_POS = 13
    COUNT = 14

    @property
    def description(self) -> str:
        """A readable form of the code's name."""
        return self.name.lower().replace("_", " ")


class CubError(Exception):
    """Raised when an operation fails with one of the known error codes."""

    def __init__(self, code):
        code = ErrorCode(code)
        if code in (ErrorCode.OK, ErrorCode.COUNT):
            raise ValueError(f"{code.name} is not an error code")
        self.code = code
        super().__init__(code.description)