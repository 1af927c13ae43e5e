"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 42
MAX_FD = 1024

_ENCODING = "utf-8"


def _check_fd(fd: int) -> int:
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"expected an integer file descriptor, got {fd!r}")
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor {fd} is outside 0..{MAX_FD - 1}")
    return fd


class LineReader:
    """Reads lines from a file descriptor, keeping what follows each line.

    Each line is returned with its trailing newline, if it had one. A NUL
    byte in a chunk that was read ends that chunk: the bytes after it are
    dropped.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE):
        self.fd = _check_fd(fd)
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"expected an integer buffer size, got {buffer_size!r}")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.buffer_size = buffer_size
        self._pending = b""

    def _fill(self, buffer: bytes) -> bytes:
        while b"\n" not in buffer:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            buffer += chunk.split(b"\0", 1)[0]
        return buffer

    def read_line(self) -> Optional[str]:
        """The next line, or None once nothing is left to read.

        A failed read discards any buffered text and raises OSError.
        """
        try:
            buffer = self._fill(self._pending)
        except OSError:
            self._pending = b""
            raise
        if not buffer:
            self._pending = b""
            return None
        end = buffer.find(b"\n")
        if end < 0:
            line, self._pending = buffer, b""
        else:
            line, self._pending = buffer[:end + 1], buffer[end + 1:]
        return line.decode(_ENCODING, errors="replace")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def next_line(fd: int) -> Optional[str]:
    """The next line from ``fd``, keeping separate buffered state per descriptor."""
    fd = _check_fd(fd)
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd, BUFFER_SIZE)
    return reader.read_line()