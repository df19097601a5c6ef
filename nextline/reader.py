"""Line-by-line reading from raw file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 42
DEFAULT_MAX_FD = 1024

_NEWLINE = b"\n"


class LineReader:
    """Reads newline-terminated lines from file descriptors.

    Data read past the end of a returned line is kept per descriptor, so
    several descriptors can be read from in turn without losing input.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE, max_fd: int | None = DEFAULT_MAX_FD):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if max_fd is not None and max_fd <= 0:
            raise ValueError(f"max_fd must be positive, got {max_fd}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._buffers: dict[int, bytes] = {}

    def _check_fd(self, fd: int) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if self.max_fd is not None and fd >= self.max_fd:
            raise ValueError(f"file descriptor {fd} is not below the limit of {self.max_fd}")

    def read_line(self, fd: int) -> bytes | None:
        """Return the next line from ``fd``, newline included, or None at end of input.

        The last line is returned without a newline if the input does not end
        with one. If reading fails, the data buffered for ``fd`` is dropped and
        the OSError is raised.
        """
        self._check_fd(fd)
        data = bytearray(self._buffers.pop(fd, b""))
        newline_at = data.find(_NEWLINE)
        while newline_at == -1:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            start = len(data)
            data += chunk
            found = chunk.find(_NEWLINE)
            if found != -1:
                newline_at = start + found

        if not data:
            return None
        if newline_at == -1:
            return bytes(data)

        line = bytes(data[: newline_at + 1])
        rest = bytes(data[newline_at + 1 :])
        if rest:
            self._buffers[fd] = rest
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line from ``fd`` until end of input."""
        while (line := self.read_line(fd)) is not None:
            yield line

    def discard(self, fd: int) -> None:
        """Forget any data buffered for ``fd``."""
        self._check_fd(fd)
        self._buffers.pop(fd, None)

    def pending(self, fd: int) -> bytes:
        """Return the data read from ``fd`` but not yet returned as a line."""
        self._check_fd(fd)
        return self._buffers.get(fd, b"")


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from ``fd`` using a shared reader, or None at end of input."""
    return _default_reader.read_line(fd)