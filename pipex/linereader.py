"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled with ``os.read`` in chunks of ``buffer_size`` bytes;
    bytes past the returned line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._fd = fd
        self._buffer_size = buffer_size
        self._stash = b""

    def next_line(self) -> str | None:
        """Return the next line with its newline, or None at end of input.

        The last line of the input is returned without a newline if it has
        none. Read errors are raised as OSError.
        """
        while b"\n" not in self._stash:
            chunk = os.read(self._fd, self._buffer_size)
            if not chunk:
                break
            self._stash += chunk
        if not self._stash:
            return None
        head, sep, rest = self._stash.partition(b"\n")
        self._stash = rest
        return (head + sep).decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd, buffer_size)