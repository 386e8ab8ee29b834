"""Read newline-terminated lines from a file descriptor in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 3


class LineReader:
    """Return one line at a time from ``fd``, keeping any read-ahead between calls.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _take_line(self) -> bytes | None:
        end = self._pending.find(b"\n")
        if end == -1:
            return None
        line = bytes(self._pending[:end + 1])
        del self._pending[:end + 1]
        return line

    def next_line(self) -> bytes | None:
        """Return the next line, or None at end of input.

        A read error discards the partial line and the read-ahead, then
        propagates.
        """
        line = self._take_line()
        if line is not None:
            return line
        while True:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                rest = bytes(self._pending)
                self._pending.clear()
                return rest or None
            self._pending += chunk
            line = self._take_line()
            if line is not None:
                return line

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line