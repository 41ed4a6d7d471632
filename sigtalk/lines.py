"""Line-by-line reading from a binary stream through a fixed-size buffer."""

from __future__ import annotations

import re
from typing import BinaryIO, Iterator

_TERMINATOR = re.compile(rb"[\n\0]")


class LineReader:
    """Reads lines from a binary stream ``buffer_size`` bytes at a time.

    Lines keep their trailing newline.  A NUL byte ends the current line
    and is dropped; a NUL byte at the start of a line ends the input.
    """

    def __init__(self, stream: BinaryIO, buffer_size: int = 42) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer = b""
        self._position = 0

    def _fill(self) -> None:
        data = self._stream.read(self._buffer_size)
        self._buffer = bytes(data) if data else b""
        self._position = 0

    def next_line(self) -> bytes | None:
        """Return the next line, or None when there is nothing more to read."""
        if self._position >= len(self._buffer):
            self._fill()
        if not self._buffer or self._buffer[self._position] == 0:
            return None
        parts: list[bytes] = []
        while True:
            match = _TERMINATOR.search(self._buffer, self._position)
            if match is not None:
                stop = match.end()
                piece = self._buffer[self._position:stop]
                self._position = stop
                if match.group() == b"\0":
                    piece = piece[:-1]
                parts.append(piece)
                break
            parts.append(self._buffer[self._position:])
            self._fill()
            if not self._buffer:
                break
        return b"".join(parts)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.next_line, None)