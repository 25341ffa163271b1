"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 19


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines.

    The stream is read in chunks of at most *buffer_size* characters (or
    bytes). Lines are returned without their newline. Text after the last
    newline is returned as a final line; a trailing newline does not add an
    empty one. Errors raised by the stream propagate to the caller.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if not callable(getattr(stream, "read", None)):
            raise TypeError("stream must have a read() method")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eof = False

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        while True:
            if self._pending is not None:
                head, sep, tail = self._pending.partition(self._newline())
                if sep:
                    self._pending = tail
                    return head
            if self._eof:
                line = self._pending
                self._pending = None
                return line if line else None
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                self._eof = True
            elif self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line