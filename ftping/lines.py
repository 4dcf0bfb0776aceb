"""Line-by-line reading from a stream through a fixed-size read buffer."""

from typing import AnyStr, Generic, IO, Iterator, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream, buffer_size units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    readline returns None once the stream is exhausted.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._separator: Optional[AnyStr] = None
        self._eof = False

    def _take_line(self) -> Optional[AnyStr]:
        """Split the first complete line off the pending data, if there is one."""
        if not self._pending or self._separator is None:
            return None
        index = self._pending.find(self._separator)
        if index < 0:
            return None
        line = self._pending[: index + 1]
        self._pending = self._pending[index + 1 :]
        return line

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None at the end of the stream."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            if self._eof:
                rest, self._pending = self._pending, None
                return rest if rest else None
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                continue
            if self._separator is None:
                self._separator = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            if self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line