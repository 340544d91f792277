"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1024


def _find_newline(data: AnyStr) -> int:
    """Return the index of the first newline in data, or -1."""
    if isinstance(data, bytes):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Data is pulled from the stream in chunks of buffer_size until a
    newline is buffered or the stream is exhausted. Each line keeps its
    trailing newline; the last line may have none.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> None:
        while self._pending is None or _find_newline(self._pending) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        data = self._pending
        if not data:
            self._pending = None
            return None
        end = _find_newline(data)
        if end < 0:
            self._pending = None
            return data
        self._pending = data[end + 1:]
        return data[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream, newlines included."""
    yield from LineReader(stream, buffer_size)