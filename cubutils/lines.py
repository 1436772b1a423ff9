"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(
        self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        parts: list[AnyStr] = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._pending = chunk
            pending = self._pending
            newline = b"\n" if isinstance(pending, bytes) else "\n"
            index = pending.find(newline)
            if index >= 0:
                parts.append(pending[: index + 1])
                self._pending = pending[index + 1:]
                break
            parts.append(pending)
            self._pending = pending[:0]
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(
    stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> Iterator[AnyStr]:
    """Yield the lines of stream, each with its newline if it had one."""
    yield from LineReader(stream, buffer_size)