"""Buffered line reading from a stream, one line per call."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 50


class LineReader(Generic[AnyStr]):
    """Read lines from ``stream`` in chunks of ``buffer_size``.

    Works with both text and binary streams; lines keep their trailing
    newline, the last line may lack one.
    """

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _has_line(self) -> bool:
        return (
            self._pending is not None
            and self._newline is not None
            and self._newline in self._pending
        )

    def _fill(self) -> None:
        while not self._has_line():
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._pending = chunk if self._pending is None else self._pending + chunk

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline)
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[: cut + 1], pending[cut + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)