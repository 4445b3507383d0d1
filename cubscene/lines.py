"""Reading text one line at a time from a file descriptor or stream."""

from __future__ import annotations

import codecs
import os
from typing import IO, Any, Iterator, Optional, Union

BUFFER_SIZE = 42

Source = Union[int, IO[Any]]


class LineReader:
    """Reads lines from a source in chunks of buffer_size.

    The source may be an integer file descriptor, a binary stream or a text
    stream. Binary data is decoded as UTF-8. Each line keeps its newline;
    the final line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, bool):
            raise TypeError("a file descriptor must be an int")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False
        self._decoder = codecs.getincrementaldecoder("utf-8")()

    def _read_chunk(self) -> str:
        if isinstance(self._source, int):
            data: Any = os.read(self._source, self._buffer_size)
        else:
            data = self._source.read(self._buffer_size)
        if isinstance(data, str):
            if not data:
                self._eof = True
            return data
        if not data:
            self._eof = True
            return self._decoder.decode(b"", final=True)
        return self._decoder.decode(bytes(data))

    def read_line(self) -> Optional[str]:
        """The next line including its newline, or None at end of input."""
        while "\n" not in self._pending and not self._eof:
            self._pending += self._read_chunk()
        if not self._pending:
            return None
        cut = self._pending.find("\n")
        end = len(self._pending) if cut < 0 else cut + 1
        line, self._pending = self._pending[:end], self._pending[end:]
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def iter_lines(stream: Source) -> Iterator[str]:
    """Yield every line of stream, newlines kept."""
    yield from LineReader(stream)