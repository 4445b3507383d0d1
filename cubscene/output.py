"""Writing characters, strings and numbers to a stream or file descriptor.

A destination may be an integer file descriptor, a binary stream, or a
text stream.
"""

from __future__ import annotations

import io
import os
from typing import IO, Any, Union

from cubscene.numconv import itoa
from cubscene.strtools import strlen

Destination = Union[int, IO[Any]]


def _write(stream: Destination, text: str) -> None:
    if isinstance(stream, bool):
        raise TypeError("a file descriptor must be an int")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    elif isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)


def putchar_fd(c: Union[int, str], stream: Destination) -> None:
    """Write a single character, given as a character or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write(stream, ch)


def putstr_fd(s: str, stream: Destination) -> None:
    """Write a string up to its terminator."""
    _write(stream, s[: strlen(s)])


def putendl_fd(s: str, stream: Destination) -> None:
    """Write a string followed by a newline."""
    putstr_fd(s, stream)
    putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: Destination) -> None:
    """Write an integer in decimal."""
    _write(stream, itoa(n))