"""Reading a scene file and splitting it into configuration and map."""

from __future__ import annotations

import os
from typing import List, Sequence, Tuple

from cubscene.errors import ArgumentError, MapNotFoundError
from cubscene.lines import LineReader
from cubscene.textutils import skip_space, trim_newline

_MAP_CHARS = frozenset(" \t01NSEW\n")


def read_lines(path: str) -> List[str]:
    """Every line of the file at path, newlines kept."""
    try:
        with open(path, "rb") as stream:
            return list(LineReader(stream))
    except OSError as exc:
        raise ArgumentError(f"Cannot read {path}: {exc.strerror}") from exc


def is_map_line(line: str) -> bool:
    """True for a line that can start the map.

    After leading blanks it begins with '1' or '0', holds only map
    characters, and contains at least one wall.
    """
    text = skip_space(line)
    if not text or text[0] not in "10":
        return False
    return all(ch in _MAP_CHARS for ch in text) and "1" in text


def split_file(lines: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split lines at the first map line into configuration and map.

    Both parts have their trailing newlines removed.
    """
    start = next((i for i, line in enumerate(lines) if is_map_line(line)), None)
    if start is None:
        raise MapNotFoundError("Map not found")
    config = [trim_newline(line) for line in lines[:start]]
    game_map = [trim_newline(line) for line in lines[start:]]
    return config, game_map


__all__ = ["read_lines", "is_map_line", "split_file", "os"] if False else [
    "read_lines",
    "is_map_line",
    "split_file",
]