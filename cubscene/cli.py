"""Command-line entry point: check a scene file and load it."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Sequence, Tuple

from cubscene.config import Config, parse_config, validate_config
from cubscene.errors import ArgumentError, CubError
from cubscene.scene import read_lines, split_file

SCENE_EXTENSION = ".cub"


def check_extension(name: str, ext: str) -> None:
    """Raise ArgumentError unless the text after name's last dot equals ext."""
    dot = name.rfind(".")
    if dot < 0 or name[dot:] != ext:
        raise ArgumentError("Invalid file extension")


def check_file(name: str) -> None:
    """Raise ArgumentError unless name can be opened, read and is not empty."""
    try:
        fd = os.open(name, os.O_RDONLY)
    except OSError as exc:
        raise ArgumentError("File not found or cannot be read.") from exc
    try:
        data = os.read(fd, 1)
    except OSError as exc:
        raise ArgumentError("File cannot be read.") from exc
    finally:
        os.close(fd)
    if not data:
        raise ArgumentError("Empty file")


def validate_args(argv: Sequence[str]) -> str:
    """Check the arguments (program name excluded) and return the scene path."""
    if len(argv) != 1:
        raise ArgumentError("Invalid number of arguments.")
    path = argv[0]
    check_extension(path, SCENE_EXTENSION)
    check_file(path)
    return path


def load_scene(path: str) -> Tuple[Config, List[str]]:
    """Read a scene file and return its checked configuration and map lines."""
    config_lines, game_map = split_file(read_lines(path))
    config = validate_config(parse_config(config_lines))
    return config, game_map


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate and load the scene named on the command line; 0 on success."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        load_scene(validate_args(args))
    except CubError as exc:
        print(f"Error\n{exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())