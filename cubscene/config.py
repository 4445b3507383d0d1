"""Scene configuration: wall textures and floor/ceiling colours."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional

from cubscene.errors import ConfigError
from cubscene.numconv import atoi
from cubscene.strtransform import split
from cubscene.textutils import is_empty_line, skip_space

_UNSET = -1
_COLOR_CHARS = frozenset("0123456789 \t")
_PATH_END = " \t\n"
_TEXTURE_KEYS = {"NO ": "no", "SO ": "so", "WE ": "we", "EA ": "ea"}
_COLOR_KEYS = {"F ": "floor", "C ": "ceiling"}


@dataclass
class Color:
    """An RGB colour; every channel is -1 until the colour is set."""

    r: int = _UNSET
    g: int = _UNSET
    b: int = _UNSET

    def is_set(self) -> bool:
        """True when no channel holds the unset marker."""
        return _UNSET not in (self.r, self.g, self.b)


@dataclass
class Config:
    """Texture paths for the four wall faces and the two surface colours."""

    no: Optional[str] = None
    so: Optional[str] = None
    we: Optional[str] = None
    ea: Optional[str] = None
    floor: Color = field(default_factory=Color)
    ceiling: Color = field(default_factory=Color)

    def is_complete(self) -> bool:
        """True when every texture and both colours are present."""
        textures = (self.no, self.so, self.we, self.ea)
        return all(t is not None for t in textures) and self.floor.is_set() and self.ceiling.is_set()


def atoi_color(text: Optional[str]) -> int:
    """Parse one colour channel: digits with optional blanks, 0 to 255."""
    if not text:
        raise ConfigError("empty colour channel")
    if any(ch not in _COLOR_CHARS for ch in text):
        raise ConfigError(f"invalid colour channel {text!r}")
    value = atoi(text)
    if not 0 <= value <= 255:
        raise ConfigError(f"colour channel out of range: {text!r}")
    return value


def parse_color(line: str) -> Color:
    """Parse a colour line such as 'F 220,100,0'; the first character is the key."""
    parts = split(skip_space(line[1:]), ",")
    if len(parts) < 3:
        raise ConfigError(f"colour needs three channels: {line!r}")
    r, g, b = (atoi_color(part) for part in parts[:3])
    return Color(r, g, b)


def _file_opens(path: str) -> bool:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def parse_texture(line: str, current: Optional[str]) -> str:
    """Parse a texture line such as 'NO ./north.png' and return its path.

    The path must name a file that can be opened; a texture that is already
    set may not be given again.
    """
    if current is not None:
        raise ConfigError(f"texture given twice: {line!r}")
    rest = skip_space(line[2:])
    if not rest or rest[0] == "\n":
        raise ConfigError(f"texture path missing: {line!r}")
    end = next((i for i, ch in enumerate(rest) if ch in _PATH_END), len(rest))
    path = rest[:end]
    if not _file_opens(path):
        raise ConfigError(f"texture file cannot be opened: {path!r}")
    return path


def parse_config_line(config: Config, line: str) -> None:
    """Apply one configuration line to config; blank lines are ignored."""
    text = skip_space(line)
    if is_empty_line(text):
        return
    for key, attr in _TEXTURE_KEYS.items():
        if text.startswith(key):
            setattr(config, attr, parse_texture(text, getattr(config, attr)))
            return
    for key, attr in _COLOR_KEYS.items():
        if text.startswith(key):
            setattr(config, attr, parse_color(text))
            return
    raise ConfigError(f"unknown configuration line: {line!r}")


def parse_config(lines: Iterable[str]) -> Config:
    """Build a Config from the configuration part of a scene file."""
    config = Config()
    for line in lines:
        try:
            parse_config_line(config, line)
        except ConfigError as exc:
            raise ConfigError(f"Invalid line in config: {line}") from exc
    return config


def validate_config(config: Config) -> Config:
    """Return config if it is complete; raise ConfigError otherwise."""
    if not config.is_complete():
        raise ConfigError("Invalid in config")
    return config