# cubscene

`cubscene` reads `.cub` scene files, the small text format that describes a
raycasting level: four wall textures, a floor colour, a ceiling colour and a
grid map. It checks that the configuration part of the file is well formed
and complete, and reports the first problem it finds.

## A scene file

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- The map begins at the first line that, after leading spaces and tabs,
  starts with `0` or `1`, holds only `0`, `1`, `N`, `S`, `E`, `W`, spaces,
  tabs and newlines, and contains at least one `1`. Every line before it is
  configuration; every line from it on is map. A file with no such line is
  rejected.
- Configuration lines may be indented with spaces or tabs. Blank lines are
  ignored; any other line that is not one of the entries below is an error.
- `NO `, `SO `, `WE `, `EA ` (key followed by a space) name texture files.
  The path is the first word after the key; the file must open for reading,
  and each key may appear only once.
- `F ` and `C ` give the floor and ceiling colours as red, green and blue
  values separated by commas. Each value is made of digits, optionally with
  spaces or tabs, and lies between 0 and 255. At least three values are
  required; values after the third are ignored.
- All four textures and both colours must be present.

## Command line

```
cubscene level.cub
```

Exactly one argument is accepted. The name must end in `.cub`, and the file
must exist, be readable and not be empty. On success the command exits with
status 0. On failure it prints `Error` followed by a description on the next
line, and exits with status 1.

## Library use

```python
from cubscene.cli import load_scene
from cubscene.config import parse_config, validate_config
from cubscene.scene import read_lines, split_file

lines = read_lines("level.cub")
config_lines, map_lines = split_file(lines)
config = validate_config(parse_config(config_lines))

print(config.no, config.floor)
```

`load_scene(path)` does all of this in one call and returns the
`(config, map_lines)` pair. `cubscene.config.Config` holds the texture paths
`no`, `so`, `we`, `ea` and the `floor` and `ceiling` colours as
`cubscene.config.Color` values with `r`, `g` and `b` channels.

Failures raise subclasses of `cubscene.errors.CubError`: `ConfigError` for a
bad configuration line or an incomplete configuration, `MapNotFoundError`
when no map is present, and `ArgumentError` for a bad command line or an
unreadable input file.

The package also carries the small helpers it is built on:
`cubscene.lines.LineReader` and `iter_lines` read text line by line from a
file descriptor or stream; `cubscene.textutils`, `cubscene.strtools`,
`cubscene.strtransform`, `cubscene.numconv`, `cubscene.chars`,
`cubscene.memory` and `cubscene.output` provide C-style string, number,
character, byte-buffer and output helpers; `cubscene.linkedlist.LinkedList`
is a singly linked list.

## What it does not do

`cubscene` only reads and checks scene files. It does not render a level,
run a game or open a window. Map lines are returned as they are, with their
trailing newlines removed: their shape is not checked further, so enclosed
walls and the number of player start positions are not validated. Texture
files are only checked to be openable; their contents are not read.

## Tests

```
pip install -e ".[test]"
pytest
```