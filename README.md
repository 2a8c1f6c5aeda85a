# cubscene

`cubscene` reads and checks the header of `.cub` scene files, the small text
format that describes a raycasting level: four wall textures, a floor colour,
a ceiling colour and then the map itself.

## Installing

```
pip install .
```

## Command line

```
cubscene path/to/level.cub
```

The command takes exactly one argument.

- When the file is valid it exits with status 0.
- When the file cannot be opened it prints `Error: Unable to open the file.`
  and exits with status 1.
- When the content or the file name is wrong it prints a line that starts
  with `Error parsing:` followed by the reason, and exits with status 1.
- With any other number of arguments it does nothing and exits with status 0.

The file is read before its name is checked, so a missing file is reported as
one that cannot be opened even if its name does not end in `.cub`.

## The format

The header is made of lines such as:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- Empty lines are skipped. Leading whitespace before an identifier is allowed.
- `NO`, `SO`, `WE`, `EA` take a texture path: the rest of the line after the
  identifier and any whitespace. The path must name a file that can be
  opened for reading.
- `F` and `C` must be followed by whitespace, then a colour written as
  `R,G,B`. Each value is a whole number from 0 to 255 with no sign; leading
  whitespace before a value is allowed, anything after its digits is not.
  Empty fields between commas are ignored, so exactly three values must
  remain.
- Any other line in the header is rejected with
  `identification incorrect.`
- Each identifier may appear only once; a repeat is reported as
  `duplicate texture ID : '<ID>' found.`
- Reading of the header stops as soon as all six identifiers have been seen.
- The file name must end in `.cub` and be longer than just `.cub`.

## From Python

```python
from cubscene.validate import parse
from cubscene.scene import ParseError, FileOpenError

try:
    scene = parse("level.cub")
except FileOpenError:
    print("cannot open the file")
except ParseError as err:
    print(f"invalid scene: {err}")
else:
    print(scene.floor.as_tuple(), scene.ceiling.as_tuple())
```

### `cubscene.scene`

- `Identifier` — an `IntEnum` with members `NO`, `SO`, `WE`, `EA`, `F`, `C`
  and the properties `is_texture` and `is_color`.
- `Color` — a dataclass with `r`, `g`, `b` (all 0 by default) and
  `as_tuple()`.
- `Scene` — a dataclass with `file_path`, `grid` (the file's lines without
  their newlines), `floor`, `ceiling` and `seen` (the identifiers found so
  far). `grid_height` is the number of lines; `mark(identifier)` records an
  identifier and raises `ParseError` on a duplicate; `is_complete()` is true
  once all six have been seen.
- `ParseError` — a `ValueError` raised for malformed content; its text is in
  `message`.
- `FileOpenError` — an `OSError` raised when a file cannot be opened.

### `cubscene.validate`

- `parse(file_path)` reads, checks and returns a `Scene`.
- `check_identifiers(scene)` validates the header lines of a `Scene`.
- `check_extension(file_path)` returns the path as a string or raises.
- `check_path(scene, identifier, path)` checks that a texture file opens and
  records the identifier.
- `parse_color(text)` turns `"R,G,B"` into a `Color`.
- `atoi_rgb(text)` parses a single colour channel.
- `identify_key(current, following)` returns the `Identifier` that two
  characters start, or `None`.
- `is_whitespace(ch)` tests for space, tab, newline, vertical tab, form feed
  or carriage return.

### `cubscene.mapfile`

- `iter_lines(file_path)` yields each line with its trailing `\n` kept; only
  `\n` ends a line.
- `read_map(file_path)` returns all lines with the trailing `\n` removed.

Both raise `FileOpenError` when the file cannot be opened.

### `cubscene.cli`

- `main(argv=None)` runs the command and returns its exit status.

## What it does not do

`cubscene` only checks the header. The map lines that follow it are kept in
`Scene.grid` but are not validated: walls, enclosure and player position are
not checked. Nothing is drawn either; there is no game window or raycasting
renderer, and texture files are only opened to see that they exist, not
loaded.