"""Validation of scene file headers: identifiers, texture paths and colours."""

from __future__ import annotations

import os

from .mapfile import read_map
from .scene import Color, Identifier, ParseError, Scene

_RGB_ERROR = "rgb color format is not respected (X,X,X)."
_ID_ERROR = "identification incorrect."
_PATH_ERROR = "cannot find texture's path."
_EXTENSION_ERROR = "Invalid file. Extension must be '.cub'."

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

_TEXTURE_KEYS = {
    ("N", "O"): Identifier.NO,
    ("S", "O"): Identifier.SO,
    ("W", "E"): Identifier.WE,
    ("E", "A"): Identifier.EA,
}
_COLOR_KEYS = {"F": Identifier.F, "C": Identifier.C}


def is_whitespace(ch: str) -> bool:
    """True for a single space, tab, newline, vertical tab, form feed or CR."""
    return ch in _WHITESPACE


def _skip_whitespace(line: str, start: int) -> int:
    while start < len(line) and is_whitespace(line[start]):
        start += 1
    return start


def atoi_rgb(text: str) -> int:
    """Parse one colour channel: optional leading whitespace, then 0-255 digits only."""
    digits = text[_skip_whitespace(text, 0):]
    if not digits or not _DIGITS.issuperset(digits):
        raise ParseError(_RGB_ERROR)
    value = int(digits)
    if value > 255:
        raise ParseError(_RGB_ERROR)
    return value


def identify_key(current: str, following: str) -> Identifier | None:
    """Return the identifier that starts with these two characters, if any."""
    texture = _TEXTURE_KEYS.get((current, following))
    if texture is not None:
        return texture
    if is_whitespace(following):
        return _COLOR_KEYS.get(current)
    return None


def check_extension(file_path: str | os.PathLike[str]) -> str:
    """Return the path as a string if it names a '.cub' file, else raise ParseError."""
    path = os.fspath(file_path)
    if len(path) <= 4 or not path.endswith(".cub"):
        raise ParseError(_EXTENSION_ERROR)
    return path


def parse_color(text: str) -> Color:
    """Parse 'R,G,B'; empty fields between commas are ignored."""
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise ParseError(_RGB_ERROR)
    red, green, blue = (atoi_rgb(part) for part in parts)
    return Color(red, green, blue)


def check_path(scene: Scene, identifier: Identifier, path: str) -> None:
    """Check that a texture path can be opened, then record the identifier."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, ValueError):
        raise ParseError(_PATH_ERROR) from None
    os.close(fd)
    scene.mark(identifier)


def check_identifiers(scene: Scene) -> None:
    """Validate header lines until every identifier has been found.

    Each non-empty line must hold exactly one identifier followed by its value.
    Lines after the header is complete are not examined.
    """
    for line in scene.grid:
        if scene.is_complete():
            break
        if not line:
            continue
        start = _skip_whitespace(line, 0)
        current = line[start:start + 1]
        if current not in _UPPER:
            raise ParseError(_ID_ERROR)
        identifier = identify_key(current, line[start + 1:start + 2])
        if identifier is None:
            raise ParseError(_ID_ERROR)
        if identifier.is_texture:
            value_start = _skip_whitespace(line, start + 2)
            check_path(scene, identifier, line[value_start:])
        else:
            value_start = _skip_whitespace(line, start + 1)
            color = parse_color(line[value_start:])
            if identifier is Identifier.F:
                scene.floor = color
            else:
                scene.ceiling = color
            scene.mark(identifier)


def parse(file_path: str | os.PathLike[str]) -> Scene:
    """Read and validate a scene file, returning the resulting Scene."""
    grid = read_map(file_path)
    path = check_extension(file_path)
    scene = Scene(file_path=path, grid=grid)
    check_identifiers(scene)
    return scene