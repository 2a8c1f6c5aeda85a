"""Scene description data: identifiers, colours, errors and the parsed scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path


class Identifier(IntEnum):
    """Element identifiers that may appear in a scene file header."""

    NO = 1
    SO = 2
    WE = 3
    EA = 4
    F = 5
    C = 6

    @property
    def is_texture(self) -> bool:
        """True for the four wall texture identifiers."""
        return self in _TEXTURES

    @property
    def is_color(self) -> bool:
        """True for the floor and ceiling colour identifiers."""
        return self in _COLORS


_TEXTURES = frozenset({Identifier.NO, Identifier.SO, Identifier.WE, Identifier.EA})
_COLORS = frozenset({Identifier.F, Identifier.C})


@dataclass
class Color:
    """An RGB colour; every channel starts at 0."""

    r: int = 0
    g: int = 0
    b: int = 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class ParseError(ValueError):
    """The scene file does not follow the expected format."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FileOpenError(OSError):
    """A scene file could not be opened for reading."""

    def __init__(self, message: str = "Unable to open the file.") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class Scene:
    """Everything read from a scene file so far."""

    file_path: str | Path = ""
    grid: list[str] = field(default_factory=list)
    floor: Color = field(default_factory=Color)
    ceiling: Color = field(default_factory=Color)
    seen: set[Identifier] = field(default_factory=set)

    @property
    def grid_height(self) -> int:
        return len(self.grid)

    def mark(self, identifier: Identifier) -> None:
        """Record that an identifier was found; a second sighting is an error."""
        identifier = Identifier(identifier)
        if identifier in self.seen:
            raise ParseError(
                f"duplicate texture ID : '{identifier.name}' found."
            )
        self.seen.add(identifier)

    def is_complete(self) -> bool:
        """True once every identifier has been found."""
        return self.seen.issuperset(Identifier)