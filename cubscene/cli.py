"""Command-line entry point: validate a scene file given as the only argument."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .scene import FileOpenError, ParseError, Scene
from .validate import parse


def _render(scene: Scene) -> None:
    """Rendering stage; nothing is drawn yet."""
    del scene


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the scene named by the single argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        scene = parse(args[0])
    except FileOpenError:
        print("Error: Unable to open the file.")
        return 1
    except ParseError as exc:
        print(f"Error parsing: {exc.message}")
        return 1
    _render(scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())