"""Reading scene files line by line."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .scene import FileOpenError


def iter_lines(file_path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of a file, each keeping its trailing newline if it has one.

    Only ``\\n`` ends a line; other bytes such as ``\\r`` are kept as they are.
    Raises FileOpenError when the file cannot be opened.
    """
    try:
        handle = open(file_path, "rb")
    except OSError as exc:
        raise FileOpenError() from exc
    with handle:
        for raw in handle:
            yield raw.decode("utf-8", errors="surrogateescape")


def read_map(file_path: str | os.PathLike[str]) -> list[str]:
    """Return every line of the file with its trailing newline removed."""
    return [line[:-1] if line.endswith("\n") else line for line in iter_lines(file_path)]