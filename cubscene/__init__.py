"""Reading and header validation of .cub scene description files."""

__version__ = "0.1.0"

__all__ = ["__version__"]