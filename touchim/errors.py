"""Exception hierarchy shared by the parser, materializer, and CLI.

Core modules raise these; only ``touchim.cli`` turns them into exit messages.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .scaffold.types import Operation


class TouchimError(Exception):
    """Base class for every fatal touchim failure."""


class InputNotFoundError(TouchimError):
    """Raised when the tree description file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Input file '{path}' not found.")


class InputReadError(TouchimError):
    """Raised when the tree description exists but cannot be read."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read input file '{path}': {reason}")


class ParseError(TouchimError):
    """Malformed tree text: bad indentation, depth jumps, or no root."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        if self.line is None:
            return f"line {self.line_number}: {self.message}"
        return f"line {self.line_number}: {self.message}: {self.line.rstrip()!r}"


class FilesystemError(TouchimError):
    """A directory/file creation (or reset) failed on disk."""

    def __init__(
        self,
        message: str,
        operation: Operation | None = None,
        path: Path | str | None = None,
    ) -> None:
        self.operation = operation
        if path is None and operation is not None:
            path = operation.path
        self.path = None if path is None else Path(path)
        super().__init__(message)


__all__ = [
    "TouchimError",
    "InputNotFoundError",
    "InputReadError",
    "ParseError",
    "FilesystemError",
]
