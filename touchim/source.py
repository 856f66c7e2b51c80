"""Loading the tree sketch from a file or stdin."""

from __future__ import annotations

import sys
from pathlib import Path

from .errors import InputNotFoundError, InputReadError

STDIN_MARKER = "-"


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def read_tree_source(path: Path | str) -> list[str]:
    """Return the sketch lines from ``path`` (``-`` reads stdin).

    Raises ``InputNotFoundError`` when ``path`` is missing or not a file and
    ``InputReadError`` when it exists but reading fails.
    """
    if str(path) == STDIN_MARKER:
        return sys.stdin.read().splitlines()
    source = Path(path)
    if not source.is_file():
        raise InputNotFoundError(source)
    try:
        return read_text(source).splitlines()
    except OSError as exc:
        raise InputReadError(source, exc) from exc


__all__ = [
    "STDIN_MARKER",
    "read_text",
    "read_tree_source",
]
