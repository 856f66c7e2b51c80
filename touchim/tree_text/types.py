"""Datatypes produced by the tree-text parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    DIRECTORY = "Directory"
    FILE = "File"


@dataclass(frozen=True)
class Entry:
    """One parsed sketch line.

    ``name`` never carries the trailing separator; ``kind`` records whether it
    had one. ``line_number`` and ``raw_line`` are diagnostics only.
    """

    depth: int
    name: str
    kind: EntryKind
    line_number: int | None = None
    raw_line: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


__all__ = [
    "EntryKind",
    "Entry",
]
