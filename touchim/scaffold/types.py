"""Planned filesystem operations and their tallies."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..tree_text.types import Entry, EntryKind


@dataclass(frozen=True)
class Operation:
    """One directory or empty-file creation, resolved to its output path."""

    kind: EntryKind
    path: str
    entry: Entry | None = field(default=None, compare=False)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def fs_path(self) -> Path:
        return Path(self.path)

    def __str__(self) -> str:
        return f"{self.kind.value} {self.path}"


@dataclass(frozen=True)
class ScaffoldStats:
    dir_count: int = 0
    file_count: int = 0


@dataclass(frozen=True)
class ScaffoldPlan:
    """Ordered operations plus counts; shared by preview and apply."""

    operations: tuple[Operation, ...]
    stats: ScaffoldStats


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of applying a plan, split by newly created versus already present."""

    created_dirs: int = 0
    existing_dirs: int = 0
    created_files: int = 0
    existing_files: int = 0

    @property
    def created_total(self) -> int:
        return self.created_dirs + self.created_files


__all__ = [
    "Operation",
    "ScaffoldStats",
    "ScaffoldPlan",
    "ApplyResult",
]
