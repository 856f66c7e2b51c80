"""Apply planned operations to the real filesystem.

Creation is create-if-absent, so applying the same plan twice is a no-op the
second time. The first failure aborts the run; nothing is rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from ..errors import FilesystemError
from .types import ApplyResult, Operation

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and missing ancestors; return ``False`` if it already existed."""
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def ensure_empty_file(path: Path) -> bool:
    """Create an empty file at ``path`` unless one exists; never touch timestamps."""
    if path.is_file():
        return False
    if path.exists():
        raise IsADirectoryError(f"'{path}' exists and is not a regular file")
    ensure_directory(path.parent)
    with path.open("a", encoding="utf-8"):
        pass
    return True


def apply_operation(operation: Operation) -> bool:
    """Apply one operation, returning whether anything new was created."""
    target = operation.fs_path
    try:
        if operation.is_dir:
            return ensure_directory(target)
        return ensure_empty_file(target)
    except OSError as exc:
        raise FilesystemError(f"cannot create {operation}: {exc}", operation=operation) from exc


def apply_operations(
    operations: Iterable[Operation],
    on_applied: Callable[[Operation, bool], None] | None = None,
) -> ApplyResult:
    """Apply ``operations`` in order and tally created versus existing paths.

    ``on_applied`` is called after each successful operation with the
    operation and its ``created`` flag; the CLI uses it for progress lines.
    """
    created_dirs = existing_dirs = created_files = existing_files = 0
    for operation in operations:
        created = apply_operation(operation)
        if operation.is_dir:
            if created:
                created_dirs += 1
            else:
                existing_dirs += 1
        elif created:
            created_files += 1
        else:
            existing_files += 1
        logger.info("%s %s", "created" if created else "exists", operation)
        if on_applied is not None:
            on_applied(operation, created)

    return ApplyResult(
        created_dirs=created_dirs,
        existing_dirs=existing_dirs,
        created_files=created_files,
        existing_files=existing_files,
    )


__all__ = [
    "ensure_directory",
    "ensure_empty_file",
    "apply_operation",
    "apply_operations",
]
