"""Removal of a previously scaffolded output directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..errors import FilesystemError

logger = logging.getLogger(__name__)


def _is_protected(target: Path) -> bool:
    """True for paths whose removal would take the caller's context with it."""
    cwd = Path.cwd().resolve()
    if target == Path(target.anchor):
        return True
    if target == Path.home().resolve():
        return True
    return target == cwd or target in cwd.parents


def reset_output_dir(path: Path | str) -> bool:
    """Delete the output directory tree at ``path``.

    Returns ``False`` when there is nothing to delete. Refuses filesystem
    roots, the home directory, and the current directory or its ancestors.
    """
    target = Path(path).expanduser().resolve()
    if not target.exists():
        return False
    if not target.is_dir():
        raise FilesystemError(f"'{path}' is not a directory", path=target)
    if _is_protected(target):
        raise FilesystemError(f"refusing to delete '{path}'", path=target)
    try:
        shutil.rmtree(target)
    except OSError as exc:
        raise FilesystemError(f"cannot delete '{path}': {exc}", path=target) from exc
    logger.info("deleted %s", target)
    return True


__all__ = [
    "reset_output_dir",
]
