"""Path reconstruction from parsed entries.

``plan_operations`` is the only place resolved paths are computed; preview
and apply both consume its output.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import ParseError
from ..tree_text.parser import PATH_SEPARATOR
from ..tree_text.types import Entry, EntryKind
from .types import Operation, ScaffoldPlan, ScaffoldStats

logger = logging.getLogger(__name__)


class PathStack:
    """Depth-indexed ancestor directory names for one pre-order traversal."""

    def __init__(self) -> None:
        self._segments: list[str] = []

    def __len__(self) -> int:
        return len(self._segments)

    def truncate(self, depth: int) -> None:
        del self._segments[depth:]

    def push(self, name: str) -> None:
        self._segments.append(name)

    def segments(self, elide_root: bool = False) -> list[str]:
        """Segments used for output paths, without the bottom one when ``elide_root``."""
        if elide_root:
            return self._segments[1:]
        return list(self._segments)


def join_output_path(output_root: str, segments: Iterable[str]) -> str:
    """Join ``segments`` under ``output_root`` with ``/``.

    An empty root yields a bare relative path; trailing separators on the
    root collapse so no doubled or spurious separators appear.
    """
    parts = [segment for segment in segments if segment]
    root = str(output_root)
    if not root:
        return PATH_SEPARATOR.join(parts)
    stripped = root.rstrip(PATH_SEPARATOR)
    if not stripped:
        return PATH_SEPARATOR + PATH_SEPARATOR.join(parts)
    return PATH_SEPARATOR.join([stripped, *parts])


def plan_operations(
    entries: Iterable[Entry],
    output_root: str = "",
    skip_first_directory: bool = False,
) -> ScaffoldPlan:
    """Resolve every entry to a creation operation, in input order.

    With ``skip_first_directory`` the first depth-0 entry is consumed once:
    a directory there stays on the stack for depth bookkeeping but is left
    out of every output path until another depth-0 entry replaces it.
    """
    stack = PathStack()
    skip_pending = skip_first_directory
    root_elided = False
    operations: list[Operation] = []
    dir_count = 0
    file_count = 0

    for entry in entries:
        if entry.depth > len(stack):
            raise ParseError(
                f"entry {entry.name!r} at depth {entry.depth} has no parent directory at depth {entry.depth - 1}",
                entry.line_number,
                entry.raw_line,
            )
        stack.truncate(entry.depth)
        if entry.depth == 0:
            root_elided = False

        if skip_pending and entry.depth == 0:
            skip_pending = False
            if entry.is_dir:
                stack.push(entry.name)
                root_elided = True
                logger.debug("eliding root directory %r", entry.name)
                continue
            logger.warning("first top-level entry %r is a file; nothing to skip", entry.name)

        if entry.kind is EntryKind.DIRECTORY:
            stack.push(entry.name)
            path = join_output_path(output_root, stack.segments(root_elided))
            dir_count += 1
        else:
            path = join_output_path(output_root, [*stack.segments(root_elided), entry.name])
            file_count += 1
        operation = Operation(kind=entry.kind, path=path, entry=entry)
        operations.append(operation)
        logger.debug("planned %s", operation)

    return ScaffoldPlan(
        operations=tuple(operations),
        stats=ScaffoldStats(dir_count=dir_count, file_count=file_count),
    )


__all__ = [
    "PathStack",
    "join_output_path",
    "plan_operations",
]
