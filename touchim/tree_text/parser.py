"""Tree-text parsing into ordered ``Entry`` records.

Pure text processing: no filesystem access happens here. Entries come out in
input order, which is a pre-order walk of the sketched tree.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..errors import ParseError
from .glyphs import leading_space_count, normalize_tree_glyphs
from .types import Entry, EntryKind

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"
DEFAULT_INDENT_UNIT = 4

_INLINE_COMMENT_RE = re.compile(r"\s+#(?:\s.*)?$")


def _strip_inline_comment(text: str) -> str:
    return _INLINE_COMMENT_RE.sub("", text)


def _split_kind(text: str) -> tuple[str, EntryKind]:
    """Classify ``text`` by its trailing separator and return the bare name."""
    if text.endswith(PATH_SEPARATOR):
        return text.rstrip(PATH_SEPARATOR).rstrip(), EntryKind.DIRECTORY
    return text, EntryKind.FILE


def parse_tree_lines(
    lines: Iterable[str],
    indent_unit: int = DEFAULT_INDENT_UNIT,
    strict_indent: bool = True,
) -> list[Entry]:
    """Parse sketch lines into entries.

    Depth is ``leading spaces // indent_unit`` measured after glyph
    normalization. With ``strict_indent`` a remainder is a ``ParseError``;
    otherwise it is truncated away. An entry may sit at most one level below
    the deepest directory still open, and at least one directory is required.
    """
    if indent_unit < 1:
        raise ValueError("indent unit must be >= 1")

    entries: list[Entry] = []
    open_dirs = 0
    for line_number, raw in enumerate(lines, start=1):
        raw_line = raw.rstrip("\r\n")
        normalized = normalize_tree_glyphs(raw_line, indent_unit)
        text = normalized.strip()
        if not text or text.startswith("#"):
            continue
        text = _strip_inline_comment(text)

        spaces = leading_space_count(normalized)
        if spaces % indent_unit:
            if strict_indent:
                raise ParseError(
                    f"indentation of {spaces} spaces is not a multiple of {indent_unit}",
                    line_number,
                    raw_line,
                )
            logger.debug("line %d: truncating %d leading spaces to a multiple of %d", line_number, spaces, indent_unit)
        depth = spaces // indent_unit

        if depth > open_dirs:
            raise ParseError(
                f"entry at depth {depth} has no parent directory at depth {depth - 1}",
                line_number,
                raw_line,
            )

        name, kind = _split_kind(text)
        if not name:
            raise ParseError("entry has an empty name", line_number, raw_line)
        if name.startswith(PATH_SEPARATOR):
            raise ParseError("absolute entry names are not allowed", line_number, raw_line)
        if ".." in name.split(PATH_SEPARATOR):
            raise ParseError("'..' is not allowed in entry names", line_number, raw_line)

        entry = Entry(depth=depth, name=name, kind=kind, line_number=line_number, raw_line=raw_line)
        entries.append(entry)
        open_dirs = depth + 1 if entry.is_dir else depth
        logger.debug("line %d: %s %r at depth %d", line_number, kind.value, name, depth)

    if not any(entry.is_dir for entry in entries):
        raise ParseError(f"no root directory found (directory names must end with '{PATH_SEPARATOR}')")
    return entries


def parse_tree_text(
    text: str,
    indent_unit: int = DEFAULT_INDENT_UNIT,
    strict_indent: bool = True,
) -> list[Entry]:
    """Parse a whole sketch held in one string."""
    return parse_tree_lines(text.splitlines(), indent_unit=indent_unit, strict_indent=strict_indent)


__all__ = [
    "PATH_SEPARATOR",
    "DEFAULT_INDENT_UNIT",
    "parse_tree_lines",
    "parse_tree_text",
]
