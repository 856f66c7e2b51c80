"""Tree-sketch parsing: glyph normalization, depth inference, entry kinds.

This package contains no filesystem code:
- ``Entry``/``EntryKind`` datatypes
- glyph-prefix normalization helpers
- line parsing with indentation and depth-jump validation
"""

from __future__ import annotations

from .glyphs import TREE_GLYPHS, leading_space_count, normalize_tree_glyphs
from .parser import DEFAULT_INDENT_UNIT, PATH_SEPARATOR, parse_tree_lines, parse_tree_text
from .types import Entry, EntryKind

__all__ = [
    "Entry",
    "EntryKind",
    "TREE_GLYPHS",
    "normalize_tree_glyphs",
    "leading_space_count",
    "DEFAULT_INDENT_UNIT",
    "PATH_SEPARATOR",
    "parse_tree_lines",
    "parse_tree_text",
]
