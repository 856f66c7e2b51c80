"""Tree-drawing glyph normalization for hand-drawn or ``tree``-style sketches.

Connector columns in the leading prefix are rewritten to one indentation unit
of spaces each, so depth can be read from plain leading whitespace.
"""

from __future__ import annotations

import re
from functools import lru_cache

VERTICAL = "│"
BRANCH = "├"
CORNER = "└"
FILL = "─"
TREE_GLYPHS = VERTICAL + BRANCH + CORNER + FILL

_PREFIX_RE = re.compile(rf"^[ \t{TREE_GLYPHS}]*")
_BRANCH_RE = re.compile(rf"[{BRANCH}{CORNER}]{FILL}* *")
_STRAY_RE = re.compile(rf"[{TREE_GLYPHS}]")


@lru_cache(maxsize=16)
def _vertical_re(indent_unit: int) -> re.Pattern[str]:
    return re.compile(rf"{VERTICAL} {{0,{indent_unit - 1}}}")


def normalize_tree_glyphs(line: str, indent_unit: int) -> str:
    """Rewrite the glyph prefix of ``line`` into plain indentation.

    Tabs become one unit each, ``│`` plus its padding becomes one unit, and a
    branch or corner with its fill becomes one unit. Stray glyphs left in the
    prefix are dropped. Text after the prefix is returned untouched.
    """
    if indent_unit < 1:
        raise ValueError("indent unit must be >= 1")
    match = _PREFIX_RE.match(line)
    prefix = match.group(0)
    rest = line[match.end():]
    if not prefix:
        return line

    block = " " * indent_unit
    prefix = prefix.replace("\t", block)
    prefix = _vertical_re(indent_unit).sub(block, prefix)
    prefix = _BRANCH_RE.sub(block, prefix)
    prefix = _STRAY_RE.sub("", prefix)
    return prefix + rest


def leading_space_count(text: str) -> int:
    return len(text) - len(text.lstrip(" "))


__all__ = [
    "TREE_GLYPHS",
    "normalize_tree_glyphs",
    "leading_space_count",
]
