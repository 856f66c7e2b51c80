"""Dry-run rendering of a plan."""

from __future__ import annotations

from ..tree_text.parser import PATH_SEPARATOR
from .types import Operation, ScaffoldPlan


def preview_line(operation: Operation) -> str:
    """Directories get a trailing separator so they read like the sketch."""
    if operation.is_dir:
        return operation.path + PATH_SEPARATOR
    return operation.path


def render_preview(plan: ScaffoldPlan) -> list[str]:
    return [preview_line(operation) for operation in plan.operations]


__all__ = [
    "preview_line",
    "render_preview",
]
