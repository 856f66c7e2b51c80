"""Path materialization: plan creation operations and apply them to disk.

- ``plan_operations`` resolves entries to output paths with a depth stack
- ``apply_operations`` performs idempotent create-if-absent I/O
- ``render_preview`` formats the same plan for dry runs
- ``reset_output_dir`` removes a previously scaffolded output tree
"""

from __future__ import annotations

from .apply import apply_operation, apply_operations, ensure_directory, ensure_empty_file
from .materialize import PathStack, join_output_path, plan_operations
from .preview import preview_line, render_preview
from .reset import reset_output_dir
from .types import ApplyResult, Operation, ScaffoldPlan, ScaffoldStats

__all__ = [
    "Operation",
    "ScaffoldStats",
    "ScaffoldPlan",
    "ApplyResult",
    "PathStack",
    "join_output_path",
    "plan_operations",
    "ensure_directory",
    "ensure_empty_file",
    "apply_operation",
    "apply_operations",
    "preview_line",
    "render_preview",
    "reset_output_dir",
]
