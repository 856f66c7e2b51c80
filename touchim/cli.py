"""Command-line front door for touchim.

Resolves options against stored preferences, parses the tree sketch, and
previews the planned operations. After confirmation the plan is applied.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import replace

from .config import Preferences, load_preferences, save_preferences
from .errors import TouchimError
from .logging_config import setup_logging
from .scaffold import (
    ApplyResult,
    Operation,
    ScaffoldPlan,
    apply_operations,
    plan_operations,
    render_preview,
    reset_output_dir,
)
from .source import STDIN_MARKER, read_tree_source
from .style import Painter, color_enabled
from .tree_text import parse_tree_lines


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def confirm(prompt: str, input_fn: Callable[[str], str] | None = None) -> bool:
    """Ask a yes/no question; only ``y``/``Y`` answers yes, EOF answers no."""
    read = input if input_fn is None else input_fn
    try:
        answer = read(prompt)
    except EOFError:
        return False
    return answer.strip() in {"y", "Y"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="touchim",
        description="Create directories and empty files from an indented tree sketch.",
    )
    parser.add_argument("-i", "--input", default=None, help="Tree sketch file, or '-' for stdin (default: last used).")
    parser.add_argument("-o", "--output-dir", default=None, help="Directory to scaffold into (default: last used).")
    parser.add_argument("--indent", type=_positive_int, default=None, help="Spaces per indentation level.")
    parser.add_argument(
        "--skip-root",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Do not create the sketch's top-level directory; place its children in the output directory.",
    )
    parser.add_argument(
        "--lenient-indent",
        action="store_true",
        help="Round irregular indentation down instead of rejecting it.",
    )
    parser.add_argument("-n", "--dry-run", action="store_true", help="Show the plan without creating anything.")
    parser.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation.")
    parser.add_argument("--reset", action="store_true", help="Delete the output directory and exit.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--no-save", action="store_true", help="Do not remember these options for the next run.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more detail (repeat for debug).")
    return parser


def resolve_preferences(args: argparse.Namespace, stored: Preferences) -> Preferences:
    """Command-line values win over stored ones."""
    return Preferences(
        input_file=args.input if args.input is not None else stored.input_file,
        output_dir=args.output_dir if args.output_dir is not None else stored.output_dir,
        indent_spaces=args.indent if args.indent is not None else stored.indent_spaces,
        skip_root=args.skip_root if args.skip_root is not None else stored.skip_root,
    )


def format_summary(plan: ScaffoldPlan, preferences: Preferences, paint: Painter) -> list[str]:
    return [
        paint("heading", "Summary:"),
        f"Input File      : {paint('value', preferences.input_file)}",
        f"Output Directory: {paint('value', preferences.output_dir or '.')}",
        f"Directories to Create: {paint('count', str(plan.stats.dir_count))}",
        f"Files to Create      : {paint('count', str(plan.stats.file_count))}",
    ]


def format_result(result: ApplyResult, output_dir: str, paint: Painter) -> str:
    existing = result.existing_dirs + result.existing_files
    message = (
        f"Created {result.created_dirs} directories and {result.created_files} files in '{output_dir or '.'}'"
    )
    if existing:
        message += f" ({existing} already present)"
    return paint("success", message + ".")


def _run_reset(preferences: Preferences, assume_yes: bool, paint: Painter) -> None:
    output_dir = preferences.output_dir or "."
    question = paint("prompt", f"Are you sure you want to delete the directory '{output_dir}'? [y/N] ")
    if not assume_yes and not confirm(question):
        print(paint("prompt", "Reset operation cancelled."))
        return
    if reset_output_dir(output_dir):
        print(paint("success", f"Deleted directory '{output_dir}' successfully."))
    else:
        print(paint("prompt", f"Directory '{output_dir}' does not exist. Nothing to reset."))


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, plan the scaffold, and apply it after confirmation.

    Core failures surface as ``SystemExit("Error: ...")``. Options are saved
    as the next run's defaults unless ``--no-save`` is given.
    """
    args = build_parser().parse_args(argv)
    paint = Painter(color_enabled(args.no_color))
    setup_logging(args.verbose, use_colors=color_enabled(args.no_color, sys.stderr))

    stored = load_preferences()
    preferences = resolve_preferences(args, stored)
    if not args.no_save:
        if preferences.input_file == STDIN_MARKER:
            save_preferences(replace(preferences, input_file=stored.input_file))
        else:
            save_preferences(preferences)

    try:
        if args.reset:
            _run_reset(preferences, args.yes, paint)
            return

        lines = read_tree_source(preferences.input_file)
        entries = parse_tree_lines(
            lines,
            indent_unit=preferences.indent_spaces,
            strict_indent=not args.lenient_indent,
        )
        plan = plan_operations(entries, preferences.output_dir, skip_first_directory=preferences.skip_root)

        for line in format_summary(plan, preferences, paint):
            print(line)
        print()
        print(paint("prompt", "Preview of the structure to be created:"))
        for line in render_preview(plan):
            print(line)
        print()

        if args.dry_run:
            return
        if not args.yes and not confirm(paint("prompt", "Proceed with creation? [y/N] ")):
            print(paint("prompt", "Operation cancelled by user."))
            return

        print(paint("progress", "Creating directories and files..."))

        def report(operation: Operation, created: bool) -> None:
            label = "Created" if created else "Exists "
            kind = "directory" if operation.is_dir else "file"
            print(f"{paint('success', f'{label} {kind}:')} {operation.path}")

        result = apply_operations(plan.operations, on_applied=report)
    except TouchimError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    print(format_result(result, preferences.output_dir, paint))


if __name__ == "__main__":
    main()
