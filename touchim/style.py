"""Terminal colour palette for CLI messages.

Colours are pygments console colour names; rendering goes through
``pygments.console.colorize`` and is skipped entirely when colour is off.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from pygments.console import colorize


@dataclass(frozen=True)
class OutputStyle:
    """Semantic colour roles used by the CLI."""

    heading: str = "cyan"
    value: str = "magenta"
    count: str = "green"
    prompt: str = "yellow"
    progress: str = "blue"
    success: str = "green"
    error: str = "red"
    log_debug: str = "cyan"
    log_info: str = "green"
    log_warning: str = "yellow"
    log_error: str = "red"
    log_critical: str = "magenta"


DEFAULT_STYLE = OutputStyle()


def color_enabled(no_color: bool, stream: object = None) -> bool:
    """Colour requires a TTY and neither ``--no-color`` nor ``NO_COLOR``."""
    if no_color or os.environ.get("NO_COLOR"):
        return False
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except Exception:
        return False


class Painter:
    def __init__(self, enabled: bool, style: OutputStyle = DEFAULT_STYLE) -> None:
        self.enabled = enabled
        self.style = style

    def __call__(self, role: str, text: str) -> str:
        if not self.enabled:
            return text
        return colorize(getattr(self.style, role), text)


__all__ = [
    "OutputStyle",
    "DEFAULT_STYLE",
    "color_enabled",
    "Painter",
]
