"""Logging setup for the command-line entrypoint.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by ``touchim.cli``.
"""

from __future__ import annotations

import logging
import sys

from .style import DEFAULT_STYLE, OutputStyle, Painter


class LevelColorFormatter(logging.Formatter):
    """Prefix records with their level name, coloured when enabled.

    Level colours come from the ``log_<level>`` roles of ``OutputStyle``.
    """

    def __init__(self, use_colors: bool = False, style: OutputStyle = DEFAULT_STYLE) -> None:
        super().__init__("%(levelname)s %(name)s: %(message)s")
        self.use_colors = use_colors
        self.paint = Painter(use_colors, style)

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        role = f"log_{record.levelname.lower()}"
        if not self.use_colors or not hasattr(self.paint.style, role):
            return text
        return self.paint(role, text)


def level_for_verbosity(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int = 0, use_colors: bool = False) -> logging.Logger:
    """Install a single stderr handler on the ``touchim`` logger."""
    logger = logging.getLogger("touchim")
    logger.setLevel(level_for_verbosity(verbosity))
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(LevelColorFormatter(use_colors=use_colors))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = [
    "LevelColorFormatter",
    "level_for_verbosity",
    "setup_logging",
]
