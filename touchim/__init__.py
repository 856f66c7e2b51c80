"""Public package surface for touchim.

Exports ``main`` for programmatic CLI invocation.
The parser lives in ``touchim.tree_text``; path planning and disk I/O in
``touchim.scaffold``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
