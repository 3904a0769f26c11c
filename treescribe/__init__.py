"""Public package surface for treescribe.

Exports ``generate_tree`` for library use and ``main`` for programmatic CLI
invocation. Most implementation lives in submodules under ``treescribe``.
"""

from __future__ import annotations

from .errors import InvalidRootError, TreescribeError
from .tree import generate_tree

__version__ = "1.0.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "generate_tree", "InvalidRootError", "TreescribeError", "main"]
