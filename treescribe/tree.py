"""Top-level tree generation: validate the root and join rendered rows."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import InvalidRootError
from .file_tree_model import TraversalContext, build_tree_lines
from .ignore import normalize_ignore_rules


def resolve_root(start_path: str | Path) -> Path:
    """Resolve ``start_path`` to an absolute directory or raise ``InvalidRootError``."""
    resolved = Path(start_path).resolve()
    if not resolved.is_dir():
        raise InvalidRootError(resolved)
    return resolved


def generate_tree(
    start_path: str | Path,
    max_depth: int | None = None,
    ignore: Iterable[str] | None = None,
) -> str:
    """Render the directory tree under ``start_path`` as text.

    The first row is the root's base name without any branch prefix; every
    other row is one non-ignored entry at depth ``<= max_depth`` (``None``
    means unbounded). Rows are joined with ``"\\n"`` and no trailing newline
    is added.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("max_depth must be a non-negative integer")

    root = resolve_root(start_path)
    context = TraversalContext(
        root=root,
        directory=root,
        depth=1,
        max_depth=max_depth,
        prefix="",
        ignore_rules=normalize_ignore_rules(ignore),
    )
    return "\n".join([root.name, *build_tree_lines(context)])


__all__ = ["resolve_root", "generate_tree"]
