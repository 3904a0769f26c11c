"""Datatypes passed through a single tree traversal."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

BRANCH_PREFIX_LAST = "    "
BRANCH_PREFIX_OPEN = "│   "


@dataclass(frozen=True)
class DirectoryChild:
    """One listed directory child."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class TraversalContext:
    """Per-directory traversal state.

    ``depth`` is 1 for the root's direct children. ``max_depth`` of ``None``
    means unbounded. ``ignore_rules`` must already be normalized.
    """

    root: Path
    directory: Path
    depth: int = 1
    max_depth: int | None = None
    prefix: str = ""
    ignore_rules: tuple[str, ...] = ()

    @property
    def beyond_max_depth(self) -> bool:
        return self.max_depth is not None and self.depth > self.max_depth

    def descend(self, child: DirectoryChild, is_last: bool) -> TraversalContext:
        """Return the context used to list ``child``'s own children."""
        return replace(
            self,
            directory=child.path,
            depth=self.depth + 1,
            prefix=self.prefix + (BRANCH_PREFIX_LAST if is_last else BRANCH_PREFIX_OPEN),
        )


__all__ = [
    "BRANCH_PREFIX_LAST",
    "BRANCH_PREFIX_OPEN",
    "DirectoryChild",
    "TraversalContext",
]
