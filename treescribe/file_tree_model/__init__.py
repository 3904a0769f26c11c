"""Filesystem tree model: listing, ordering, filtering and row formatting.

This package contains the traversal primitives behind ``generate_tree``:
- directory child records and the per-directory traversal context
- scanning plus directories-first, locale-aware sibling ordering
- recursive row construction with ignore filtering and depth cutoff
- branch-glyph formatting and unreadable-directory placeholders
"""

from __future__ import annotations

from .types import BRANCH_PREFIX_LAST, BRANCH_PREFIX_OPEN, DirectoryChild, TraversalContext
from .fs import directory_sort_key, list_directory_children
from .rendering import BRANCH_LAST, BRANCH_MIDDLE, error_code_for, format_entry, format_scan_error
from .build import build_tree_lines, relative_child_path, visible_children

__all__ = [
    "BRANCH_PREFIX_LAST",
    "BRANCH_PREFIX_OPEN",
    "BRANCH_LAST",
    "BRANCH_MIDDLE",
    "DirectoryChild",
    "TraversalContext",
    "directory_sort_key",
    "list_directory_children",
    "error_code_for",
    "format_entry",
    "format_scan_error",
    "build_tree_lines",
    "relative_child_path",
    "visible_children",
]
