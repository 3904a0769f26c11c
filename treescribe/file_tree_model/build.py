"""Recursive construction of tree rows for one directory subtree."""

from __future__ import annotations

import logging
import os

from ..ignore import matches_normalized_rules
from .fs import list_directory_children
from .rendering import format_entry, format_scan_error
from .types import DirectoryChild, TraversalContext

logger = logging.getLogger(__name__)


def relative_child_path(context: TraversalContext, child: DirectoryChild) -> str:
    """Path of ``child`` relative to the scan root, not the parent directory."""
    return os.path.relpath(child.path, context.root)


def visible_children(context: TraversalContext, children: list[DirectoryChild]) -> list[DirectoryChild]:
    """Drop ignored children while keeping the sorted order of the rest."""
    if not context.ignore_rules:
        return children
    return [
        child
        for child in children
        if not matches_normalized_rules(relative_child_path(context, child), context.ignore_rules)
    ]


def build_tree_lines(context: TraversalContext) -> list[str]:
    """Return rows for ``context.directory``'s subtree in depth-first pre-order.

    A directory that cannot be listed contributes one placeholder row instead
    of raising, so sibling and ancestor branches still render.
    """
    if context.beyond_max_depth:
        return []

    children, scan_error = list_directory_children(context.directory)
    if scan_error is not None:
        logger.debug("Cannot list %s: %s", context.directory, scan_error)
        return [format_scan_error(context.directory, scan_error, context.prefix)]

    shown = visible_children(context, children)
    lines: list[str] = []
    for idx, child in enumerate(shown):
        is_last = idx == len(shown) - 1
        lines.append(format_entry(child.name, context.prefix, is_last))
        if child.is_dir:
            lines.extend(build_tree_lines(context.descend(child, is_last)))
    return lines


__all__ = ["relative_child_path", "visible_children", "build_tree_lines"]
