"""Filesystem listing and sibling ordering for tree traversal."""

from __future__ import annotations

import locale
import os
from pathlib import Path

from .types import DirectoryChild


def directory_sort_key(child: DirectoryChild) -> tuple[bool, str, str]:
    """Sort directories before files, then by case-insensitive collation of the name.

    Names are casefolded before ``locale.strxfrm`` so ``a`` precedes ``B`` even
    under the C locale. The raw name is the final tiebreaker so names that
    collate equally still come out in a stable order.
    """
    return (not child.is_dir, locale.strxfrm(child.name.casefold()), child.name)


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List and sort the immediate children of ``directory``.

    Returns ``(children, scan_error)``. ``scan_error`` is set, and
    ``children`` empty, when the directory cannot be scanned.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=child.name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=directory_sort_key)
    return children, None


__all__ = ["directory_sort_key", "list_directory_children"]
