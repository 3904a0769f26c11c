"""Branch-drawing helpers for tree rows."""

from __future__ import annotations

import errno
from pathlib import Path

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "


def format_entry(name: str, prefix: str, is_last: bool) -> str:
    """Return one tree row: ``prefix`` + branch glyph + ``name``."""
    return f"{prefix}{BRANCH_LAST if is_last else BRANCH_MIDDLE}{name}"


def error_code_for(exc: OSError) -> str:
    """Return the symbolic errno name (``EACCES``) or the exception type name."""
    if exc.errno is not None:
        return errno.errorcode.get(exc.errno, str(exc.errno))
    return type(exc).__name__


def format_scan_error(directory: Path, exc: OSError, prefix: str) -> str:
    """Placeholder row for a directory whose children could not be listed."""
    return f"{prefix}{BRANCH_LAST}[Error reading directory: {directory.name} ({error_code_for(exc)})]"


__all__ = [
    "BRANCH_MIDDLE",
    "BRANCH_LAST",
    "format_entry",
    "error_code_for",
    "format_scan_error",
]
