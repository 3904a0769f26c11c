"""Exception types raised by the public treescribe API."""

from __future__ import annotations

from pathlib import Path


class TreescribeError(Exception):
    """Base class for errors surfaced to treescribe callers."""


class InvalidRootError(TreescribeError, ValueError):
    """Raised when the scan root is missing or is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Path not found or is not a directory: {path}")


__all__ = ["TreescribeError", "InvalidRootError"]
