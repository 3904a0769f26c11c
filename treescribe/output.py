"""Destination handling for rendered trees."""

from __future__ import annotations

import re
from pathlib import Path

REPLACEMENT_CHAR = "\ufffd"

# Undecodable filename bytes surface from os.scandir as lone surrogates.
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def display_text(text: str) -> str:
    """Replace lone surrogates with U+FFFD so ``text`` is printable on any stream."""
    if _SURROGATE_RE.search(text) is None:
        return text
    return _SURROGATE_RE.sub(REPLACEMENT_CHAR, text)


def write_tree_output(text: str, output_path: str | Path) -> Path:
    """Write ``text`` to ``output_path`` and return the resolved destination.

    Missing parent directories are created. Names that were not valid UTF-8 on
    disk are written back as their original bytes. ``OSError`` and
    ``UnicodeError`` propagate so the caller can report them.
    """
    target = Path(output_path).resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8", errors="surrogateescape")
    return target


__all__ = ["display_text", "write_tree_output"]
