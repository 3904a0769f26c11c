"""Literal path-based ignore rules.

Rules are plain paths relative to the scan root. A rule hides the entry it
names and everything nested beneath it. Matching is exact or on a full path
component boundary; no glob or regex semantics are applied.
"""

from __future__ import annotations

from collections.abc import Iterable

IGNORE_SEPARATOR = "|"
PATH_SEPARATOR = "/"


def normalize_ignore_path(path: str) -> str:
    """Return ``path`` with forward slashes and no trailing separator."""
    return path.replace("\\", PATH_SEPARATOR).rstrip(PATH_SEPARATOR)


def normalize_ignore_rules(rules: Iterable[str] | None) -> tuple[str, ...]:
    """Normalize rules once per run, dropping rules that end up empty."""
    if not rules:
        return ()
    normalized: list[str] = []
    for rule in rules:
        candidate = normalize_ignore_path(rule)
        if candidate:
            normalized.append(candidate)
    return tuple(normalized)


def parse_ignore_argument(value: str | None) -> list[str]:
    """Split a pipe-separated CLI value into trimmed, non-empty rules."""
    if not value:
        return []
    return [part.strip() for part in value.split(IGNORE_SEPARATOR) if part.strip()]


def is_ignored(relative_path: str, ignore_rules: Iterable[str] | None) -> bool:
    """Return whether ``relative_path`` is excluded by any of ``ignore_rules``.

    Both sides are normalized to forward slashes first so the result does not
    depend on the host's native separator. ``"foo"`` matches ``"foo"`` and
    ``"foo/bar"`` but not ``"foobar"``.
    """
    if not ignore_rules:
        return False
    return matches_normalized_rules(relative_path, normalize_ignore_rules(ignore_rules))


def matches_normalized_rules(relative_path: str, normalized_rules: tuple[str, ...]) -> bool:
    """Match against rules already passed through ``normalize_ignore_rules``."""
    candidate = relative_path.replace("\\", PATH_SEPARATOR)
    for rule in normalized_rules:
        if candidate == rule or candidate.startswith(rule + PATH_SEPARATOR):
            return True
    return False


__all__ = [
    "IGNORE_SEPARATOR",
    "normalize_ignore_path",
    "normalize_ignore_rules",
    "parse_ignore_argument",
    "is_ignored",
    "matches_normalized_rules",
]
