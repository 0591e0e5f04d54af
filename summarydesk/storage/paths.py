"""Pure string path helpers.

These never touch the host filesystem, so they give identical results with
or without a live storage capability.
"""

from __future__ import annotations

import re

_SEPARATORS_RE = re.compile(r"[/\\]")


def _separator_for(path: str) -> str:
    """Return the separator style already used by ``path``."""
    if "\\" in path and "/" not in path:
        return "\\"
    return "/"


def join_path(*parts: str) -> str:
    """Join path segments, collapsing duplicate separators at the seams."""
    non_empty = [part for part in parts if part]
    if not non_empty:
        return ""
    sep = _separator_for(non_empty[0])
    out = non_empty[0]
    for part in non_empty[1:]:
        if out.endswith(("/", "\\")):
            out = out + part.lstrip("/\\")
        else:
            out = out + sep + part.lstrip("/\\")
    return out


def dir_of(path: str) -> str:
    """Return everything before the last separator (``""`` when there is none)."""
    stripped = path.rstrip("/\\") or path
    matches = list(_SEPARATORS_RE.finditer(stripped))
    if not matches:
        return ""
    cut = matches[-1].start()
    if cut == 0:
        return stripped[0]
    return stripped[:cut]


def base_name(path: str) -> str:
    """Return the last path segment, accepting both ``/`` and ``\\``."""
    stripped = path.rstrip("/\\")
    return _SEPARATORS_RE.split(stripped)[-1] if stripped else ""


def file_name(path: str | None) -> str | None:
    """Display name for an optional path; ``None`` when there is nothing to show."""
    if not path:
        return None
    return base_name(path) or None


__all__ = [
    "join_path",
    "dir_of",
    "base_name",
    "file_name",
]
