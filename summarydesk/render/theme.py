"""ANSI palette used by the terminal renderers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    tree_marker: str
    tree_dir: str
    tree_document: str
    tree_note: str
    tree_root: str
    notice: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_document="\033[38;5;203m",
    tree_note="\033[38;5;110m",
    tree_root="\033[1;38;5;81m",
    notice="\033[38;5;214m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    tree_marker="",
    tree_dir="",
    tree_document="",
    tree_note="",
    tree_root="",
    notice="",
)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
]
