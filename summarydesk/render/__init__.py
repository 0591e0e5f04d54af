"""Terminal rendering for the workspace sidebar and note preview."""

from __future__ import annotations

from .note import colorize_note, sanitize_terminal_text
from .theme import DEFAULT_THEME, PLAIN_THEME, UITheme
from .tree import format_tree_row, format_tree_rows, format_workspace

__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "format_tree_row",
    "format_tree_rows",
    "format_workspace",
    "colorize_note",
    "sanitize_terminal_text",
]
