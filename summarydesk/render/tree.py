"""Formatting helpers for workspace tree rows."""

from __future__ import annotations

from ..file_tree_model import FileItem, FileKind, iter_visible
from ..workspace import SelectionState
from .theme import DEFAULT_THEME, UITheme


def _name_color(item: FileItem, theme: UITheme) -> str:
    if item.is_directory:
        return theme.tree_dir
    if item.kind is FileKind.DOCUMENT:
        return theme.tree_document
    return theme.tree_note


def format_tree_row(
    item: FileItem,
    depth: int,
    selected: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Render one entry row; selected rows are shown in reverse video."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * depth
    if item.is_directory:
        marker = "▾ " if item.is_expanded else "▸ "
        name = item.name + "/"
    else:
        marker = "  "
        name = item.name
    if selected:
        name = f"{active_theme.reverse}{name}{reset}"
    return f"{indent}{active_theme.tree_marker}{marker}{reset}{_name_color(item, active_theme)}{name}{reset}"


def format_tree_rows(
    items: tuple[FileItem, ...],
    selection: SelectionState | None = None,
    theme: UITheme | None = None,
) -> list[str]:
    """Render every visible row of the tree, depth-first."""
    rows: list[str] = []
    for _index_path, depth, item in iter_visible(items):
        selected = selection.is_selected(item) if selection is not None else False
        rows.append(format_tree_row(item, depth, selected, theme))
    return rows


def format_workspace(
    root: str | None,
    items: tuple[FileItem, ...],
    selection: SelectionState | None = None,
    *,
    loaded: bool = True,
    storage_available: bool = True,
    theme: UITheme | None = None,
) -> list[str]:
    """Render the whole sidebar: notice, root line, rows or empty-state text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    lines: list[str] = []
    if not storage_available:
        lines.append(f"{active_theme.notice}no storage access: file operations are disabled{reset}")
    if root is None:
        lines.append("No workspace open.")
        return lines
    lines.append(f"{active_theme.tree_root}{root}{reset}")
    if not loaded:
        lines.append("Loading...")
    elif not items:
        lines.append("No documents or notes in this workspace.")
    else:
        lines.extend(format_tree_rows(items, selection, active_theme))
    return lines


__all__ = [
    "format_tree_row",
    "format_tree_rows",
    "format_workspace",
]
