"""Context-menu item sets for entries and for the workspace background."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..file_tree_model import FileItem


class MenuAction(enum.Enum):
    REVEAL = "reveal"
    COPY = "copy"
    RENAME = "rename"
    DELETE = "delete"
    NEW_FOLDER = "new_folder"
    NEW_NOTE = "new_note"


@dataclass(frozen=True)
class ContextMenuItem:
    label: str
    action: MenuAction
    disabled: bool = False
    danger: bool = False
    divider: bool = False


def entry_menu_items(item: FileItem) -> list[ContextMenuItem]:
    """Menu for one entry; copying a directory is not offered."""
    return [
        ContextMenuItem("Reveal in file manager", MenuAction.REVEAL),
        ContextMenuItem("Copy", MenuAction.COPY, disabled=item.is_directory),
        ContextMenuItem("Rename", MenuAction.RENAME),
        ContextMenuItem("Delete", MenuAction.DELETE, danger=True, divider=True),
    ]


def workspace_menu_items() -> list[ContextMenuItem]:
    return [
        ContextMenuItem("New folder", MenuAction.NEW_FOLDER),
        ContextMenuItem("New note", MenuAction.NEW_NOTE),
    ]


def menu_items_for(item: FileItem | None) -> list[ContextMenuItem]:
    return workspace_menu_items() if item is None else entry_menu_items(item)


__all__ = [
    "MenuAction",
    "ContextMenuItem",
    "entry_menu_items",
    "workspace_menu_items",
    "menu_items_for",
]
