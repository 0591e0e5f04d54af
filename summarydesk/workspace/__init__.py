"""Workspace controllers: tree state, mutations, selection and dialogs."""

from __future__ import annotations

from .dialogs import CLOSED, DeleteDialog, DialogState, NewFolderDialog, RenameDialog
from .drop import DroppedFile, LocalDroppedFile, MemoryDroppedFile
from .menus import ContextMenuItem, MenuAction, entry_menu_items, menu_items_for, workspace_menu_items
from .operations import FileOperations, NewNote
from .selection import SelectionState
from .sidebar import ContextMenuState, WorkspaceSidebar
from .tree import WorkspaceTree

__all__ = [
    "CLOSED",
    "DialogState",
    "RenameDialog",
    "DeleteDialog",
    "NewFolderDialog",
    "DroppedFile",
    "LocalDroppedFile",
    "MemoryDroppedFile",
    "ContextMenuItem",
    "MenuAction",
    "entry_menu_items",
    "workspace_menu_items",
    "menu_items_for",
    "FileOperations",
    "NewNote",
    "SelectionState",
    "ContextMenuState",
    "WorkspaceSidebar",
    "WorkspaceTree",
]
