"""Workspace sidebar controller: the presentation layer's single entry point.

A view renders ``tree.items`` and reports clicks, context-menu requests,
dialog results and drops back here. Index paths are resolved against the
current tree at the moment each callback runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date

from ..autosave import AutoSaver
from ..config import Settings
from ..file_tree_model import FileItem, IndexPath, resolve_index_path
from ..storage import StorageCapability
from .dialogs import DeleteDialog, NewFolderDialog, RenameDialog
from .drop import DroppedFile
from .menus import ContextMenuItem, MenuAction, menu_items_for
from .operations import FileOperations, NewNote
from .selection import SelectionState
from .tree import WorkspaceTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContextMenuState:
    item: FileItem | None
    items: list[ContextMenuItem] = field(default_factory=list)


class WorkspaceSidebar:
    def __init__(
        self,
        storage: StorageCapability,
        settings: Settings | None = None,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        settings = settings or Settings()
        self.storage = storage
        self.tree = WorkspaceTree(storage)
        self.operations = FileOperations(
            self.tree,
            today=today,
            persist_dropped_documents=settings.persist_dropped_documents,
        )
        self.selection = SelectionState(storage)
        self.autosave = AutoSaver(
            self.selection.save_note_to,
            lambda: self.selection.open_note_path,
            delay=settings.autosave_delay,
            indicator=settings.save_indicator,
        )
        self.rename_dialog = RenameDialog(self.operations.rename)
        self.delete_dialog = DeleteDialog(self.operations.delete)
        self.new_folder_dialog = NewFolderDialog(self.operations.create_folder)
        self.context_menu: ContextMenuState | None = None

    @property
    def storage_available(self) -> bool:
        return bool(self.storage.available)

    def item_at(self, index_path: IndexPath) -> FileItem | None:
        return resolve_index_path(self.tree.items, index_path)

    async def open_workspace(self, root: str) -> bool:
        self.context_menu = None
        return await self.tree.open_workspace(root)

    async def on_click(self, index_path: IndexPath) -> None:
        """Directories toggle; documents and notes open in their pane."""
        item = self.item_at(index_path)
        if item is None:
            return
        if item.is_directory:
            await self.tree.toggle_expand(index_path)
        else:
            await self.selection.select(item)

    async def on_toggle(self, index_path: IndexPath) -> None:
        await self.tree.toggle_expand(index_path)

    def on_context_menu(self, index_path: IndexPath | None) -> ContextMenuState | None:
        """Open the entry menu, or the workspace menu when ``index_path`` is ``None``."""
        if self.tree.root is None:
            self.context_menu = None
            return None
        item = None if index_path is None else self.item_at(index_path)
        if index_path is not None and item is None:
            self.context_menu = None
            return None
        self.context_menu = ContextMenuState(item=item, items=menu_items_for(item))
        return self.context_menu

    def close_context_menu(self) -> None:
        self.context_menu = None

    async def activate(self, entry: ContextMenuItem) -> None:
        """Run a context-menu entry against the menu's target, then close the menu."""
        menu = self.context_menu
        self.context_menu = None
        if menu is None or entry.disabled:
            return
        target = menu.item
        if entry.action is MenuAction.NEW_FOLDER:
            self.new_folder_dialog.request()
        elif entry.action is MenuAction.NEW_NOTE:
            await self.new_note()
        elif target is None:
            logger.debug("menu action %s needs an entry", entry.action)
        elif entry.action is MenuAction.REVEAL:
            await self.operations.reveal(target)
        elif entry.action is MenuAction.COPY:
            await self.operations.copy(target)
        elif entry.action is MenuAction.RENAME:
            self.rename_dialog.request(target)
        elif entry.action is MenuAction.DELETE:
            self.delete_dialog.request(target)

    async def new_note(self) -> NewNote | None:
        """Create a dated note and open it right away."""
        note = await self.operations.create_note()
        if note is not None:
            self.selection.open_note(note.path, note.content)
        return note

    async def on_drop(self, index_path: IndexPath | None, files: Iterable[DroppedFile]) -> list[str]:
        """Drop onto a directory row, or onto the workspace background for ``None``."""
        if index_path is None:
            return await self.operations.drop_files(None, files)
        item = self.item_at(index_path)
        if item is None or not item.is_directory:
            return []
        return await self.operations.drop_files(item.path, files)

    def on_note_changed(self, content: str) -> None:
        self.selection.update_note_content(content)
        self.autosave.trigger(content)

    async def on_save_requested(self, content: str) -> bool:
        return await self.autosave.save_now(content)


__all__ = [
    "ContextMenuState",
    "WorkspaceSidebar",
]
