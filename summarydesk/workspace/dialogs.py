"""Two-step confirmation state for rename, delete and new-folder dialogs.

Each dialog is ``Closed`` or open for one target. ``request`` opens it,
``submit`` runs the bound action and closes, ``cancel`` closes without
running anything.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..file_tree_model import FileItem

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DialogState(Generic[T]):
    is_open: bool = False
    item: T | None = None


CLOSED: DialogState = DialogState()


class RenameDialog:
    """Collects a new name for an entry."""

    def __init__(self, on_submit: Callable[[FileItem, str], Awaitable[object]]) -> None:
        self._on_submit = on_submit
        self.state: DialogState[FileItem] = CLOSED

    def request(self, item: FileItem) -> None:
        self.state = DialogState(is_open=True, item=item)

    def cancel(self) -> None:
        self.state = CLOSED

    async def submit(self, value: str) -> bool:
        """Rename to ``value`` (trimmed); blank or unchanged names just close."""
        item = self.state.item
        self.state = CLOSED
        if item is None:
            return False
        new_name = value.strip()
        if not new_name or new_name == item.name:
            logger.debug("rename of %s skipped: %r", item.path, value)
            return False
        await self._on_submit(item, new_name)
        return True


class DeleteDialog:
    """Asks for an explicit confirmation before deleting an entry."""

    def __init__(self, on_confirm: Callable[[FileItem], Awaitable[object]]) -> None:
        self._on_confirm = on_confirm
        self.state: DialogState[FileItem] = CLOSED

    def request(self, item: FileItem) -> None:
        self.state = DialogState(is_open=True, item=item)

    def cancel(self) -> None:
        self.state = CLOSED

    async def submit(self, confirmed: bool = True) -> bool:
        item = self.state.item
        self.state = CLOSED
        if item is None or not confirmed:
            return False
        await self._on_confirm(item)
        return True


class NewFolderDialog:
    """Collects a folder name; the folder is created under the workspace root."""

    def __init__(self, on_submit: Callable[[str], Awaitable[object]]) -> None:
        self._on_submit = on_submit
        self.state: DialogState[None] = CLOSED

    def request(self) -> None:
        self.state = DialogState(is_open=True)

    def cancel(self) -> None:
        self.state = CLOSED

    async def submit(self, value: str) -> bool:
        was_open = self.state.is_open
        self.state = CLOSED
        name = value.strip()
        if not was_open or not name:
            return False
        await self._on_submit(name)
        return True


__all__ = [
    "DialogState",
    "CLOSED",
    "RenameDialog",
    "DeleteDialog",
    "NewFolderDialog",
]
