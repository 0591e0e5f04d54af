"""Mutation engine: create, rename, delete, copy, reveal and drop.

Each operation performs its storage call(s) and then refreshes the whole tree
from the workspace root instead of patching it in place. A ``StorageError``
is logged and leaves the tree untouched; the caller only sees a falsy result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date

from ..file_tree_model import (
    FileItem,
    FileKind,
    classify,
    copy_name_candidates,
    new_note_content,
    next_available_name,
    note_name_candidates,
)
from ..storage import StorageError
from .drop import DroppedFile
from .tree import WorkspaceTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewNote:
    path: str
    content: str


class FileOperations:
    """File operations bound to one ``WorkspaceTree``.

    Rename and copy do not check the destination first: a collision surfaces
    as an ``ALREADY_EXISTS`` storage error, which is logged like any other.
    """

    def __init__(
        self,
        workspace: WorkspaceTree,
        *,
        today: Callable[[], date] = date.today,
        persist_dropped_documents: bool = False,
    ) -> None:
        self.workspace = workspace
        self.storage = workspace.storage
        self._today = today
        self.persist_dropped_documents = persist_dropped_documents

    async def _free_path(self, directory: str, candidates: Iterable[str]) -> str:
        async def exists(name: str) -> bool:
            return await self.storage.exists(await self.storage.join_path(directory, name))

        name = await next_available_name(candidates, exists)
        return await self.storage.join_path(directory, name)

    async def create_note(self) -> NewNote | None:
        """Write a dated note at the workspace root and return it for opening."""
        root = self.workspace.root
        if root is None:
            return None
        today = self._today()
        try:
            path = await self._free_path(root, note_name_candidates(today.isoformat()))
            content = new_note_content(today)
            await self.storage.write_text(path, content)
        except StorageError as exc:
            logger.error("failed to create new note: %s", exc)
            return None
        await self.workspace.refresh()
        logger.info("created note %s", path)
        return NewNote(path=path, content=content)

    async def create_folder(self, name: str) -> bool:
        """Create ``name`` directly under the workspace root."""
        root = self.workspace.root
        if root is None:
            return False
        try:
            path = await self.storage.join_path(root, name)
            await self.storage.mkdir(path)
        except StorageError as exc:
            logger.error("failed to create folder %s: %s", name, exc)
            return False
        await self.workspace.refresh()
        return True

    async def rename(self, item: FileItem, new_name: str) -> str | None:
        """Rename ``item`` within its directory; returns the new path."""
        if self.workspace.root is None:
            return None
        try:
            directory = await self.storage.dir_of(item.path)
            new_path = await self.storage.join_path(directory, new_name)
            await self.storage.rename(item.path, new_path)
        except StorageError as exc:
            logger.error("failed to rename %s: %s", item.path, exc)
            return None
        await self.workspace.refresh()
        return new_path

    async def delete(self, item: FileItem) -> bool:
        """Remove ``item`` (recursively for directories). Irreversible."""
        if self.workspace.root is None:
            return False
        try:
            await self.storage.remove(item.path)
        except StorageError as exc:
            logger.error("failed to delete %s: %s", item.path, exc)
            return False
        await self.workspace.refresh()
        return True

    async def copy(self, item: FileItem) -> str | None:
        """Copy a file next to itself under a free ``_copy`` name."""
        if self.workspace.root is None:
            return None
        if item.is_directory:
            logger.warning("refusing to copy directory %s", item.path)
            return None
        try:
            directory = await self.storage.dir_of(item.path)
            dest = await self._free_path(directory, copy_name_candidates(item.name))
            await self.storage.copy(item.path, dest)
        except StorageError as exc:
            logger.error("failed to copy %s: %s", item.path, exc)
            return None
        await self.workspace.refresh()
        return dest

    async def reveal(self, item: FileItem) -> bool:
        try:
            await self.storage.reveal_in_system_explorer(item.path)
        except StorageError as exc:
            logger.error("failed to reveal %s: %s", item.path, exc)
            return False
        return True

    async def drop_files(self, target_dir: str | None, files: Iterable[DroppedFile]) -> list[str]:
        """Import externally dropped files into ``target_dir`` (root when ``None``).

        Notes are written as text. Documents are accepted but only written
        when ``persist_dropped_documents`` is enabled. Ignored kinds are
        skipped. The tree is refreshed once for the whole batch.
        """
        root = self.workspace.root
        if root is None:
            return []
        directory = target_dir or root
        written: list[str] = []
        try:
            for dropped in files:
                kind = classify(dropped.name)
                if kind is FileKind.IGNORED:
                    continue
                dest = await self.storage.join_path(directory, dropped.name)
                if kind is FileKind.NOTE:
                    await self.storage.write_text(dest, await dropped.read_text())
                    written.append(dest)
                elif self.persist_dropped_documents:
                    await self.storage.write_bytes(dest, await dropped.read_bytes())
                    written.append(dest)
                else:
                    logger.info("dropped document %s not persisted", dropped.name)
        except (StorageError, OSError, UnicodeDecodeError) as exc:
            logger.error("failed to handle drop into %s: %s", directory, exc)
            return written
        await self.workspace.refresh()
        return written


__all__ = [
    "NewNote",
    "FileOperations",
]
