"""Open-path tracking for the one document and one note shown side by side."""

from __future__ import annotations

import logging

from ..file_tree_model import DEFAULT_NOTE_CONTENT, FileItem, FileKind
from ..storage import StorageCapability, StorageError

logger = logging.getLogger(__name__)


class SelectionState:
    """Currently open document and note, held outside the tree.

    Rows are marked selected by comparing their path string against the two
    open paths; renaming or deleting an open file does not update them.
    """

    def __init__(self, storage: StorageCapability) -> None:
        self.storage = storage
        self.open_document_path: str | None = None
        self.open_note_path: str | None = None
        self.note_content: str = DEFAULT_NOTE_CONTENT
        self.document_bytes: bytes | None = None

    def is_selected(self, item: FileItem) -> bool:
        return item.path == self.open_document_path or item.path == self.open_note_path

    async def select(self, item: FileItem) -> bool:
        """Open ``item`` in the matching pane; directories are ignored."""
        kind = item.kind
        if kind is FileKind.DOCUMENT:
            await self.open_document(item.path)
            return True
        if kind is FileKind.NOTE:
            try:
                content = await self.storage.read_text(item.path)
            except StorageError as exc:
                logger.error("failed to read note %s: %s", item.path, exc)
                return False
            self.open_note(item.path, content)
            return True
        return False

    async def open_document(self, path: str) -> None:
        """Point the document pane at ``path`` and load its bytes."""
        self.open_document_path = path
        if not self.storage.available:
            return
        try:
            self.document_bytes = await self.storage.read_bytes(path)
        except StorageError as exc:
            logger.error("failed to load document %s: %s", path, exc)
            self.document_bytes = None

    def set_document_bytes(self, data: bytes) -> None:
        """Show an in-memory document that has no workspace path."""
        self.document_bytes = data
        self.open_document_path = None

    def open_note(self, path: str, content: str) -> None:
        self.open_note_path = path
        self.note_content = content

    def update_note_content(self, content: str) -> None:
        self.note_content = content

    async def save_note(self, content: str) -> bool:
        """Write ``content`` to the open note; no-op without an open note."""
        if self.open_note_path is None:
            return False
        return await self.save_note_to(self.open_note_path, content)

    async def save_note_to(self, path: str, content: str) -> bool:
        """Write ``content`` to ``path``, whichever note is open now."""
        try:
            await self.storage.write_text(path, content)
        except StorageError as exc:
            logger.error("failed to save note %s: %s", path, exc)
            return False
        logger.info("note saved: %s", path)
        return True


__all__ = ["SelectionState"]
