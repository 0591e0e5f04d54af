"""Workspace root plus the current tree snapshot."""

from __future__ import annotations

import logging

from ..file_tree_model import FileItem, IndexPath, expanded_paths, load_directory, load_tree, toggle_expand
from ..storage import StorageCapability

logger = logging.getLogger(__name__)


class WorkspaceTree:
    """Owns the workspace root and the lazily-loaded tree under it.

    Every await is followed by a generation check: results computed for a
    workspace that has since been replaced or closed are dropped.
    """

    def __init__(self, storage: StorageCapability) -> None:
        self.storage = storage
        self.root: str | None = None
        self.items: tuple[FileItem, ...] = ()
        self.root_loaded = False
        self.is_loading = False
        self.generation = 0

    @property
    def is_empty(self) -> bool:
        """True only once the root listing is loaded and has no visible entries."""
        return self.root_loaded and not self.items

    async def open_workspace(self, root: str) -> bool:
        """Switch to ``root`` and list it from scratch."""
        self.generation += 1
        generation = self.generation
        self.root = root
        self.items = ()
        self.root_loaded = False
        self.is_loading = True
        items = await load_directory(self.storage, root)
        if generation != self.generation:
            logger.debug("discarding listing for superseded workspace %s", root)
            return False
        self.items = items
        self.root_loaded = True
        self.is_loading = False
        logger.info("opened workspace %s (%d entries)", root, len(items))
        return True

    def close_workspace(self) -> None:
        self.generation += 1
        self.root = None
        self.items = ()
        self.root_loaded = False
        self.is_loading = False

    async def refresh(self) -> None:
        """Re-list the root, re-listing directories that were expanded."""
        if self.root is None:
            return
        generation = self.generation
        root = self.root
        items = await load_tree(self.storage, root, expanded_paths(self.items))
        if generation != self.generation:
            logger.debug("discarding refresh for superseded workspace %s", root)
            return
        self.items = items
        self.root_loaded = True

    async def toggle_expand(self, index_path: IndexPath) -> None:
        """Expand or collapse the directory at ``index_path``.

        The index path is resolved against the latest tree, and the result is
        applied only if no other tree replacement happened meanwhile.
        """
        if self.root is None:
            return
        generation = self.generation
        before = self.items
        items = await toggle_expand(self.storage, before, index_path)
        if generation != self.generation or self.items is not before:
            logger.debug("discarding stale expand of %s", index_path)
            return
        self.items = items


__all__ = ["WorkspaceTree"]
