"""Directory listing to sorted, filtered ``FileItem`` conversion."""

from __future__ import annotations

import logging
from collections.abc import Collection

from ..storage import StorageCapability, StorageError
from .naming import FileKind, classify
from .types import FileItem

logger = logging.getLogger(__name__)


def sort_key(item: FileItem) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name with lowercase first on ties."""
    return (not item.is_directory, item.name.casefold(), item.name.swapcase())


async def load_directory(storage: StorageCapability, path: str) -> tuple[FileItem, ...]:
    """List ``path`` one level deep.

    Sub-directories come back unloaded (``children=None``). A listing failure
    is logged and yields ``()`` so browsing continues with a degraded view.
    """
    try:
        listing = await storage.list_directory(path)
    except StorageError as exc:
        logger.warning("failed to load directory %s: %s", path, exc)
        return ()

    items: list[FileItem] = []
    seen: set[str] = set()
    for raw in listing:
        if not raw.is_directory and classify(raw.name) is FileKind.IGNORED:
            continue
        full_path = await storage.join_path(path, raw.name)
        if full_path in seen:
            continue
        seen.add(full_path)
        items.append(FileItem(name=raw.name, path=full_path, is_directory=raw.is_directory))

    items.sort(key=sort_key)
    return tuple(items)


def expanded_paths(items: tuple[FileItem, ...]) -> set[str]:
    """Collect paths of every expanded directory in the loaded tree."""
    out: set[str] = set()
    stack = list(items)
    while stack:
        item = stack.pop()
        if not item.is_directory:
            continue
        if item.is_expanded:
            out.add(item.path)
        if item.children:
            stack.extend(item.children)
    return out


async def load_tree(
    storage: StorageCapability,
    path: str,
    expanded: Collection[str] = (),
) -> tuple[FileItem, ...]:
    """List ``path`` and re-list every sub-directory whose path is in ``expanded``.

    Directories outside ``expanded`` come back unloaded, so a later expand
    always sees fresh storage state.
    """
    items = await load_directory(storage, path)
    if not expanded:
        return items

    out: list[FileItem] = []
    for item in items:
        if item.is_directory and item.path in expanded:
            children = await load_tree(storage, item.path, expanded)
            item = FileItem(
                name=item.name,
                path=item.path,
                is_directory=True,
                children=children,
                is_expanded=True,
            )
        out.append(item)
    return tuple(out)


__all__ = [
    "sort_key",
    "load_directory",
    "expanded_paths",
    "load_tree",
]
