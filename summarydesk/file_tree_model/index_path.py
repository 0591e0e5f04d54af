"""Index-path addressing and lazy expansion over the ``FileItem`` tree.

An index path is the sequence of child positions from the root listing down
to one entry. Entries hold no parent reference, so every mutation rebuilds
only the branch on the addressed path and shares the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace

from ..storage import StorageCapability
from .loader import load_directory
from .types import FileItem, IndexPath

logger = logging.getLogger(__name__)


def resolve_index_path(items: tuple[FileItem, ...], index_path: IndexPath) -> FileItem | None:
    """Return the entry at ``index_path`` or ``None`` when it does not resolve.

    Descending through a directory that was never loaded does not resolve.
    """
    if not index_path:
        return None
    level: tuple[FileItem, ...] | None = items
    item: FileItem | None = None
    for position in index_path:
        if level is None or not 0 <= position < len(level):
            return None
        item = level[position]
        level = item.children
    return item


def replace_at(
    items: tuple[FileItem, ...],
    index_path: IndexPath,
    update: Callable[[FileItem], FileItem],
) -> tuple[FileItem, ...]:
    """Return ``items`` with the entry at ``index_path`` replaced by ``update(entry)``.

    Siblings and other subtrees are reused as-is. Raises ``IndexError`` when
    the path does not resolve.
    """
    if not index_path:
        raise IndexError("empty index path")
    position, rest = index_path[0], index_path[1:]
    if not 0 <= position < len(items):
        raise IndexError(f"index {position} out of range")
    target = items[position]
    if rest:
        if target.children is None:
            raise IndexError(f"{target.path} is not loaded")
        new_target = replace(target, children=replace_at(target.children, rest, update))
    else:
        new_target = update(target)
    return items[:position] + (new_target,) + items[position + 1 :]


async def toggle_expand(
    storage: StorageCapability,
    items: tuple[FileItem, ...],
    index_path: IndexPath,
) -> tuple[FileItem, ...]:
    """Flip ``is_expanded`` on the addressed directory, loading it on first expand.

    Unresolvable paths and non-directories leave the tree unchanged.
    """
    target = resolve_index_path(items, index_path)
    if target is None or not target.is_directory:
        logger.debug("toggle_expand ignored for index path %s", index_path)
        return items

    children = target.children
    if not target.is_expanded and children is None:
        children = await load_directory(storage, target.path)

    return replace_at(
        items,
        index_path,
        lambda item: replace(item, children=children, is_expanded=not item.is_expanded),
    )


def iter_visible(
    items: tuple[FileItem, ...],
    parent: IndexPath = (),
) -> Iterator[tuple[IndexPath, int, FileItem]]:
    """Yield ``(index_path, depth, item)`` for every row a tree view would show."""
    for position, item in enumerate(items):
        index_path = parent + (position,)
        yield index_path, len(parent), item
        if item.is_directory and item.is_expanded and item.children is not None:
            yield from iter_visible(item.children, index_path)


def find_index_path(items: tuple[FileItem, ...], path: str) -> IndexPath | None:
    """Locate ``path`` among loaded entries (expanded or not)."""
    stack: list[tuple[IndexPath, tuple[FileItem, ...]]] = [((), items)]
    while stack:
        parent, level = stack.pop()
        for position, item in enumerate(level):
            index_path = parent + (position,)
            if item.path == path:
                return index_path
            if item.children:
                stack.append((index_path, item.children))
    return None


def loaded_child_count(item: FileItem) -> int | None:
    """Number of listed children, or ``None`` when the directory is not loaded."""
    if item.children is None:
        return None
    return len(item.children)


__all__ = [
    "resolve_index_path",
    "replace_at",
    "toggle_expand",
    "iter_visible",
    "find_index_path",
    "loaded_child_count",
]
