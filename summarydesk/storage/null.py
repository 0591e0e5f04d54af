"""Stand-in storage used when the host grants no filesystem access.

Every call returns a well-typed, effect-free result and logs what would have
happened; path arithmetic still works so computed paths can be displayed.
"""

from __future__ import annotations

import logging

from . import paths
from .base import DirectoryListing

logger = logging.getLogger(__name__)


class NullStorage:
    """No-op storage capability."""

    available = False

    async def list_directory(self, path: str) -> list[DirectoryListing]:
        logger.info("[no storage] list_directory %s", path)
        return []

    async def join_path(self, *parts: str) -> str:
        return paths.join_path(*parts)

    async def dir_of(self, path: str) -> str:
        return paths.dir_of(path)

    async def base_name(self, path: str) -> str:
        return paths.base_name(path)

    async def read_text(self, path: str) -> str:
        logger.info("[no storage] read_text %s", path)
        return ""

    async def read_bytes(self, path: str) -> bytes:
        logger.info("[no storage] read_bytes %s", path)
        return b""

    async def write_text(self, path: str, content: str) -> None:
        logger.info("[no storage] write_text %s (%d chars)", path, len(content))

    async def write_bytes(self, path: str, data: bytes) -> None:
        logger.info("[no storage] write_bytes %s (%d bytes)", path, len(data))

    async def exists(self, path: str) -> bool:
        logger.info("[no storage] exists %s", path)
        return False

    async def remove(self, path: str) -> None:
        logger.info("[no storage] remove %s", path)

    async def rename(self, old_path: str, new_path: str) -> None:
        logger.info("[no storage] rename %s -> %s", old_path, new_path)

    async def copy(self, src_path: str, dest_path: str) -> None:
        logger.info("[no storage] copy %s -> %s", src_path, dest_path)

    async def mkdir(self, path: str) -> None:
        logger.info("[no storage] mkdir %s", path)

    async def reveal_in_system_explorer(self, path: str) -> None:
        logger.info("[no storage] reveal %s", path)


__all__ = ["NullStorage"]
