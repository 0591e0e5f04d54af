"""Storage capability interface the rest of the core is written against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class DirectoryListing:
    """One raw directory child as reported by the host."""

    name: str
    is_directory: bool


class StorageCapability(Protocol):
    """Uniform async surface over optional host filesystem access.

    I/O methods raise ``StorageError`` on failure. ``join_path``, ``dir_of``
    and ``base_name`` are pure string computations in every implementation.
    """

    available: bool

    async def list_directory(self, path: str) -> list[DirectoryListing]: ...

    async def join_path(self, *parts: str) -> str: ...

    async def dir_of(self, path: str) -> str: ...

    async def base_name(self, path: str) -> str: ...

    async def read_text(self, path: str) -> str: ...

    async def read_bytes(self, path: str) -> bytes: ...

    async def write_text(self, path: str, content: str) -> None: ...

    async def write_bytes(self, path: str, data: bytes) -> None: ...

    async def exists(self, path: str) -> bool: ...

    async def remove(self, path: str) -> None: ...

    async def rename(self, old_path: str, new_path: str) -> None: ...

    async def copy(self, src_path: str, dest_path: str) -> None: ...

    async def mkdir(self, path: str) -> None: ...

    async def reveal_in_system_explorer(self, path: str) -> None: ...


__all__ = [
    "DirectoryListing",
    "StorageCapability",
]
