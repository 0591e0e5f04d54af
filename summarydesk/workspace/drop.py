"""Files handed over by a drag-and-drop source."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol


class DroppedFile(Protocol):
    """A dropped item: only ``name`` is inspected until content is needed."""

    name: str

    async def read_text(self) -> str: ...

    async def read_bytes(self) -> bytes: ...


class LocalDroppedFile:
    """Dropped file backed by a path on the host (used by the CLI import)."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = path.name

    async def read_text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")

    async def read_bytes(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)


class MemoryDroppedFile:
    """Dropped file whose content is already in memory."""

    def __init__(self, name: str, data: bytes) -> None:
        self.name = name
        self.data = data

    async def read_text(self) -> str:
        return self.data.decode("utf-8")

    async def read_bytes(self) -> bytes:
        return self.data


__all__ = [
    "DroppedFile",
    "LocalDroppedFile",
    "MemoryDroppedFile",
]
