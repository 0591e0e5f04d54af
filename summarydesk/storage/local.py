"""Host filesystem storage adapter.

Blocking calls run in worker threads through ``asyncio.to_thread`` so the
event loop stays responsive while the disk is busy.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import subprocess
import sys

from . import paths
from .base import DirectoryListing
from .errors import StorageError, StorageErrorKind, storage_error_from_os_error

logger = logging.getLogger(__name__)


def _scan(path: str) -> list[DirectoryListing]:
    out: list[DirectoryListing] = []
    with os.scandir(path) as entries:
        for child in entries:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            out.append(DirectoryListing(name=child.name, is_directory=is_dir))
    return out


def _read_text(path: str) -> str:
    """Decode UTF-8 (a leading BOM is dropped); invalid bytes are replaced."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8-sig", errors="replace")


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def _write_text(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def _write_bytes(path: str, data: bytes) -> None:
    with open(path, "wb") as handle:
        handle.write(data)


def _remove(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def _refuse_existing(path: str) -> None:
    # os.rename silently replaces files on POSIX.
    if os.path.lexists(path):
        raise FileExistsError(17, "File exists", path)


def _rename(old_path: str, new_path: str) -> None:
    if not os.path.lexists(old_path):
        raise FileNotFoundError(2, "No such file or directory", old_path)
    _refuse_existing(new_path)
    os.rename(old_path, new_path)


def _copy(src_path: str, dest_path: str) -> None:
    _refuse_existing(dest_path)
    shutil.copy2(src_path, dest_path)


def reveal_command(path: str, platform: str | None = None) -> list[str]:
    """Return the argv that shows ``path`` in the system file manager."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", "-R", path]
    if platform.startswith("win"):
        return ["explorer", f"/select,{path}"]
    target = path if os.path.isdir(path) else (paths.dir_of(path) or path)
    return ["xdg-open", target]


def _reveal(path: str) -> None:
    if not os.path.lexists(path):
        raise FileNotFoundError(2, "No such file or directory", path)
    subprocess.Popen(
        reveal_command(path),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


class LocalStorage:
    """Storage capability backed by real host file I/O."""

    available = True

    async def _run(self, path: str, func, *args):
        try:
            return await asyncio.to_thread(func, *args)
        except StorageError:
            raise
        except OSError as exc:
            raise storage_error_from_os_error(exc, path) from exc

    async def list_directory(self, path: str) -> list[DirectoryListing]:
        return await self._run(path, _scan, path)

    async def join_path(self, *parts: str) -> str:
        return paths.join_path(*parts)

    async def dir_of(self, path: str) -> str:
        return paths.dir_of(path)

    async def base_name(self, path: str) -> str:
        return paths.base_name(path)

    async def read_text(self, path: str) -> str:
        return await self._run(path, _read_text, path)

    async def read_bytes(self, path: str) -> bytes:
        return await self._run(path, _read_bytes, path)

    async def write_text(self, path: str, content: str) -> None:
        await self._run(path, _write_text, path, content)

    async def write_bytes(self, path: str, data: bytes) -> None:
        await self._run(path, _write_bytes, path, data)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(os.path.lexists, path)

    async def remove(self, path: str) -> None:
        await self._run(path, _remove, path)

    async def rename(self, old_path: str, new_path: str) -> None:
        await self._run(new_path, _rename, old_path, new_path)

    async def copy(self, src_path: str, dest_path: str) -> None:
        if await asyncio.to_thread(os.path.isdir, src_path):
            raise StorageError(StorageErrorKind.UNKNOWN, src_path, f"cannot copy a directory: {src_path}")
        await self._run(dest_path, _copy, src_path, dest_path)

    async def mkdir(self, path: str) -> None:
        await self._run(path, os.mkdir, path)

    async def reveal_in_system_explorer(self, path: str) -> None:
        logger.debug("revealing %s", path)
        await self._run(path, _reveal, path)


__all__ = [
    "LocalStorage",
    "reveal_command",
]
