"""Storage capability adapters.

The real adapter wraps host file I/O; the null adapter is selected once at
startup when the host exposes no filesystem access. Callers only ever see the
``StorageCapability`` surface.
"""

from __future__ import annotations

import os

from .base import DirectoryListing, StorageCapability
from .errors import StorageError, StorageErrorKind, storage_error_from_os_error
from .local import LocalStorage
from .null import NullStorage
from .paths import base_name, dir_of, file_name, join_path

NO_STORAGE_ENV = "SUMMARYDESK_NO_STORAGE"


def select_storage(enabled: bool | None = None) -> StorageCapability:
    """Pick the storage adapter for this session.

    ``enabled=None`` consults the ``SUMMARYDESK_NO_STORAGE`` environment
    variable; any non-empty value other than ``0`` disables storage.
    """
    if enabled is None:
        flag = os.environ.get(NO_STORAGE_ENV, "").strip()
        enabled = flag in {"", "0"}
    return LocalStorage() if enabled else NullStorage()


__all__ = [
    "DirectoryListing",
    "StorageCapability",
    "StorageError",
    "StorageErrorKind",
    "storage_error_from_os_error",
    "LocalStorage",
    "NullStorage",
    "select_storage",
    "join_path",
    "dir_of",
    "base_name",
    "file_name",
    "NO_STORAGE_ENV",
]
