"""Storage error taxonomy shared by every capability adapter."""

from __future__ import annotations

import enum


class StorageErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """A storage call failed.

    ``kind`` classifies the failure; ``path`` is the location the call was
    acting on. The originating ``OSError`` (if any) is chained as
    ``__cause__``.
    """

    def __init__(self, kind: StorageErrorKind, path: str, message: str = "") -> None:
        self.kind = kind
        self.path = path
        super().__init__(message or f"{kind.value}: {path}")


def storage_error_from_os_error(exc: OSError, path: str) -> StorageError:
    """Map an ``OSError`` raised by host I/O to a ``StorageError``."""
    if isinstance(exc, FileNotFoundError):
        kind = StorageErrorKind.NOT_FOUND
    elif isinstance(exc, PermissionError):
        kind = StorageErrorKind.PERMISSION_DENIED
    elif isinstance(exc, FileExistsError):
        kind = StorageErrorKind.ALREADY_EXISTS
    else:
        kind = StorageErrorKind.UNKNOWN
    error = StorageError(kind, path, f"{kind.value}: {path} ({exc.strerror or exc})")
    error.__cause__ = exc
    return error


__all__ = [
    "StorageErrorKind",
    "StorageError",
    "storage_error_from_os_error",
]
