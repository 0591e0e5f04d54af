"""Domain datatypes for the partially-loaded workspace tree."""

from __future__ import annotations

from dataclasses import dataclass

from .naming import FileKind, classify

IndexPath = tuple[int, ...]


@dataclass(frozen=True)
class FileItem:
    """One workspace entry with lazily materialized children.

    ``children is None`` means the directory has never been listed, which is
    different from a listed directory with no visible entries (``()``).
    Collapsing keeps the last listing so re-expanding costs no I/O.
    """

    name: str
    path: str
    is_directory: bool
    children: tuple["FileItem", ...] | None = None
    is_expanded: bool = False

    @property
    def is_loaded(self) -> bool:
        return self.children is not None

    @property
    def kind(self) -> FileKind | None:
        """File kind, or ``None`` for directories."""
        if self.is_directory:
            return None
        return classify(self.name)


__all__ = [
    "FileItem",
    "IndexPath",
]
