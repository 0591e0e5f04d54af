"""Domain model for the lazily-loaded workspace tree.

This package contains non-UI tree primitives:
- ``FileItem`` entries whose children stay unloaded until first expansion
- the naming policy that classifies entries and picks free names
- directory listing to sorted/filtered entries
- index-path addressing, lazy expand/collapse and visible-row iteration
"""

from __future__ import annotations

from .types import FileItem, IndexPath
from .naming import (
    DEFAULT_NOTE_CONTENT,
    DOCUMENT_EXTENSION,
    NOTE_EXTENSION,
    FileKind,
    classify,
    copy_name_candidates,
    is_document,
    is_note,
    new_note_content,
    next_available_name,
    note_name_candidates,
    split_extension,
)
from .loader import expanded_paths, load_directory, load_tree, sort_key
from .index_path import (
    find_index_path,
    iter_visible,
    loaded_child_count,
    replace_at,
    resolve_index_path,
    toggle_expand,
)

__all__ = [
    "FileItem",
    "IndexPath",
    "DEFAULT_NOTE_CONTENT",
    "DOCUMENT_EXTENSION",
    "NOTE_EXTENSION",
    "FileKind",
    "classify",
    "is_document",
    "is_note",
    "split_extension",
    "note_name_candidates",
    "copy_name_candidates",
    "next_available_name",
    "new_note_content",
    "sort_key",
    "load_directory",
    "load_tree",
    "expanded_paths",
    "resolve_index_path",
    "replace_at",
    "toggle_expand",
    "iter_visible",
    "find_index_path",
    "loaded_child_count",
]
