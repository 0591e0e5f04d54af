"""Entry classification and collision-avoiding names for new entries."""

from __future__ import annotations

import enum
from collections.abc import Awaitable, Callable, Iterable, Iterator
from datetime import date

DOCUMENT_EXTENSION = ".pdf"
NOTE_EXTENSION = ".md"

DEFAULT_NOTE_CONTENT = """
> Edit here to write your note.
> Markdown syntax is supported.
"""


class FileKind(enum.Enum):
    DOCUMENT = "document"
    NOTE = "note"
    IGNORED = "ignored"


def classify(name: str) -> FileKind:
    """Classify a file name by case-insensitive extension."""
    lowered = name.lower()
    if lowered.endswith(DOCUMENT_EXTENSION):
        return FileKind.DOCUMENT
    if lowered.endswith(NOTE_EXTENSION):
        return FileKind.NOTE
    return FileKind.IGNORED


def is_document(name: str) -> bool:
    return classify(name) is FileKind.DOCUMENT


def is_note(name: str) -> bool:
    return classify(name) is FileKind.NOTE


def split_extension(name: str) -> tuple[str, str]:
    """Split ``name`` into ``(base, ext)``; a leading dot is not an extension."""
    dot_index = name.rfind(".")
    if dot_index <= 0:
        return name, ""
    return name[:dot_index], name[dot_index:]


def note_name_candidates(date_stamp: str) -> Iterator[str]:
    """Yield ``note_<date>.md``, then ``note_<date>_1.md``, ``_2`` ..."""
    yield f"note_{date_stamp}{NOTE_EXTENSION}"
    counter = 1
    while True:
        yield f"note_{date_stamp}_{counter}{NOTE_EXTENSION}"
        counter += 1


def copy_name_candidates(name: str) -> Iterator[str]:
    """Yield ``<base>_copy<ext>``, then ``<base>_copy2<ext>``, ``_copy3`` ...

    Copy numbering starts at 2 while new-note numbering starts at 1; existing
    workspaces depend on both sequences.
    """
    base, ext = split_extension(name)
    yield f"{base}_copy{ext}"
    counter = 2
    while True:
        yield f"{base}_copy{counter}{ext}"
        counter += 1


async def next_available_name(
    candidates: Iterable[str],
    exists: Callable[[str], Awaitable[bool]],
) -> str:
    """Return the first candidate for which ``exists`` reports ``False``.

    The probe is not atomic with whatever create follows it: two concurrent
    creators can pick the same name.
    """
    for candidate in candidates:
        if not await exists(candidate):
            return candidate
    raise ValueError("candidate sequence exhausted")


def new_note_content(created: date) -> str:
    """Initial body for a freshly created note."""
    return f"# New note\n\nCreated: {created.isoformat()}\n\n## Notes\n\n"


__all__ = [
    "DOCUMENT_EXTENSION",
    "NOTE_EXTENSION",
    "DEFAULT_NOTE_CONTENT",
    "FileKind",
    "classify",
    "is_document",
    "is_note",
    "split_extension",
    "note_name_candidates",
    "copy_name_candidates",
    "next_available_name",
    "new_note_content",
]
