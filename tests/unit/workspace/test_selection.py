"""Tests for open document/note tracking."""

from __future__ import annotations

import unittest

from summarydesk.file_tree_model import DEFAULT_NOTE_CONTENT, FileItem
from summarydesk.storage import NullStorage, StorageErrorKind
from summarydesk.workspace import SelectionState
from tests.fakes import MemoryStorage

NOTE = FileItem("a.md", "/ws/a.md", False)
OTHER_NOTE = FileItem("b.md", "/ws/b.md", False)
DOCUMENT = FileItem("paper.pdf", "/ws/paper.pdf", False)
FOLDER = FileItem("B", "/ws/B", True)


class SelectionTests(unittest.IsolatedAsyncioTestCase):
    async def test_selecting_document_sets_only_document_path(self) -> None:
        selection = SelectionState(MemoryStorage({"/ws/paper.pdf": b"%PDF-1.7"}))

        self.assertTrue(await selection.select(DOCUMENT))

        self.assertEqual(selection.open_document_path, "/ws/paper.pdf")
        self.assertEqual(selection.document_bytes, b"%PDF-1.7")
        self.assertIsNone(selection.open_note_path)
        self.assertEqual(selection.note_content, DEFAULT_NOTE_CONTENT)

    async def test_selecting_note_loads_content(self) -> None:
        selection = SelectionState(MemoryStorage({"/ws/a.md": "# a"}))

        self.assertTrue(await selection.select(NOTE))

        self.assertEqual(selection.open_note_path, "/ws/a.md")
        self.assertEqual(selection.note_content, "# a")
        self.assertTrue(selection.is_selected(NOTE))
        self.assertFalse(selection.is_selected(DOCUMENT))

    async def test_failed_note_read_keeps_previous_note(self) -> None:
        selection = SelectionState(MemoryStorage({"/ws/a.md": "# a"}))
        await selection.select(NOTE)

        with self.assertLogs("summarydesk.workspace.selection", level="ERROR"):
            self.assertFalse(await selection.select(OTHER_NOTE))

        self.assertEqual(selection.open_note_path, "/ws/a.md")
        self.assertEqual(selection.note_content, "# a")

    async def test_directories_are_not_selectable(self) -> None:
        storage = MemoryStorage(dirs=("/ws/B",))
        selection = SelectionState(storage)
        self.assertFalse(await selection.select(FOLDER))
        self.assertEqual(storage.calls, [])

    async def test_document_read_failure_clears_bytes(self) -> None:
        storage = MemoryStorage({"/ws/paper.pdf": b"%PDF"})
        storage.fail["read"] = StorageErrorKind.PERMISSION_DENIED
        selection = SelectionState(storage)
        selection.set_document_bytes(b"old")

        with self.assertLogs("summarydesk.workspace.selection", level="ERROR"):
            await selection.select(DOCUMENT)

        self.assertEqual(selection.open_document_path, "/ws/paper.pdf")
        self.assertIsNone(selection.document_bytes)

    async def test_without_storage_document_path_is_tracked_without_reading(self) -> None:
        selection = SelectionState(NullStorage())
        await selection.open_document("/ws/paper.pdf")
        self.assertEqual(selection.open_document_path, "/ws/paper.pdf")
        self.assertIsNone(selection.document_bytes)

    async def test_save_note_writes_open_path_only(self) -> None:
        storage = MemoryStorage({"/ws/a.md": "# a"})
        selection = SelectionState(storage)

        self.assertFalse(await selection.save_note("lost"))
        await selection.select(NOTE)
        self.assertTrue(await selection.save_note("# edited"))

        self.assertEqual(storage.files["/ws/a.md"], b"# edited")

    def test_in_memory_document_has_no_path(self) -> None:
        selection = SelectionState(NullStorage())
        selection.open_document_path = "/ws/old.pdf"
        selection.set_document_bytes(b"%PDF")
        self.assertIsNone(selection.open_document_path)
        self.assertEqual(selection.document_bytes, b"%PDF")


if __name__ == "__main__":
    unittest.main()
