"""Tests for the mutation engine against an in-memory workspace."""

from __future__ import annotations

import unittest
from datetime import date

from summarydesk.storage import StorageErrorKind
from summarydesk.workspace import FileOperations, MemoryDroppedFile, WorkspaceTree
from tests.fakes import MemoryStorage


async def _open(storage: MemoryStorage, **kwargs) -> tuple[WorkspaceTree, FileOperations]:
    tree = WorkspaceTree(storage)
    await tree.open_workspace("/ws")
    return tree, FileOperations(tree, today=lambda: date(2024, 1, 1), **kwargs)


def _names(tree: WorkspaceTree) -> list[str]:
    return [item.name for item in tree.items]


class CreateTests(unittest.IsolatedAsyncioTestCase):
    async def test_new_notes_on_same_day_get_numbered(self) -> None:
        storage = MemoryStorage(dirs=("/ws",))
        tree, ops = await _open(storage)

        first = await ops.create_note()
        second = await ops.create_note()

        self.assertEqual(first.path, "/ws/note_2024-01-01.md")
        self.assertEqual(second.path, "/ws/note_2024-01-01_1.md")
        self.assertEqual(storage.files[first.path].decode("utf-8"), first.content)
        self.assertEqual(_names(tree), ["note_2024-01-01.md", "note_2024-01-01_1.md"])

    async def test_create_without_workspace_is_rejected(self) -> None:
        storage = MemoryStorage(dirs=("/ws",))
        ops = FileOperations(WorkspaceTree(storage))

        self.assertIsNone(await ops.create_note())
        self.assertFalse(await ops.create_folder("B"))
        self.assertEqual(storage.calls, [])

    async def test_create_folder_is_root_relative(self) -> None:
        storage = MemoryStorage({"/ws/a.md": ""}, dirs=("/ws/B",))
        tree, ops = await _open(storage)

        self.assertTrue(await ops.create_folder("New"))

        self.assertIn("/ws/New", storage.dirs)
        self.assertEqual(_names(tree), ["B", "New", "a.md"])

    async def test_create_folder_collision_leaves_tree(self) -> None:
        storage = MemoryStorage(dirs=("/ws/B",))
        tree, ops = await _open(storage)
        before = tree.items

        with self.assertLogs("summarydesk.workspace.operations", level="ERROR"):
            self.assertFalse(await ops.create_folder("B"))

        self.assertIs(tree.items, before)


class RenameDeleteCopyTests(unittest.IsolatedAsyncioTestCase):
    async def test_rename_within_directory(self) -> None:
        storage = MemoryStorage({"/ws/old.md": "x"})
        tree, ops = await _open(storage)

        new_path = await ops.rename(tree.items[0], "new.md")

        self.assertEqual(new_path, "/ws/new.md")
        self.assertEqual(_names(tree), ["new.md"])

    async def test_rename_collision_is_logged_not_raised(self) -> None:
        storage = MemoryStorage({"/ws/a.md": "a", "/ws/b.md": "b"})
        tree, ops = await _open(storage)
        before = tree.items

        with self.assertLogs("summarydesk.workspace.operations", level="ERROR"):
            self.assertIsNone(await ops.rename(tree.items[0], "b.md"))

        self.assertIs(tree.items, before)
        self.assertEqual(storage.files["/ws/b.md"], b"b")

    async def test_delete_removes_and_refreshes(self) -> None:
        storage = MemoryStorage({"/ws/a.md": "", "/ws/B/n.md": ""})
        tree, ops = await _open(storage)

        self.assertTrue(await ops.delete(tree.items[0]))

        self.assertEqual(_names(tree), ["a.md"])
        self.assertNotIn("/ws/B/n.md", storage.files)

    async def test_copy_picks_free_name(self) -> None:
        storage = MemoryStorage({"/ws/report.md": "r"})
        tree, ops = await _open(storage)

        first = await ops.copy(tree.items[0])
        second = await ops.copy(tree.items[0])

        self.assertEqual(first, "/ws/report_copy.md")
        self.assertEqual(second, "/ws/report_copy2.md")
        self.assertEqual(_names(tree), ["report.md", "report_copy.md", "report_copy2.md"])

    async def test_copy_of_directory_is_refused(self) -> None:
        storage = MemoryStorage(dirs=("/ws/B",))
        tree, ops = await _open(storage)
        self.assertIsNone(await ops.copy(tree.items[0]))
        self.assertEqual(storage.count("copy"), 0)

    async def test_storage_failure_skips_refresh(self) -> None:
        storage = MemoryStorage({"/ws/a.md": ""})
        tree, ops = await _open(storage)
        storage.fail["remove"] = StorageErrorKind.PERMISSION_DENIED
        listings = storage.count("list_directory")

        with self.assertLogs("summarydesk.workspace.operations", level="ERROR"):
            self.assertFalse(await ops.delete(tree.items[0]))

        self.assertEqual(storage.count("list_directory"), listings)

    async def test_reveal_does_not_refresh(self) -> None:
        storage = MemoryStorage({"/ws/a.md": ""})
        tree, ops = await _open(storage)
        listings = storage.count("list_directory")

        self.assertTrue(await ops.reveal(tree.items[0]))

        self.assertIn(("reveal", "/ws/a.md"), storage.calls)
        self.assertEqual(storage.count("list_directory"), listings)


class DropTests(unittest.IsolatedAsyncioTestCase):
    async def test_drop_writes_notes_and_refreshes_once(self) -> None:
        storage = MemoryStorage(dirs=("/ws/B",))
        tree, ops = await _open(storage)
        listings = storage.count("list_directory")
        files = [
            MemoryDroppedFile("n1.md", b"one"),
            MemoryDroppedFile("n2.MD", b"two"),
            MemoryDroppedFile("paper.pdf", b"%PDF"),
            MemoryDroppedFile("x.txt", b"skip"),
        ]

        written = await ops.drop_files("/ws/B", files)

        self.assertEqual(written, ["/ws/B/n1.md", "/ws/B/n2.MD"])
        self.assertEqual(storage.files["/ws/B/n1.md"], b"one")
        self.assertNotIn("/ws/B/paper.pdf", storage.files)
        self.assertNotIn("/ws/B/x.txt", storage.files)
        self.assertEqual(storage.count("list_directory"), listings + 1)

    async def test_drop_can_persist_documents_when_enabled(self) -> None:
        storage = MemoryStorage(dirs=("/ws",))
        tree, ops = await _open(storage, persist_dropped_documents=True)

        written = await ops.drop_files(None, [MemoryDroppedFile("paper.pdf", b"%PDF")])

        self.assertEqual(written, ["/ws/paper.pdf"])
        self.assertEqual(storage.files["/ws/paper.pdf"], b"%PDF")
        self.assertEqual(_names(tree), ["paper.pdf"])


if __name__ == "__main__":
    unittest.main()
