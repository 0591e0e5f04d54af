"""Tests for the workspace root/tree controller."""

from __future__ import annotations

import asyncio
import unittest

from summarydesk.workspace import WorkspaceTree
from tests.fakes import MemoryStorage


class WorkspaceTreeTests(unittest.IsolatedAsyncioTestCase):
    async def test_operations_without_root_are_noops(self) -> None:
        storage = MemoryStorage({"/ws/a.md": ""})
        tree = WorkspaceTree(storage)

        await tree.refresh()
        await tree.toggle_expand((0,))

        self.assertEqual(storage.calls, [])
        self.assertEqual(tree.items, ())
        self.assertFalse(tree.is_empty)

    async def test_open_workspace_lists_root(self) -> None:
        tree = WorkspaceTree(MemoryStorage({"/ws/a.md": "", "/ws/x.txt": ""}, dirs=("/ws/B",)))

        self.assertTrue(await tree.open_workspace("/ws"))

        self.assertEqual([item.name for item in tree.items], ["B", "a.md"])
        self.assertFalse(tree.is_loading)
        self.assertFalse(tree.is_empty)

    async def test_empty_workspace_reports_empty_only_after_listing(self) -> None:
        tree = WorkspaceTree(MemoryStorage(dirs=("/ws",)))
        self.assertFalse(tree.is_empty)
        await tree.open_workspace("/ws")
        self.assertTrue(tree.is_empty)

    async def test_superseded_workspace_listing_is_discarded(self) -> None:
        storage = MemoryStorage({"/one/a.md": "", "/two/b.md": ""})
        gate = asyncio.Event()
        original = storage.list_directory

        async def slow_list(path: str):
            if path == "/one":
                await gate.wait()
            return await original(path)

        storage.list_directory = slow_list  # type: ignore[method-assign]
        tree = WorkspaceTree(storage)

        first = asyncio.create_task(tree.open_workspace("/one"))
        await asyncio.sleep(0)
        await tree.open_workspace("/two")
        gate.set()

        self.assertFalse(await first)
        self.assertEqual(tree.root, "/two")
        self.assertEqual([item.name for item in tree.items], ["b.md"])

    async def test_close_workspace_discards_inflight_expand(self) -> None:
        storage = MemoryStorage({"/ws/B/n.md": ""})
        tree = WorkspaceTree(storage)
        await tree.open_workspace("/ws")
        gate = asyncio.Event()
        original = storage.list_directory

        async def slow_list(path: str):
            await gate.wait()
            return await original(path)

        storage.list_directory = slow_list  # type: ignore[method-assign]
        expand = asyncio.create_task(tree.toggle_expand((0,)))
        await asyncio.sleep(0)
        tree.close_workspace()
        gate.set()
        await expand

        self.assertIsNone(tree.root)
        self.assertEqual(tree.items, ())

    async def test_refresh_keeps_expanded_directories(self) -> None:
        storage = MemoryStorage({"/ws/B/n.md": "", "/ws/C/m.md": ""})
        tree = WorkspaceTree(storage)
        await tree.open_workspace("/ws")
        await tree.toggle_expand((0,))
        storage.files["/ws/B/new.md"] = b""

        await tree.refresh()

        b_dir, c_dir = tree.items
        self.assertTrue(b_dir.is_expanded)
        self.assertEqual([child.name for child in b_dir.children or ()], ["n.md", "new.md"])
        self.assertIsNone(c_dir.children)


if __name__ == "__main__":
    unittest.main()
