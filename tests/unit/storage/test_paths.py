"""Tests for pure path helpers shared by both storage adapters."""

from __future__ import annotations

import unittest

from summarydesk.storage import base_name, dir_of, file_name, join_path


class PathHelperTests(unittest.TestCase):
    def test_join_path_inserts_single_separator(self) -> None:
        self.assertEqual(join_path("/ws", "a.md"), "/ws/a.md")
        self.assertEqual(join_path("/ws/", "/a.md"), "/ws/a.md")
        self.assertEqual(join_path("/", "ws"), "/ws")
        self.assertEqual(join_path("/ws", "B", "c.md"), "/ws/B/c.md")

    def test_join_path_keeps_backslash_style_roots(self) -> None:
        self.assertEqual(join_path("C:\\ws", "a.md"), "C:\\ws\\a.md")

    def test_dir_of_returns_parent(self) -> None:
        self.assertEqual(dir_of("/ws/old.md"), "/ws")
        self.assertEqual(dir_of("/ws"), "/")
        self.assertEqual(dir_of("C:\\ws\\a.md"), "C:\\ws")
        self.assertEqual(dir_of("a.md"), "")

    def test_base_name_accepts_both_separators(self) -> None:
        self.assertEqual(base_name("/ws/B/c.md"), "c.md")
        self.assertEqual(base_name("C:\\ws\\doc.pdf"), "doc.pdf")
        self.assertEqual(base_name("/ws/B/"), "B")

    def test_file_name_handles_missing_path(self) -> None:
        self.assertIsNone(file_name(None))
        self.assertIsNone(file_name(""))
        self.assertEqual(file_name("/ws/report.pdf"), "report.pdf")


if __name__ == "__main__":
    unittest.main()
