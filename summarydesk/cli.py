"""Command-line front door for summarydesk.

Opens a workspace, runs one sidebar action through the workspace
controller, and prints the resulting tree.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .config import LOG_LEVELS, load_settings
from .file_tree_model import IndexPath, find_index_path, resolve_index_path
from .render import DEFAULT_THEME, PLAIN_THEME, colorize_note, format_workspace
from .storage import select_storage
from .workspace import LocalDroppedFile, WorkspaceSidebar

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="summarydesk",
        description="Browse and manage the documents and notes of a workspace directory.",
    )
    parser.add_argument("--workspace", "-w", default=None, help="Workspace directory. Defaults to current directory.")
    parser.add_argument("--no-storage", action="store_true", help="Run without filesystem access (nothing is written).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging threshold.")
    commands = parser.add_subparsers(dest="command")

    tree = commands.add_parser("tree", help="Print the workspace tree.")
    tree.add_argument("--expand", action="append", default=[], metavar="DIR", help="Directory to expand (repeatable).")
    commands.add_parser("new-note", help="Create a dated note at the workspace root.")
    new_folder = commands.add_parser("new-folder", help="Create a folder at the workspace root.")
    new_folder.add_argument("name")
    rename = commands.add_parser("rename", help="Rename an entry within its directory.")
    rename.add_argument("path")
    rename.add_argument("new_name")
    delete = commands.add_parser("delete", help="Delete an entry (directories recursively).")
    delete.add_argument("path")
    delete.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")
    copy = commands.add_parser("copy", help="Copy a file next to itself.")
    copy.add_argument("path")
    reveal = commands.add_parser("reveal", help="Show an entry in the system file manager.")
    reveal.add_argument("path")
    import_cmd = commands.add_parser("import", help="Import documents and notes into the workspace.")
    import_cmd.add_argument("files", nargs="+")
    import_cmd.add_argument("--into", default=None, metavar="DIR", help="Target directory inside the workspace.")
    open_cmd = commands.add_parser("open", help="Open a document or note.")
    open_cmd.add_argument("path")
    return parser


async def locate(sidebar: WorkspaceSidebar, path: str) -> IndexPath | None:
    """Expand ancestors of ``path`` as needed and return its index path."""
    root = sidebar.tree.root
    if root is None:
        return None
    try:
        relative = Path(path).relative_to(root)
    except ValueError:
        return None
    current = root
    index_path: IndexPath | None = None
    for part in relative.parts:
        if index_path is not None:
            parent = resolve_index_path(sidebar.tree.items, index_path)
            if parent is not None and parent.is_directory and not parent.is_expanded:
                await sidebar.on_toggle(index_path)
        current = await sidebar.storage.join_path(current, part)
        index_path = find_index_path(sidebar.tree.items, current)
        if index_path is None:
            return None
    return index_path


async def _expand(sidebar: WorkspaceSidebar, directories: list[str]) -> None:
    for directory in directories:
        index_path = await locate(sidebar, directory)
        item = resolve_index_path(sidebar.tree.items, index_path) if index_path is not None else None
        if item is None or not item.is_directory:
            raise SystemExit(f"Not a directory in the workspace: {directory}")
        if not item.is_expanded:
            await sidebar.on_toggle(index_path)


async def _require(sidebar: WorkspaceSidebar, path: str) -> IndexPath:
    index_path = await locate(sidebar, path)
    if index_path is None:
        raise SystemExit(f"Not found in workspace: {path}")
    return index_path


def _resolved(path: str) -> str:
    return str(Path(path).resolve())


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


async def run(args: argparse.Namespace, sidebar: WorkspaceSidebar) -> int:
    """Execute one parsed command; returns the process exit code."""
    root = _resolved(args.workspace or str(Path.cwd()))
    if sidebar.storage_available and not Path(root).is_dir():
        raise SystemExit(f"Workspace is not a directory: {root}")
    await sidebar.open_workspace(root)
    theme = PLAIN_THEME if args.no_color or not sys.stdout.isatty() else DEFAULT_THEME
    command = args.command or "tree"
    ok = True

    if command == "tree":
        await _expand(sidebar, [_resolved(path) for path in args.expand])
    elif command == "new-note":
        note = await sidebar.new_note()
        ok = note is not None
        if note is not None:
            print(f"created {note.path}")
    elif command == "new-folder":
        name = args.name.strip()
        ok = bool(name) and await sidebar.operations.create_folder(name)
    elif command == "rename":
        index_path = await _require(sidebar, _resolved(args.path))
        item = sidebar.item_at(index_path)
        new_name = args.new_name.strip()
        if new_name and new_name != item.name:
            ok = await sidebar.operations.rename(item, new_name) is not None
    elif command == "delete":
        index_path = await _require(sidebar, _resolved(args.path))
        item = sidebar.item_at(index_path)
        if args.yes or _confirm(f"Delete {item.name}? This cannot be undone."):
            ok = await sidebar.operations.delete(item)
    elif command == "copy":
        index_path = await _require(sidebar, _resolved(args.path))
        ok = await sidebar.operations.copy(sidebar.item_at(index_path)) is not None
    elif command == "reveal":
        index_path = await _require(sidebar, _resolved(args.path))
        ok = await sidebar.operations.reveal(sidebar.item_at(index_path))
    elif command == "import":
        target: IndexPath | None = None
        if args.into is not None:
            target = await _require(sidebar, _resolved(args.into))
        files = [LocalDroppedFile(Path(name)) for name in args.files]
        written = await sidebar.on_drop(target, files)
        for path in written:
            print(f"imported {path}")
    elif command == "open":
        index_path = await _require(sidebar, _resolved(args.path))
        await sidebar.on_click(index_path)
        selection = sidebar.selection
        if selection.open_note_path == sidebar.item_at(index_path).path:
            sys.stdout.write(colorize_note(selection.note_content, no_color=theme is PLAIN_THEME))
            return 0
        if selection.document_bytes is not None:
            print(f"{selection.open_document_path}: {len(selection.document_bytes)} bytes")
            return 0
        ok = False

    for line in format_workspace(
        sidebar.tree.root,
        sidebar.tree.items,
        sidebar.selection,
        loaded=sidebar.tree.root_loaded,
        storage_available=sidebar.storage_available,
        theme=theme,
    ):
        print(line)
    return 0 if ok else 1


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one workspace command."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    storage = select_storage(False if args.no_storage else None)
    sidebar = WorkspaceSidebar(storage, settings)
    raise SystemExit(asyncio.run(run(args, sidebar)))


if __name__ == "__main__":
    main()
