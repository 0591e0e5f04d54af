"""Terminal preview of note text, highlighted as Markdown by Pygments."""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import MarkdownLexer

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


@lru_cache(maxsize=1)
def _formatter() -> TerminalFormatter:
    return TerminalFormatter()


def colorize_note(content: str, no_color: bool = False) -> str:
    """Return sanitized note text, ANSI-highlighted unless ``no_color``."""
    safe = sanitize_terminal_text(content)
    if no_color:
        return safe
    return highlight(safe, MarkdownLexer(), _formatter())


__all__ = [
    "sanitize_terminal_text",
    "colorize_note",
]
