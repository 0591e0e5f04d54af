"""Debounced note autosave with a minimum-visible saving indicator."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from .config import AUTO_SAVE_DELAY_MS, SAVE_INDICATOR_DURATION_MS

logger = logging.getLogger(__name__)


class AutoSaver:
    """Single pending save task, replaced (not stacked) on every edit.

    ``save`` receives the note path and the content to persist and returns a
    truthy value on success. ``open_path`` reports the note open right now;
    a debounced save is bound to the note that was open when the edit
    happened. With no note open nothing is written.
    ``is_saving`` stays true for at least ``indicator`` seconds per save.
    """

    def __init__(
        self,
        save: Callable[[str, str], Awaitable[object]],
        open_path: Callable[[], str | None],
        *,
        delay: float = AUTO_SAVE_DELAY_MS / 1000.0,
        indicator: float = SAVE_INDICATOR_DURATION_MS / 1000.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._save = save
        self._open_path = open_path
        self.delay = delay
        self.indicator = indicator
        self._clock = clock
        self._pending: asyncio.Task[None] | None = None
        self._indicator_task: asyncio.Task[None] | None = None
        self.is_saving = False
        self.last_saved: float | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def trigger(self, content: str) -> None:
        """Arm (or re-arm) the debounce timer for ``content``."""
        if self._pending is not None:
            self._pending.cancel()
        path = self._open_path()
        self._pending = asyncio.get_running_loop().create_task(self._delayed_save(path, content))

    async def _delayed_save(self, path: str | None, content: str) -> None:
        await asyncio.sleep(self.delay)
        await self._save_to(path, content)

    async def save_now(self, content: str) -> bool:
        """Save to the currently open note immediately; returns whether it was written."""
        return await self._save_to(self._open_path(), content)

    async def _save_to(self, path: str | None, content: str) -> bool:
        if path is None:
            return False
        self.is_saving = True
        started = asyncio.get_running_loop().time()
        saved = False
        try:
            saved = bool(await self._save(path, content))
        except Exception:
            logger.exception("autosave of %s failed", path)
        if saved:
            self.last_saved = self._clock()
        remaining = self.indicator - (asyncio.get_running_loop().time() - started)
        if self._indicator_task is not None:
            self._indicator_task.cancel()
        self._indicator_task = asyncio.get_running_loop().create_task(self._clear_indicator(max(0.0, remaining)))
        return saved

    async def _clear_indicator(self, after: float) -> None:
        await asyncio.sleep(after)
        self.is_saving = False

    async def flush(self) -> None:
        """Wait for the pending save and the indicator to settle."""
        for attr in ("_pending", "_indicator_task"):
            task = getattr(self, attr)
            if task is None:
                continue
            try:
                await task
            except asyncio.CancelledError:
                pass

    def cancel(self) -> None:
        """Drop any pending save; used on teardown."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        if self._indicator_task is not None:
            self._indicator_task.cancel()
            self._indicator_task = None
        self.is_saving = False


__all__ = ["AutoSaver"]
