from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import Change, awatch

from ref_navigator.core.languages import is_supported_file

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[set[Path], set[Path]], Coroutine[Any, Any, None]]


class WatchfilesWatcher:
    """Watch a directory for JSON document changes and trigger a callback.

    The callback receives the changed (added or modified) paths and the
    deleted paths. Implements the ``FileWatcherPort`` protocol.
    """

    def __init__(self, directory: str | Path, on_change: ChangeCallback) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            changed: set[Path] = set()
            deleted: set[Path] = set()
            for change, raw_path in changes:
                path = Path(raw_path)
                if not is_supported_file(path):
                    continue
                (deleted if change == Change.deleted else changed).add(path)
            if changed or deleted:
                logger.info("Detected changes in %d file(s)", len(changed) + len(deleted))
                try:
                    await self._on_change(changed, deleted)
                except Exception:
                    logger.exception("Error in watcher callback")
