"""Single event-loop execution context for the local source view model.

Bus handlers may be called from worker threads; everything that touches
view model state is funnelled onto the bound asyncio loop through here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

CoroutineFunction = Callable[..., Awaitable[Any]]


class TaskDispatcher:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
        self._pending: set[asyncio.Task] = set()
        self._detached: set[asyncio.Task] = set()

    def bind(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """Attach to *loop*, or to the running loop when omitted."""
        self._loop = loop or asyncio.get_running_loop()

    @property
    def is_bound(self) -> bool:
        return self._loop is not None

    @property
    def pending_count(self) -> int:
        return len(self._pending) + len(self._detached)

    def post(self, func: CoroutineFunction, *args: Any) -> None:
        """Schedule ``func(*args)`` as a task on the loop; safe from any thread."""
        self._dispatch(self._start, func, args, False)

    def spawn_detached(self, func: CoroutineFunction, *args: Any) -> None:
        """Schedule best-effort work whose failure is logged and discarded."""
        self._dispatch(self._start, func, args, True)

    def run_on_loop(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run a plain callback on the loop, immediately when already there."""
        self._dispatch(callback, *args)

    async def drain(self) -> None:
        """Wait until every task started through this dispatcher has finished."""
        while self._pending or self._detached:
            await asyncio.gather(*(self._pending | self._detached), return_exceptions=True)

    # ------------------------------------------------------------------
    def _dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        loop = self._require_loop()
        if self._on_loop(loop):
            callback(*args)
        else:
            loop.call_soon_threadsafe(callback, *args)

    def _require_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError:
                raise RuntimeError("TaskDispatcher is not bound to an event loop") from None
        return self._loop

    @staticmethod
    def _on_loop(loop: asyncio.AbstractEventLoop) -> bool:
        try:
            return asyncio.get_running_loop() is loop
        except RuntimeError:
            return False

    def _start(self, func: CoroutineFunction, args: tuple, detached: bool) -> None:
        task = self._loop.create_task(func(*args))
        bucket = self._detached if detached else self._pending
        bucket.add(task)
        task.add_done_callback(lambda t: self._on_done(t, bucket, detached))

    @staticmethod
    def _on_done(task: asyncio.Task, bucket: set, detached: bool) -> None:
        bucket.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is None:
            return
        if detached:
            logger.warning("Best-effort task %s failed: %s", task.get_name(), error)
        else:
            logger.error("Task %s failed", task.get_name(), exc_info=error)
