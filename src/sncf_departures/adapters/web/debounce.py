"""Trailing-edge debouncing of coroutine actions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Runs only the last action scheduled within a quiet period.

    Scheduling a new action cancels the pending timer. An action whose timer
    already fired keeps running; its result has to be checked for staleness
    by the caller.
    """

    def __init__(self, delay_seconds: float) -> None:
        self.delay_seconds = delay_seconds
        self._handle: asyncio.TimerHandle | None = None
        self._running: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        """Whether a timer is waiting to fire."""
        return self._handle is not None

    def schedule(self, action: Callable[[], Awaitable[None]]) -> None:
        """Run the action after the quiet period unless another one is scheduled first."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay_seconds, self._fire, action)

    def cancel(self) -> None:
        """Drop the pending action, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def drain(self) -> None:
        """Wait for the actions that already fired."""
        if self._running:
            await asyncio.gather(*self._running, return_exceptions=True)

    async def close(self) -> None:
        """Cancel the pending timer and any running action."""
        self.cancel()
        for task in list(self._running):
            task.cancel()
        await self.drain()

    def _fire(self, action: Callable[[], Awaitable[None]]) -> None:
        self._handle = None
        task = asyncio.ensure_future(action())
        self._running.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._running.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Debounced action failed: {task.exception()!r}")
