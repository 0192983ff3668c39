from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable

from loguru import logger


class Debouncer:
    """
    Single-slot delayed call.

    Each ``trigger`` replaces whatever call was pending and restarts the quiet
    period. A call only runs if it is still the latest one when its timer
    expires, so superseded triggers are dropped rather than merged.
    """

    def __init__(self, delay: float, callback: Callable[[], Any]) -> None:
        self.delay = delay
        self._callback = callback
        self._pending: asyncio.Task | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def trigger(self) -> asyncio.Task:
        self.cancel()
        self._generation += 1
        self._pending = asyncio.get_running_loop().create_task(self._fire(self._generation))
        return self._pending

    def cancel(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
            logger.debug("Debounced call superseded")
        self._pending = None

    async def run_now(self) -> None:
        self.cancel()
        self._generation += 1
        await self._invoke()

    async def wait(self) -> None:
        while self._pending is not None:
            task = self._pending
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
            if self._pending is task:
                self._pending = None

    async def _fire(self, generation: int) -> None:
        await asyncio.sleep(self.delay)
        if generation != self._generation:
            return
        try:
            await self._invoke()
        finally:
            if self._pending is asyncio.current_task():
                self._pending = None

    async def _invoke(self) -> None:
        result = self._callback()
        if inspect.isawaitable(result):
            await result
