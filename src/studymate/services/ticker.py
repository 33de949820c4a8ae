"""One-second countdown source.

A ticker owns at most one running loop. ``start`` while active is a no-op and
``stop`` guarantees no further callback is made, even when called from
inside the callback itself.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Protocol

TickCallback = Callable[[], Awaitable[None]]


class Ticker(Protocol):
    @property
    def active(self) -> bool: ...

    def start(self, callback: TickCallback) -> bool: ...

    def stop(self) -> None: ...


class AsyncioTicker:
    """Calls ``callback`` once per ``interval`` seconds on the running loop.

    Deadlines are computed from the loop clock, so a slow callback does not
    accumulate drift and no tick is skipped or doubled.
    """

    def __init__(self, interval: float = 1.0):
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None

    def start(self, callback: TickCallback) -> bool:
        """Start ticking. Returns False if a loop is already running."""
        if self._task is not None:
            return False
        self._task = asyncio.get_running_loop().create_task(self._run(callback))
        return True

    def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        # Called from inside the callback: the loop exits at its next ownership check.
        if task is not asyncio.current_task():
            task.cancel()

    async def _run(self, callback: TickCallback) -> None:
        loop = asyncio.get_running_loop()
        me = asyncio.current_task()
        deadline = loop.time()
        while self._task is me:
            deadline += self.interval
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            if self._task is not me:
                return
            await callback()
