"""
Process-wide cooldown for rate-limited endpoints.

A call arriving before the cooldown has elapsed is deferred by the remaining
time and then re-checked, so it is never dropped and never overlaps another
call through the same cooldown. This is a self-throttling retry, not a queue:
waiting callers have no guaranteed order among themselves.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Cooldown:
    """Allow at most one call per ``interval`` seconds."""

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.interval = interval
        self._clock = clock
        self._last_call: float | None = None

    def remaining(self) -> float:
        """Seconds until the next call may fire (0 when ready)."""
        if self._last_call is None:
            return 0.0
        return max(0.0, self.interval - (self._clock() - self._last_call))

    async def run(self, call: Callable[[], Awaitable[T]]) -> T:
        """Invoke ``call`` once the cooldown allows it."""
        wait = self.remaining()
        if wait > 0:
            logger.debug("Rate limiting: deferring call by %.3fs", wait)
            await asyncio.sleep(wait)
            return await self.run(call)
        self._last_call = self._clock()
        return await call()
