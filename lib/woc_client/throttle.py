from __future__ import annotations

import asyncio
import logging
import threading
import time

logger = logging.getLogger(__name__)


def sleep(seconds: float) -> None:
    time.sleep(seconds)


class Throttle:
    """Keeps successive request dispatches at least ``interval_s`` apart.

    Each caller reserves the next free slot under a lock and then sleeps
    until it comes up, so concurrent callers queue behind each other
    instead of waking up together. An interval of ``0`` disables it.
    """

    def __init__(self, interval_s: float):
        self.interval_s = max(0.0, float(interval_s))
        self._next_slot = 0.0
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.interval_s > 0

    def reserve(self) -> float:
        """Claim the next dispatch slot, returning how long to wait for it."""
        if not self.enabled:
            return 0.0
        with self._lock:
            now = time.monotonic()
            slot = max(now, self._next_slot)
            self._next_slot = slot + self.interval_s
            return slot - now

    def wait(self) -> None:
        delay = self.reserve()
        if delay > 0:
            logger.debug("throttled for %.3fs", delay)
            sleep(delay)

    async def wait_async(self) -> None:
        """Async counterpart of :meth:`wait`.

        The slot is reserved before sleeping. A task cancelled mid-sleep
        still uses up its slot, so later callers keep the full spacing
        after it.
        """
        delay = self.reserve()
        if delay > 0:
            logger.debug("throttled for %.3fs", delay)
            await asyncio.sleep(delay)
