"""Fixed-schedule retry for transient storage faults."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Sequence, TypeVar

from .errors import TransientStorageFault

T = TypeVar("T")

# Static schedule (seconds): 3 retries, 4 attempts in total.
RETRY_WAITS = (5, 10, 15)


class RetryPolicy:
    """Retry an async operation on :class:`TransientStorageFault` only.

    Any other exception propagates on the first attempt. The policy keeps no
    state between calls; each ``execute`` starts from attempt one.
    """

    def __init__(
        self,
        waits: Sequence[float] = RETRY_WAITS,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.waits = tuple(waits)
        self._sleep = sleep
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation``; on a transient fault wait and retry per the schedule."""
        retry_count = 0
        while True:
            try:
                return await operation()
            except TransientStorageFault as e:
                if retry_count >= len(self.waits):
                    raise
                wait = self.waits[retry_count]
                retry_count += 1
                self._logger.error(
                    "Error - try retry (count: %d, timeSpan: %ss)",
                    retry_count,
                    wait,
                    exc_info=e,
                    extra={"retry_count": retry_count, "wait_seconds": wait},
                )
                await self._sleep(wait)
