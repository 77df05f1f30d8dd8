"""In-Memory Rate Limiter.

Fixed-window counter per client key, held in process memory. Suitable for a
single replica; use RedisRateLimiter when several replicas share a budget.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

from ecosort.application.classify.ports import (
    RateLimitConfig,
    RateLimiterPort,
    RateLimitStatus,
)

logger = logging.getLogger(__name__)


class InMemoryRateLimiter(RateLimiterPort):
    """Fixed-window rate limiter.

    Counters are keyed by (client, window_id) and dropped once their window
    has passed.
    """

    def __init__(
        self,
        config: RateLimitConfig,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize.

        Args:
            config: limit and window size
            clock: time source in seconds (injectable for tests)
        """
        self._config = config
        self._clock = clock
        self._counters: dict[str, tuple[int, int]] = {}
        self._lock = asyncio.Lock()

    def _window_id(self) -> int:
        return int(self._clock()) // self._config.window_seconds

    def _reset_at(self, window_id: int) -> int:
        return (window_id + 1) * self._config.window_seconds

    def _current_count(self, key: str, window_id: int) -> int:
        counter = self._counters.get(key)
        if counter is None or counter[0] != window_id:
            return 0
        return counter[1]

    def _evict_expired(self, window_id: int) -> None:
        expired = [key for key, (wid, _) in self._counters.items() if wid != window_id]
        for key in expired:
            del self._counters[key]

    async def check_and_consume(self, key: str) -> RateLimitStatus:
        async with self._lock:
            window_id = self._window_id()
            reset_at = self._reset_at(window_id)
            current = self._current_count(key, window_id)

            if current >= self._config.limit:
                logger.warning(
                    "Rate limit exceeded",
                    extra={
                        "client": key,
                        "current": current,
                        "limit": self._config.limit,
                        "reset_at": reset_at,
                    },
                )
                return RateLimitStatus(key=key, remaining=0, reset_at=reset_at, is_allowed=False)

            if key not in self._counters or self._counters[key][0] != window_id:
                self._evict_expired(window_id)
            self._counters[key] = (window_id, current + 1)

            return RateLimitStatus(
                key=key,
                remaining=self._config.limit - (current + 1),
                reset_at=reset_at,
                is_allowed=True,
            )
