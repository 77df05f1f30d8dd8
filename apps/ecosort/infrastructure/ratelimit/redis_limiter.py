"""Redis Rate Limiter.

Fixed-window counter shared across replicas.

Data layout:
- ecosort:rate_limit:{client}:{window_id} → String (request count, expires with the window)
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from redis.asyncio import Redis

from ecosort.application.classify.ports import (
    RateLimitConfig,
    RateLimiterPort,
    RateLimitStatus,
)

logger = logging.getLogger(__name__)

COUNTER_KEY_PREFIX = "ecosort:rate_limit:"

# Check and increment atomically.
CHECK_AND_CONSUME_LUA = """
local counter_key = KEYS[1]
local limit = tonumber(ARGV[1])
local window_seconds = tonumber(ARGV[2])

local current = tonumber(redis.call('GET', counter_key) or '0')

if current >= limit then
    return {0, current, 0}
end

local new_count = redis.call('INCR', counter_key)
if new_count == 1 then
    redis.call('EXPIRE', counter_key, window_seconds)
end

return {1, new_count, limit - new_count}
"""


class RedisRateLimiter(RateLimiterPort):
    """Redis-backed fixed-window rate limiter."""

    def __init__(
        self,
        redis: Redis,
        config: RateLimitConfig,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize.

        Args:
            redis: async Redis client
            config: limit and window size
            clock: time source in seconds (injectable for tests)
        """
        self._redis = redis
        self._config = config
        self._clock = clock

    def _counter_key(self, key: str, window_id: int) -> str:
        return f"{COUNTER_KEY_PREFIX}{key}:{window_id}"

    def _window_id(self) -> int:
        return int(self._clock()) // self._config.window_seconds

    def _reset_at(self, window_id: int) -> int:
        return (window_id + 1) * self._config.window_seconds

    async def check_and_consume(self, key: str) -> RateLimitStatus:
        window_id = self._window_id()
        counter_key = self._counter_key(key, window_id)
        reset_at = self._reset_at(window_id)

        result = await self._redis.eval(
            CHECK_AND_CONSUME_LUA,
            1,
            counter_key,
            self._config.limit,
            self._config.window_seconds,
        )
        is_allowed, current, remaining = result

        if not is_allowed:
            logger.warning(
                "Rate limit exceeded",
                extra={
                    "client": key,
                    "current": current,
                    "limit": self._config.limit,
                    "reset_at": reset_at,
                },
            )

        return RateLimitStatus(
            key=key,
            remaining=int(remaining),
            reset_at=reset_at,
            is_allowed=bool(is_allowed),
        )
