"""Rate limiter adapters."""

from ecosort.infrastructure.ratelimit.memory_limiter import InMemoryRateLimiter
from ecosort.infrastructure.ratelimit.redis_limiter import RedisRateLimiter

__all__ = ["InMemoryRateLimiter", "RedisRateLimiter"]
