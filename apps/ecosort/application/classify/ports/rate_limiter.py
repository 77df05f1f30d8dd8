"""Rate Limiter Port.

Fixed-window request budget per client identity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limit settings.

    Attributes:
        limit: maximum requests per window
        window_seconds: window size (default one minute)
    """

    limit: int
    window_seconds: int = 60


@dataclass(frozen=True)
class RateLimitStatus:
    """Rate limit state after a check.

    Attributes:
        key: client identity
        remaining: requests left in the window
        reset_at: window end (Unix timestamp)
        is_allowed: whether this request may proceed
    """

    key: str
    remaining: int
    reset_at: int
    is_allowed: bool


class RateLimiterPort(ABC):
    """Per-client request counter."""

    @abstractmethod
    async def check_and_consume(self, key: str) -> RateLimitStatus:
        """Check the budget and count this request atomically.

        Args:
            key: client identity

        Returns:
            status; ``is_allowed`` is False once the window budget is spent
        """
        ...
