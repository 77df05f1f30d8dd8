"""Retrying Oracle - backoff policy layered over any OraclePort.

Only OracleUnavailableError is retried. Contract violations and refusals are
returned to the caller on the first occurrence.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from ecosort.application.classify.dto import ClassificationInstruction
from ecosort.application.classify.ports import OraclePort
from ecosort.application.common.exceptions import OracleUnavailableError

logger = logging.getLogger(__name__)


class RetryingOracle(OraclePort):
    """Retry an inner oracle with exponential backoff."""

    def __init__(
        self,
        inner: OraclePort,
        max_retries: int = 2,
        backoff_factor: float = 1.5,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize.

        Args:
            inner: wrapped oracle
            max_retries: retries after the first attempt
            backoff_factor: delay before retry n is backoff_factor ** n seconds
            sleep: async sleep function (injectable for tests)
        """
        self._inner = inner
        self._max_retries = max_retries
        self._backoff_factor = backoff_factor
        self._sleep = sleep

    async def generate(self, instruction: ClassificationInstruction) -> str:
        for attempt in range(self._max_retries + 1):
            try:
                return await self._inner.generate(instruction)
            except OracleUnavailableError as e:
                if attempt >= self._max_retries:
                    raise
                delay = self._backoff_factor**attempt
                logger.warning(
                    "Oracle unavailable, retrying",
                    extra={
                        "attempt": attempt + 1,
                        "max_retries": self._max_retries,
                        "delay": delay,
                        "error": e.message,
                    },
                )
                await self._sleep(delay)
        raise AssertionError("unreachable")
