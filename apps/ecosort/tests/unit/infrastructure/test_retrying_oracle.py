"""Retrying Oracle Tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ecosort.application.classify.dto import ClassificationInstruction
from ecosort.application.common.exceptions import (
    OracleContractError,
    OracleUnavailableError,
)
from ecosort.infrastructure.llm import RetryingOracle

pytestmark = pytest.mark.anyio

INSTRUCTION = ClassificationInstruction(text="classify")


class TestRetryingOracle:
    """RetryingOracle tests."""

    async def test_recovers_after_unavailable(self, make_oracle) -> None:
        inner = make_oracle(OracleUnavailableError("503"), '{"category": "landfill"}')
        sleep = AsyncMock()
        oracle = RetryingOracle(inner, max_retries=2, backoff_factor=2.0, sleep=sleep)

        assert await oracle.generate(INSTRUCTION) == '{"category": "landfill"}'
        assert inner.calls == 2
        sleep.assert_awaited_once_with(1.0)

    async def test_gives_up_after_max_retries(self, make_oracle) -> None:
        inner = make_oracle(OracleUnavailableError("503"))
        sleep = AsyncMock()
        oracle = RetryingOracle(inner, max_retries=2, backoff_factor=2.0, sleep=sleep)

        with pytest.raises(OracleUnavailableError):
            await oracle.generate(INSTRUCTION)
        assert inner.calls == 3
        assert [c.args[0] for c in sleep.await_args_list] == [1.0, 2.0]

    async def test_contract_errors_not_retried(self, make_oracle) -> None:
        inner = make_oracle(OracleContractError("bad shape"))
        sleep = AsyncMock()
        oracle = RetryingOracle(inner, max_retries=3, sleep=sleep)

        with pytest.raises(OracleContractError):
            await oracle.generate(INSTRUCTION)
        assert inner.calls == 1
        sleep.assert_not_awaited()

    async def test_zero_retries(self, make_oracle) -> None:
        inner = make_oracle(OracleUnavailableError("503"))
        oracle = RetryingOracle(inner, max_retries=0, sleep=AsyncMock())

        with pytest.raises(OracleUnavailableError):
            await oracle.generate(INSTRUCTION)
        assert inner.calls == 1
