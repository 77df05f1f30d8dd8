"""Test Configuration and Fixtures.

The oracle is the only non-deterministic dependency; every test replaces it
with a scripted stub.
"""

from __future__ import annotations

import io
import json
import os
from typing import Callable

import pytest

# Settings validation requires a credential before ecosort.main is imported
os.environ.setdefault("GEMINI_API_KEY", "test-key")

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from PIL import Image  # noqa: E402

from ecosort.application.classify.dto import ClassificationInstruction  # noqa: E402
from ecosort.application.classify.ports import OraclePort, RateLimitConfig  # noqa: E402
from ecosort.infrastructure.ratelimit import InMemoryRateLimiter  # noqa: E402
from ecosort.main import create_app  # noqa: E402
from ecosort.setup.config import Settings, get_settings  # noqa: E402
from ecosort.setup.dependencies import get_oracle, get_rate_limiter  # noqa: E402

ALLOWED_ORIGIN = "https://ecosort.example"

PIZZA_BOX_REPLY = json.dumps(
    {
        "category": "compostable",
        "reason": "Grease-soaked cardboard cannot be pulped for recycling.",
        "eco_fact": "Composting cardboard returns carbon to the soil.",
        "contamination_warning": "Tear off and recycle the clean lid.",
        "wishcycling_alert": "",
        "disclaimer": "Check local rules.",
        "co2_saved_kg": 0.3,
    }
)


class StubOracle(OraclePort):
    """Scripted OraclePort.

    Replies are consumed in order; the last one repeats. An exception instance
    is raised instead of returned.
    """

    def __init__(self, *replies: str | Exception):
        self.replies = list(replies) or [PIZZA_BOX_REPLY]
        self.instructions: list[ClassificationInstruction] = []

    @property
    def calls(self) -> int:
        return len(self.instructions)

    async def generate(self, instruction: ClassificationInstruction) -> str:
        self.instructions.append(instruction)
        reply = self.replies[0] if len(self.replies) == 1 else self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for anyio."""
    return "asyncio"


@pytest.fixture
def stub_oracle() -> StubOracle:
    return StubOracle()


@pytest.fixture
def make_oracle() -> Callable[..., StubOracle]:
    """Factory for stub oracles with scripted replies."""
    return StubOracle


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Factory for encoded test images."""

    def _make(width: int = 32, height: int = 32, mode: str = "RGB", fmt: str = "PNG") -> bytes:
        color = (40, 160, 90, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
        image = Image.new(mode, (width, height), color)
        buffer = io.BytesIO()
        image.save(buffer, format=fmt)
        return buffer.getvalue()

    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        allowed_origins_str=ALLOWED_ORIGIN,
        rate_limit_per_minute=3,
        log_format="text",
    )


@pytest.fixture
def build_app(stub_oracle: StubOracle) -> Callable[[Settings], FastAPI]:
    """App factory with the oracle stubbed and a fresh rate limiter."""

    def _build(app_settings: Settings) -> FastAPI:
        app = create_app(app_settings)
        limiter = InMemoryRateLimiter(RateLimitConfig(limit=app_settings.rate_limit_per_minute))
        app.dependency_overrides[get_settings] = lambda: app_settings
        app.dependency_overrides[get_oracle] = lambda: stub_oracle
        app.dependency_overrides[get_rate_limiter] = lambda: limiter
        return app

    return _build


@pytest.fixture
def app(build_app: Callable[[Settings], FastAPI], settings: Settings) -> FastAPI:
    return build_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
