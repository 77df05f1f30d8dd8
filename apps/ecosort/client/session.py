"""EcoSort Client Session.

Talks to the EcoSort API over httpx and keeps the session history locally.
Photos are normalized before upload, so requests stay far below the server's
body ceiling.
"""

from __future__ import annotations

import base64
import logging
from typing import Any

import httpx

from ecosort.application.classify.ports import ImageNormalizerPort
from ecosort.domain.entities import EcoStats, HistoryEntry, SessionHistory
from ecosort.domain.value_objects import ClassificationResult
from ecosort.infrastructure.imaging import PillowImageNormalizer

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0
GENERIC_ERROR_MESSAGE = "Request failed"


class EcoSortClientError(Exception):
    """Non-2xx reply or transport failure.

    Attributes:
        message: server ``error`` message when present
        status_code: HTTP status, None on transport failure
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class EcoSortSession:
    """One user session against the EcoSort API.

    Usage:
        async with EcoSortSession("http://localhost:3000") as session:
            await session.classify_text("greasy pizza box", dirty=True)
            print(session.stats().score)
    """

    def __init__(
        self,
        base_url: str = "",
        client: httpx.AsyncClient | None = None,
        normalizer: ImageNormalizerPort | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """Initialize.

        Args:
            base_url: API root, e.g. http://localhost:3000
            client: preconfigured client (tests pass one with an ASGI transport)
            normalizer: image normalizer applied before upload
            timeout: request timeout in seconds
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._normalizer = normalizer or PillowImageNormalizer()
        self.history = SessionHistory()

    async def __aenter__(self) -> EcoSortSession:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def classify_text(self, item: str, dirty: bool = False) -> HistoryEntry:
        """Classify a typed item and record the result."""
        return await self._classify("/api/classify-text", {"item": item, "isDirty": dirty})

    async def classify_image(self, data: bytes, dirty: bool = False) -> HistoryEntry:
        """Normalize, upload and classify a photo, then record the result."""
        normalized = self._normalizer.normalize(data)
        payload = {
            "base64": base64.b64encode(normalized.data).decode("ascii"),
            "mime": normalized.mime_type,
            "isDirty": dirty,
        }
        return await self._classify("/api/classify-image", payload)

    def stats(self) -> EcoStats:
        return self.history.stats()

    async def _classify(self, path: str, payload: dict[str, Any]) -> HistoryEntry:
        try:
            response = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.warning("EcoSort request failed", extra={"path": path, "error": str(e)})
            raise EcoSortClientError(GENERIC_ERROR_MESSAGE) from e

        if response.is_error:
            raise EcoSortClientError(_error_message(response), status_code=response.status_code)

        result = ClassificationResult.from_dict(response.json())
        return self.history.append(result)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR_MESSAGE
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return GENERIC_ERROR_MESSAGE
