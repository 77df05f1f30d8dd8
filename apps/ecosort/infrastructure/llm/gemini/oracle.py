"""Google Gemini Oracle - OraclePort implementation.

Uses the async generate_content API in JSON mode.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ecosort.application.classify.dto import ClassificationInstruction
from ecosort.application.classify.ports import OraclePort
from ecosort.application.common.exceptions import (
    OracleRefusalError,
    OracleUnavailableError,
)
from ecosort.infrastructure.llm.gemini.config import (
    DEFAULT_MODEL,
    MAX_OUTPUT_TOKENS,
    REFUSAL_FINISH_REASONS,
    REQUEST_TIMEOUT_SECONDS,
    RESPONSE_MIME_TYPE,
    TEMPERATURE,
)

logger = logging.getLogger(__name__)


def _enum_name(value: Any) -> str | None:
    if value is None:
        return None
    return getattr(value, "name", None) or str(value)


class GeminiOracle(OraclePort):
    """Google Gemini classification oracle."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = TEMPERATURE,
        max_output_tokens: int = MAX_OUTPUT_TOKENS,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        client: genai.Client | None = None,
    ):
        """Initialize.

        Args:
            api_key: Gemini API key
            model: model name
            temperature: sampling temperature
            max_output_tokens: output token ceiling
            timeout_seconds: per-request HTTP timeout
            client: prebuilt client (tests)
        """
        self._model = model
        self._client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
        )
        self._config = types.GenerateContentConfig(
            response_mime_type=RESPONSE_MIME_TYPE,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        logger.info("GeminiOracle initialized (model=%s)", model)

    @property
    def model(self) -> str:
        return self._model

    def _build_contents(self, instruction: ClassificationInstruction) -> list[Any]:
        if instruction.image is None:
            return [instruction.text]
        return [
            types.Part.from_bytes(
                data=instruction.image.data,
                mime_type=instruction.image.mime_type,
            ),
            instruction.text,
        ]

    async def generate(self, instruction: ClassificationInstruction) -> str:
        logger.debug(
            "Gemini API call starting (model=%s, has_image=%s)",
            self._model,
            instruction.image is not None,
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=self._build_contents(instruction),
                config=self._config,
            )
        except errors.APIError as e:
            logger.error(
                "Gemini API error",
                extra={"status_code": e.code, "status": e.status, "error": str(e)},
            )
            raise OracleUnavailableError(f"Gemini API error {e.code}: {e.status}") from e
        except (httpx.HTTPError, asyncio.TimeoutError) as e:
            logger.error(
                "Gemini transport error",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise OracleUnavailableError(f"Gemini unreachable: {type(e).__name__}") from e

        self._raise_for_refusal(response)

        logger.debug("Gemini API call completed (model=%s)", self._model)
        return response.text or ""

    @staticmethod
    def _raise_for_refusal(response: types.GenerateContentResponse) -> None:
        """Turn blocked prompts and safety stops into OracleRefusalError."""
        feedback = response.prompt_feedback
        block_reason = _enum_name(feedback.block_reason) if feedback else None
        if block_reason:
            raise OracleRefusalError(f"Prompt blocked: {block_reason}")

        if not response.candidates:
            raise OracleRefusalError("Oracle returned no candidates")

        finish_reason = _enum_name(response.candidates[0].finish_reason)
        if finish_reason in REFUSAL_FINISH_REASONS:
            raise OracleRefusalError(f"Generation stopped: {finish_reason}")
