"""Oracle (LLM) adapters."""

from ecosort.infrastructure.llm.gemini import GeminiOracle
from ecosort.infrastructure.llm.retrying import RetryingOracle

__all__ = ["GeminiOracle", "RetryingOracle"]
