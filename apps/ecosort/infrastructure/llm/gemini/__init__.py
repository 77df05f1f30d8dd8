"""Google Gemini adapters."""

from ecosort.infrastructure.llm.gemini.oracle import GeminiOracle

__all__ = ["GeminiOracle"]
