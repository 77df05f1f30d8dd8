"""Oracle Port - the external generative model, seen as a JSON text source."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecosort.application.classify.dto import ClassificationInstruction


class OraclePort(ABC):
    """External classification oracle.

    Gemini is the production implementation. Retry policies wrap an OraclePort
    and are themselves an OraclePort.
    """

    @abstractmethod
    async def generate(self, instruction: ClassificationInstruction) -> str:
        """Send the instruction and return the raw (JSON formatted) reply text.

        Args:
            instruction: instruction text and optional image part

        Returns:
            raw reply text, not yet parsed

        Raises:
            OracleUnavailableError: network or service failure
            OracleRefusalError: oracle declined to answer
        """
        ...
