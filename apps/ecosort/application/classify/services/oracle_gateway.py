"""Oracle Gateway - ClassifierPort backed by an external oracle.

Builds the instruction, makes exactly one OraclePort call and validates the
reply. Retries, if any, live inside the OraclePort it is given.
"""

from __future__ import annotations

import logging
import time

from ecosort.application.classify.ports import ClassifierPort, OraclePort
from ecosort.application.classify.services.instruction_builder import build_instruction
from ecosort.application.classify.services.reply_parser import parse_reply
from ecosort.application.common.exceptions import OracleContractError, OracleError
from ecosort.domain.value_objects import (
    ClassificationResult,
    ClassificationSubject,
    ImageSubject,
)

logger = logging.getLogger(__name__)

RAW_PREVIEW_CHARS = 200


class OracleGateway(ClassifierPort):
    """Classify subjects through an OraclePort."""

    def __init__(self, oracle: OraclePort):
        """Initialize.

        Args:
            oracle: external oracle (possibly wrapped by a retry policy)
        """
        self._oracle = oracle

    async def classify(
        self,
        subject: ClassificationSubject,
        dirty: bool,
    ) -> ClassificationResult:
        subject_kind = "image" if isinstance(subject, ImageSubject) else "text"
        instruction = build_instruction(subject, dirty)
        start = time.perf_counter()

        try:
            raw = await self._oracle.generate(instruction)
            result = parse_reply(raw, subject)
        except OracleContractError as e:
            logger.warning(
                "Oracle reply rejected",
                extra={
                    "subject_kind": subject_kind,
                    "reason": e.message,
                    "raw_preview": (e.raw_output or "")[:RAW_PREVIEW_CHARS],
                },
            )
            raise
        except OracleError as e:
            logger.warning(
                "Oracle call failed",
                extra={
                    "subject_kind": subject_kind,
                    "error_type": type(e).__name__,
                    "reason": e.message,
                },
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Classification completed",
            extra={
                "subject_kind": subject_kind,
                "dirty": dirty,
                "category": result.category.value,
                "elapsed_ms": round(elapsed_ms, 1),
            },
        )
        return result
