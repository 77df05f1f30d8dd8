"""Oracle reply parsing and contract validation.

The oracle is asked for JSON but nothing enforces the shape, so every reply
goes through ``parse_reply`` before reaching a caller.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from ecosort.application.common.exceptions import OracleContractError
from ecosort.domain.enums import WasteCategory
from ecosort.domain.value_objects import (
    ClassificationResult,
    ClassificationSubject,
    TextSubject,
)

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


class OracleReply(BaseModel):
    """Expected reply shape. Unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore")

    category: WasteCategory
    item_detected: Optional[Any] = None
    reason: Optional[StrictStr] = None
    eco_fact: Optional[StrictStr] = None
    contamination_warning: Optional[StrictStr] = None
    wishcycling_alert: Optional[StrictStr] = None
    disclaimer: Optional[StrictStr] = None
    co2_saved_kg: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise ValueError("category must be a string")
        return value.strip().lower()

    @field_validator("co2_saved_kg", mode="before")
    @classmethod
    def _reject_non_numeric(cls, value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("co2_saved_kg must be a number")
        return value


def _strip_code_fence(raw: str) -> str:
    text = raw.strip()
    match = _CODE_FENCE.match(text)
    return match.group(1) if match else text


def load_json_object(raw: str | None) -> dict[str, Any]:
    """Parse raw oracle text into a JSON object.

    Raises:
        OracleContractError: empty, not JSON, or not an object
    """
    if not raw or not raw.strip():
        raise OracleContractError("Oracle returned an empty reply", raw_output=raw)
    try:
        data = json.loads(_strip_code_fence(raw))
    except json.JSONDecodeError as e:
        raise OracleContractError(f"Oracle reply is not JSON: {e}", raw_output=raw) from e
    if not isinstance(data, dict):
        raise OracleContractError(
            f"Oracle reply is a JSON {type(data).__name__}, expected object",
            raw_output=raw,
        )
    return data


def parse_reply(raw: str | None, subject: ClassificationSubject) -> ClassificationResult:
    """Validate an oracle reply and build the canonical result.

    Missing optional strings become "" and a missing CO2 figure becomes 0.0.
    For text subjects a missing or blank ``item_detected`` is backfilled with
    the item text; image replies are left as returned.

    Args:
        raw: raw reply text
        subject: subject the reply is about

    Returns:
        validated ClassificationResult

    Raises:
        OracleContractError: reply violates the output contract
    """
    data = load_json_object(raw)

    try:
        reply = OracleReply.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise OracleContractError(
            f"Oracle reply failed validation: {', '.join(fields)}",
            raw_output=raw,
        ) from e

    item_detected = reply.item_detected
    if not isinstance(item_detected, str) or not item_detected.strip():
        if isinstance(subject, TextSubject):
            logger.debug("Backfilling item_detected from input text")
            item_detected = subject.item
        else:
            item_detected = ""

    return ClassificationResult(
        category=reply.category,
        item_detected=item_detected,
        reason=reply.reason or "",
        eco_fact=reply.eco_fact or "",
        contamination_warning=reply.contamination_warning or "",
        wishcycling_alert=reply.wishcycling_alert or "",
        disclaimer=reply.disclaimer or "",
        co2_saved_kg=float(reply.co2_saved_kg or 0.0),
    )
