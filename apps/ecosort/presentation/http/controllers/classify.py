"""Classification API Controller.

- POST /api/classify-text: classify a typed item
- POST /api/classify-image: classify a photographed item

Both routes sit behind the origin policy and the per-client rate limit.
"""

from __future__ import annotations

import base64
import binascii

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from ecosort.application.classify.commands import (
    ClassifyImageRequest,
    ClassifyTextRequest,
)
from ecosort.domain.enums import WasteCategory
from ecosort.domain.exceptions import InvalidInputError
from ecosort.domain.value_objects import ClassificationResult
from ecosort.presentation.http.guards import enforce_origin_policy, enforce_rate_limit
from ecosort.setup.dependencies import ClassifyImageCommandDep, ClassifyTextCommandDep

router = APIRouter(
    prefix="/api",
    tags=["classify"],
    dependencies=[Depends(enforce_origin_policy), Depends(enforce_rate_limit)],
)


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class ClassifyTextPayload(BaseModel):
    """Text classification request body."""

    model_config = ConfigDict(populate_by_name=True)

    item: StrictStr = Field(..., description="Item description, e.g. 'greasy pizza box'")
    is_dirty: StrictBool = Field(..., alias="isDirty", description="Item is food-soiled")


class ClassifyImagePayload(BaseModel):
    """Image classification request body."""

    model_config = ConfigDict(populate_by_name=True)

    image_base64: StrictStr = Field(..., alias="base64", description="Base64 image (data URL accepted)")
    mime: StrictStr = Field(..., description="Image media type, e.g. image/webp")
    is_dirty: StrictBool = Field(False, alias="isDirty")


class ClassificationResponse(BaseModel):
    """Classification result."""

    category: WasteCategory
    item_detected: str
    reason: str
    eco_fact: str
    contamination_warning: str = ""
    wishcycling_alert: str = ""
    disclaimer: str = ""
    co2_saved_kg: float = 0.0

    @classmethod
    def from_result(cls, result: ClassificationResult) -> ClassificationResponse:
        return cls(**result.to_dict())


def decode_image_payload(raw: str) -> bytes:
    """Decode a base64 image, tolerating a ``data:<mime>;base64,`` prefix.

    Raises:
        InvalidInputError: empty or malformed base64
    """
    if raw.startswith("data:") and "," in raw:
        raw = raw.split(",", 1)[1]
    compact = "".join(raw.split())
    if not compact:
        raise InvalidInputError("Missing image data")
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError("Invalid image data") from e


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post("/classify-text", response_model=ClassificationResponse)
async def classify_text(
    payload: ClassifyTextPayload,
    command: ClassifyTextCommandDep,
) -> ClassificationResponse:
    """Classify a typed item description."""
    result = await command.execute(ClassifyTextRequest(item=payload.item, dirty=payload.is_dirty))
    return ClassificationResponse.from_result(result)


@router.post("/classify-image", response_model=ClassificationResponse)
async def classify_image(
    payload: ClassifyImagePayload,
    command: ClassifyImageCommandDep,
) -> ClassificationResponse:
    """Classify the item shown in an uploaded photo."""
    data = decode_image_payload(payload.image_base64)
    result = await command.execute(
        ClassifyImageRequest(data=data, mime_type=payload.mime, dirty=payload.is_dirty)
    )
    return ClassificationResponse.from_result(result)
