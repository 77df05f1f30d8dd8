"""Classify Image Command - classify the item shown in a photo.

Uploaded bytes are normalized (bounded size, fixed encoding) before they are
forwarded, so the oracle payload stays small even when the client skipped
resizing.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ecosort.application.classify.ports import ClassifierPort, ImageNormalizerPort
from ecosort.domain.value_objects import ClassificationResult, ImageSubject

logger = logging.getLogger(__name__)


@dataclass
class ClassifyImageRequest:
    """Image classification request DTO."""

    data: bytes
    mime_type: str
    dirty: bool = False


class ClassifyImageCommand:
    """Validate, normalize and classify an image."""

    def __init__(
        self,
        classifier: ClassifierPort,
        normalizer: ImageNormalizerPort | None = None,
    ):
        """Initialize.

        Args:
            classifier: classification capability
            normalizer: image normalizer; None forwards uploads unchanged
        """
        self._classifier = classifier
        self._normalizer = normalizer

    async def execute(self, request: ClassifyImageRequest) -> ClassificationResult:
        """Run the command.

        Raises:
            InvalidInputError: empty bytes or non-image media type
            DecodeError: bytes are not a decodable image
            OracleError: classifier failure
        """
        subject = ImageSubject(request.data, request.mime_type)

        if self._normalizer is not None:
            normalized = await asyncio.to_thread(self._normalizer.normalize, subject.data)
            logger.debug(
                "Image normalized",
                extra={
                    "original_bytes": len(subject.data),
                    "normalized_bytes": len(normalized.data),
                    "width": normalized.width,
                    "height": normalized.height,
                },
            )
            subject = ImageSubject(normalized.data, normalized.mime_type)

        logger.info(
            "Image classification requested",
            extra={
                "mime_type": subject.mime_type,
                "image_bytes": len(subject.data),
                "dirty": request.dirty,
            },
        )
        return await self._classifier.classify(subject, bool(request.dirty))
