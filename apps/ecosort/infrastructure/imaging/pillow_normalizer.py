"""Pillow Image Normalizer - ImageNormalizerPort implementation.

Downscale-only resize to a bounded longest edge, re-encoded as WebP.
"""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from ecosort.application.classify.dto import NormalizedImage
from ecosort.application.classify.ports import ImageNormalizerPort
from ecosort.domain.exceptions import DecodeError

logger = logging.getLogger(__name__)

# ==========================================
# Output policy
# ==========================================

MAX_IMAGE_EDGE_PX = 640
OUTPUT_FORMAT = "WEBP"
OUTPUT_MIME_TYPE = "image/webp"
OUTPUT_QUALITY = 85


def scaled_size(width: int, height: int, max_edge: int = MAX_IMAGE_EDGE_PX) -> tuple[int, int]:
    """Target size that fits ``max_edge`` while keeping aspect ratio.

    Images already within bounds keep their size.
    """
    if width <= max_edge and height <= max_edge:
        return width, height
    ratio = min(max_edge / width, max_edge / height)
    return max(1, round(width * ratio)), max(1, round(height * ratio))


class PillowImageNormalizer(ImageNormalizerPort):
    """Normalize images with Pillow."""

    def __init__(
        self,
        max_edge: int = MAX_IMAGE_EDGE_PX,
        quality: int = OUTPUT_QUALITY,
    ):
        """Initialize.

        Args:
            max_edge: maximum length of the longer edge in pixels
            quality: WebP quality factor (0-100)
        """
        self._max_edge = max_edge
        self._quality = quality

    def normalize(self, data: bytes) -> NormalizedImage:
        image = self._decode(data)

        if image.mode in ("RGBA", "LA") or (
            image.mode == "P" and "transparency" in image.info
        ):
            image = image.convert("RGBA")
        elif image.mode != "RGB":
            image = image.convert("RGB")

        width, height = image.size
        target = scaled_size(width, height, self._max_edge)
        if target != (width, height):
            image = image.resize(target, Image.Resampling.LANCZOS)

        buffer = io.BytesIO()
        image.save(buffer, format=OUTPUT_FORMAT, quality=self._quality)
        encoded = buffer.getvalue()

        logger.debug(
            "Image normalized (source=%dx%d, target=%dx%d, bytes=%d)",
            width,
            height,
            target[0],
            target[1],
            len(encoded),
        )
        return NormalizedImage(
            data=encoded,
            mime_type=OUTPUT_MIME_TYPE,
            width=target[0],
            height=target[1],
        )

    @staticmethod
    def _decode(data: bytes) -> Image.Image:
        """Decode and apply EXIF orientation.

        Raises:
            DecodeError: not a decodable image
        """
        if not data:
            raise DecodeError()
        try:
            with Image.open(io.BytesIO(data)) as source:
                source.load()
                return ImageOps.exif_transpose(source)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            logger.info("Image decode failed: %s", e)
            raise DecodeError() from e
