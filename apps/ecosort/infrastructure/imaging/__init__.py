"""Imaging adapters."""

from ecosort.infrastructure.imaging.pillow_normalizer import (
    MAX_IMAGE_EDGE_PX,
    OUTPUT_MIME_TYPE,
    OUTPUT_QUALITY,
    PillowImageNormalizer,
    scaled_size,
)

__all__ = [
    "MAX_IMAGE_EDGE_PX",
    "OUTPUT_MIME_TYPE",
    "OUTPUT_QUALITY",
    "PillowImageNormalizer",
    "scaled_size",
]
