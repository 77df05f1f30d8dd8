"""Classify DTOs."""

from ecosort.application.classify.dto.instruction import (
    ClassificationInstruction,
    ImagePart,
)
from ecosort.application.classify.dto.normalized_image import NormalizedImage

__all__ = [
    "ClassificationInstruction",
    "ImagePart",
    "NormalizedImage",
]
