"""Classify Commands."""

from ecosort.application.classify.commands.classify_image import (
    ClassifyImageCommand,
    ClassifyImageRequest,
)
from ecosort.application.classify.commands.classify_text import (
    ClassifyTextCommand,
    ClassifyTextRequest,
)

__all__ = [
    "ClassifyImageCommand",
    "ClassifyImageRequest",
    "ClassifyTextCommand",
    "ClassifyTextRequest",
]
