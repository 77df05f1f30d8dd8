"""Domain Value Objects."""

from ecosort.domain.value_objects.classification_result import ClassificationResult
from ecosort.domain.value_objects.subject import (
    ClassificationSubject,
    ImageSubject,
    TextSubject,
)

__all__ = [
    "ClassificationResult",
    "ClassificationSubject",
    "ImageSubject",
    "TextSubject",
]
