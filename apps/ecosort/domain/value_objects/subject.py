"""Classification Subject Value Objects.

A subject is either a typed item description or an image payload, never both.
Each variant validates itself on construction, so code holding a subject never
needs to re-check for missing fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ecosort.domain.exceptions import InvalidInputError

IMAGE_MIME_PREFIX = "image/"


@dataclass(frozen=True, slots=True)
class TextSubject:
    """Item described in words.

    Attributes:
        item: item description exactly as the caller sent it
    """

    item: str

    def __post_init__(self) -> None:
        if not isinstance(self.item, str) or not self.item.strip():
            raise InvalidInputError("Invalid input")


@dataclass(frozen=True, slots=True)
class ImageSubject:
    """Item shown in a photo.

    Attributes:
        data: encoded image bytes
        mime_type: declared media type (image/*)
    """

    data: bytes
    mime_type: str

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)) or not self.data:
            raise InvalidInputError("Missing image data")
        if not isinstance(self.mime_type, str) or not self.mime_type.strip():
            raise InvalidInputError("Missing image data")
        mime_type = self.mime_type.strip().lower()
        if not mime_type.startswith(IMAGE_MIME_PREFIX):
            raise InvalidInputError(f"Unsupported media type: {mime_type}")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "mime_type", mime_type)

    def __repr__(self) -> str:
        return f"ImageSubject(mime_type={self.mime_type!r}, size={len(self.data)})"


ClassificationSubject = Union[TextSubject, ImageSubject]
