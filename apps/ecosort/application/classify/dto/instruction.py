"""Classification Instruction DTO - payload handed to the oracle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ImagePart:
    """Image attached to an instruction as a separate typed part."""

    data: bytes
    mime_type: str

    def __repr__(self) -> str:
        return f"ImagePart(mime_type={self.mime_type!r}, size={len(self.data)})"


@dataclass(frozen=True, slots=True)
class ClassificationInstruction:
    """Instruction text plus optional image part.

    Attributes:
        text: full instruction prompt (rules, output contract, target)
        image: image to classify, None for text subjects
    """

    text: str
    image: ImagePart | None = None
