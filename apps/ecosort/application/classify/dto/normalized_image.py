"""Normalized Image DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NormalizedImage:
    """Re-encoded image bounded in size.

    Attributes:
        data: encoded bytes
        mime_type: media type of ``data``
        width: pixel width after resizing
        height: pixel height after resizing
    """

    data: bytes
    mime_type: str
    width: int
    height: int

    def __repr__(self) -> str:
        return (
            f"NormalizedImage(mime_type={self.mime_type!r}, "
            f"size={len(self.data)}, {self.width}x{self.height})"
        )
