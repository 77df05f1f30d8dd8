"""Image Normalizer Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecosort.application.classify.dto import NormalizedImage


class ImageNormalizerPort(ABC):
    """Bound an image's pixel size and re-encode it for transport."""

    @abstractmethod
    def normalize(self, data: bytes) -> NormalizedImage:
        """Downscale (never upscale) and re-encode.

        Raises:
            DecodeError: ``data`` is not a decodable image
        """
        ...
