"""Pillow Image Normalizer Tests."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from ecosort.domain.exceptions import DecodeError
from ecosort.infrastructure.imaging import (
    MAX_IMAGE_EDGE_PX,
    OUTPUT_MIME_TYPE,
    PillowImageNormalizer,
    scaled_size,
)


def _open(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


class TestScaledSize:
    """scaled_size() tests."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            ((1280, 960), (640, 480)),
            ((960, 1280), (480, 640)),
            ((4000, 10), (640, 2)),
            ((10000, 1), (640, 1)),
            ((640, 640), (640, 640)),
            ((100, 50), (100, 50)),
        ],
    )
    def test_bounds(self, size: tuple[int, int], expected: tuple[int, int]) -> None:
        assert scaled_size(*size) == expected


class TestPillowImageNormalizer:
    """PillowImageNormalizer.normalize() tests."""

    @pytest.mark.parametrize("size", [(1920, 1080), (800, 3000), (641, 641)])
    def test_large_images_fit_bound(self, make_image, size: tuple[int, int]) -> None:
        normalized = PillowImageNormalizer().normalize(make_image(*size))

        assert max(normalized.width, normalized.height) <= MAX_IMAGE_EDGE_PX
        assert max(normalized.width, normalized.height) == MAX_IMAGE_EDGE_PX
        assert _open(normalized.data).size == (normalized.width, normalized.height)

    def test_small_image_not_upscaled(self, make_image) -> None:
        normalized = PillowImageNormalizer().normalize(make_image(120, 80))
        assert (normalized.width, normalized.height) == (120, 80)

    def test_output_is_webp(self, make_image) -> None:
        normalized = PillowImageNormalizer().normalize(make_image(64, 64, fmt="JPEG"))

        assert normalized.mime_type == OUTPUT_MIME_TYPE
        assert _open(normalized.data).format == "WEBP"

    @pytest.mark.parametrize("mode", ["RGBA", "L", "P"])
    def test_other_modes(self, make_image, mode: str) -> None:
        normalized = PillowImageNormalizer().normalize(make_image(50, 50, mode=mode))
        assert _open(normalized.data).mode in ("RGB", "RGBA")

    def test_custom_edge(self, make_image) -> None:
        normalized = PillowImageNormalizer(max_edge=100).normalize(make_image(400, 200))
        assert (normalized.width, normalized.height) == (100, 50)

    @pytest.mark.parametrize("data", [b"", b"definitely not an image", b"\x89PNG\r\n\x1a\n\x00"])
    def test_undecodable(self, data: bytes) -> None:
        with pytest.raises(DecodeError):
            PillowImageNormalizer().normalize(data)
