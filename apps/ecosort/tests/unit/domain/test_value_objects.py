"""Domain Value Object Tests."""

from __future__ import annotations

import pytest

from ecosort.domain.enums import WasteCategory
from ecosort.domain.exceptions import InvalidInputError
from ecosort.domain.value_objects import ClassificationResult, ImageSubject, TextSubject


class TestWasteCategory:
    """WasteCategory tests."""

    def test_values_in_declaration_order(self) -> None:
        assert WasteCategory.values() == (
            "recyclable",
            "compostable",
            "hazardous",
            "landfill",
            "reusable",
        )

    def test_parse_ignores_case_and_whitespace(self) -> None:
        assert WasteCategory.parse("  Hazardous ") is WasteCategory.HAZARDOUS

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            WasteCategory.parse("donate")


class TestTextSubject:
    """TextSubject tests."""

    def test_item_kept_verbatim(self) -> None:
        assert TextSubject("  pizza box ").item == "  pizza box "

    @pytest.mark.parametrize("item", ["", "   ", "\n\t"])
    def test_blank_item_rejected(self, item: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            TextSubject(item)
        assert exc_info.value.message == "Invalid input"

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            TextSubject(42)  # type: ignore[arg-type]


class TestImageSubject:
    """ImageSubject tests."""

    def test_mime_type_lowercased(self) -> None:
        subject = ImageSubject(b"\x89PNG", "Image/PNG")
        assert subject.mime_type == "image/png"

    def test_empty_data_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ImageSubject(b"", "image/png")
        assert exc_info.value.message == "Missing image data"

    def test_non_image_mime_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ImageSubject(b"%PDF", "application/pdf")
        assert "application/pdf" in exc_info.value.message

    def test_repr_hides_payload(self) -> None:
        subject = ImageSubject(b"x" * 1000, "image/webp")
        assert "size=1000" in repr(subject)
        assert "xxx" not in repr(subject)


class TestClassificationResult:
    """ClassificationResult tests."""

    def test_to_dict_uses_wire_values(self) -> None:
        result = ClassificationResult(
            category=WasteCategory.RECYCLABLE,
            item_detected="can",
            reason="Aluminium",
            eco_fact="Infinitely recyclable",
            co2_saved_kg=0.2,
        )
        data = result.to_dict()
        assert data["category"] == "recyclable"
        assert data["contamination_warning"] == ""
        assert ClassificationResult.from_dict(data) == result

    def test_category_coerced_from_string(self) -> None:
        result = ClassificationResult("landfill", "chip bag", "Multi-layer film", "")
        assert result.category is WasteCategory.LANDFILL

    def test_negative_co2_rejected(self) -> None:
        with pytest.raises(ValueError):
            ClassificationResult("landfill", "x", "y", "z", co2_saved_kg=-0.1)

    def test_frozen(self) -> None:
        result = ClassificationResult("reusable", "jar", "Refill it", "")
        with pytest.raises(AttributeError):
            result.reason = "changed"  # type: ignore[misc]
