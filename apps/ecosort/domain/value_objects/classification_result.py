"""Classification Result Value Object."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ecosort.domain.enums import WasteCategory


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Validated classification of one waste item.

    Attributes:
        category: one of the five disposal categories
        item_detected: item name as recognised by the oracle
        reason: short justification for the category
        eco_fact: environmental fact about the item
        contamination_warning: soiling advice (may be empty)
        wishcycling_alert: wishcycling warning (may be empty)
        disclaimer: local-rules disclaimer (may be empty)
        co2_saved_kg: estimated CO2 saved by correct disposal, >= 0
    """

    category: WasteCategory
    item_detected: str
    reason: str
    eco_fact: str
    contamination_warning: str = ""
    wishcycling_alert: str = ""
    disclaimer: str = ""
    co2_saved_kg: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.category, WasteCategory):
            object.__setattr__(self, "category", WasteCategory(self.category))
        if self.co2_saved_kg < 0:
            raise ValueError("co2_saved_kg must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape (API response)."""
        data = asdict(self)
        data["category"] = self.category.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClassificationResult:
        """Rebuild from the wire shape."""
        return cls(
            category=WasteCategory.parse(data["category"]),
            item_detected=data.get("item_detected", ""),
            reason=data.get("reason", ""),
            eco_fact=data.get("eco_fact", ""),
            contamination_warning=data.get("contamination_warning", ""),
            wishcycling_alert=data.get("wishcycling_alert", ""),
            disclaimer=data.get("disclaimer", ""),
            co2_saved_kg=float(data.get("co2_saved_kg", 0.0)),
        )
