"""Waste Category Enum."""

from __future__ import annotations

from enum import Enum


class WasteCategory(str, Enum):
    """Disposal category assigned to a waste item."""

    RECYCLABLE = "recyclable"
    COMPOSTABLE = "compostable"
    HAZARDOUS = "hazardous"
    LANDFILL = "landfill"
    REUSABLE = "reusable"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Legal wire values, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, raw: str) -> "WasteCategory":
        """Parse a wire value, ignoring surrounding whitespace and case.

        Raises:
            ValueError: value is not one of the five categories
        """
        return cls(raw.strip().lower())
