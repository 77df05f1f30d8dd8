"""Domain Entities."""

from ecosort.domain.entities.history import (
    EcoStats,
    HistoryEntry,
    SessionHistory,
    eco_score,
)

__all__ = [
    "EcoStats",
    "HistoryEntry",
    "SessionHistory",
    "eco_score",
]
