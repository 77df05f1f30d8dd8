"""Session History Entities.

History is client-held and ephemeral: entries are appended once, never
mutated, and disappear with the session object.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterator
from uuid import uuid4

from ecosort.domain.value_objects import ClassificationResult

SCORE_MULTIPLIER = 10
SCORE_CAP = 100


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One classification result recorded in a session."""

    result: ClassificationResult
    entry_id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True, slots=True)
class EcoStats:
    """Aggregate view over a session history.

    Attributes:
        total_items: number of classified items
        co2_saved_kg: cumulative CO2 saved
        score: eco score, capped at SCORE_CAP
        category_counts: items per category value
    """

    total_items: int
    co2_saved_kg: float
    score: int
    category_counts: dict[str, int]


def eco_score(co2_saved_kg: float) -> int:
    """Derive the display score from cumulative CO2 saved.

    Halves round up (0.05 kg scores 1), not to even.
    """
    return min(math.floor(co2_saved_kg * SCORE_MULTIPLIER + 0.5), SCORE_CAP)


class SessionHistory:
    """Append-only in-memory sequence of HistoryEntry."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def append(self, result: ClassificationResult) -> HistoryEntry:
        entry = HistoryEntry(result=result)
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def stats(self) -> EcoStats:
        """Compute totals, CO2 and score. Pure read of the entries."""
        co2 = sum(entry.result.co2_saved_kg for entry in self._entries)
        counts = Counter(entry.result.category.value for entry in self._entries)
        return EcoStats(
            total_items=len(self._entries),
            co2_saved_kg=co2,
            score=eco_score(co2),
            category_counts=dict(counts),
        )
