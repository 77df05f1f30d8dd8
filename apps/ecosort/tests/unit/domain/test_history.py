"""Session History & Score Tests."""

from __future__ import annotations

import pytest

from ecosort.domain.entities import SessionHistory, eco_score
from ecosort.domain.value_objects import ClassificationResult


def _result(category: str, co2: float) -> ClassificationResult:
    return ClassificationResult(category, "item", "reason", "fact", co2_saved_kg=co2)


class TestEcoScore:
    """eco_score() tests."""

    @pytest.mark.parametrize(
        ("co2", "expected"),
        [
            (0.0, 0),
            (0.04, 0),
            (0.05, 1),
            (0.25, 3),
            (0.26, 3),
            (0.45, 5),
            (4.7, 47),
            (10.0, 100),
            (250.0, 100),
        ],
    )
    def test_score(self, co2: float, expected: int) -> None:
        assert eco_score(co2) == expected


class TestSessionHistory:
    """SessionHistory tests."""

    def test_empty_stats(self) -> None:
        stats = SessionHistory().stats()
        assert stats.total_items == 0
        assert stats.co2_saved_kg == 0
        assert stats.score == 0
        assert stats.category_counts == {}

    def test_three_results(self) -> None:
        """Totals, CO2 sum and score over a small session."""
        history = SessionHistory()
        for category, co2 in [("recyclable", 0.5), ("compostable", 1.2), ("recyclable", 3.0)]:
            history.append(_result(category, co2))

        stats = history.stats()
        assert stats.total_items == 3
        assert stats.co2_saved_kg == pytest.approx(4.7)
        assert stats.score == 47
        assert stats.category_counts == {"recyclable": 2, "compostable": 1}

    def test_score_capped(self) -> None:
        history = SessionHistory()
        for _ in range(5):
            history.append(_result("reusable", 4.0))
        assert history.stats().score == 100

    def test_append_preserves_order(self) -> None:
        history = SessionHistory()
        first = history.append(_result("landfill", 0.0))
        second = history.append(_result("hazardous", 1.0))

        assert [entry.entry_id for entry in history] == [first.entry_id, second.entry_id]
        assert len(history) == 2
        assert first.entry_id != second.entry_id

    def test_entries_is_snapshot(self) -> None:
        history = SessionHistory()
        history.append(_result("landfill", 0.0))
        snapshot = history.entries
        history.append(_result("landfill", 0.0))
        assert len(snapshot) == 1

    def test_half_point_rounds_up(self) -> None:
        history = SessionHistory()
        history.append(_result("compostable", 0.05))
        assert history.stats().score == 1
