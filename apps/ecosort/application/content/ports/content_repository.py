"""Content Repository Port - read-only educational content."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ContentRepository(ABC):
    """Source of the static category catalog, learn topics and quick picks."""

    @abstractmethod
    def get_categories(self) -> list[dict[str, Any]]:
        """Category display metadata (name, label, icon, color)."""
        ...

    @abstractmethod
    def get_learn_topics(self) -> list[dict[str, Any]]:
        """Learn topics (title, icon, text)."""
        ...

    @abstractmethod
    def get_quick_picks(self) -> list[str]:
        """Suggested example items."""
        ...
