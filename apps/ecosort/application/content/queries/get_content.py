"""Static content queries."""

from __future__ import annotations

from dataclasses import dataclass

from ecosort.application.content.ports import ContentRepository
from ecosort.domain.enums import WasteCategory


@dataclass
class CategoryInfo:
    """Category display DTO."""

    name: str
    label: str
    icon: str
    color: str


@dataclass
class LearnTopic:
    """Learn topic DTO."""

    title: str
    icon: str
    text: str


class GetCategoriesQuery:
    """List the disposal categories with display metadata."""

    def __init__(self, repository: ContentRepository):
        self._repository = repository

    def execute(self) -> list[CategoryInfo]:
        """Return one entry per WasteCategory, in enum order.

        Catalog entries for unknown names are ignored; categories missing from
        the catalog fall back to their value as label.
        """
        by_name = {cat.get("name"): cat for cat in self._repository.get_categories()}
        categories = []
        for category in WasteCategory:
            raw = by_name.get(category.value, {})
            categories.append(
                CategoryInfo(
                    name=category.value,
                    label=raw.get("label", category.value.title()),
                    icon=raw.get("icon", ""),
                    color=raw.get("color", ""),
                )
            )
        return categories


class GetLearnTopicsQuery:
    """List the learn topics."""

    def __init__(self, repository: ContentRepository):
        self._repository = repository

    def execute(self) -> list[LearnTopic]:
        return [
            LearnTopic(
                title=topic.get("title", ""),
                icon=topic.get("icon", ""),
                text=topic.get("text", ""),
            )
            for topic in self._repository.get_learn_topics()
        ]


class GetQuickPicksQuery:
    """List suggested example items."""

    def __init__(self, repository: ContentRepository):
        self._repository = repository

    def execute(self) -> list[str]:
        return list(self._repository.get_quick_picks())
