"""Content Queries."""

from ecosort.application.content.queries.get_content import (
    CategoryInfo,
    GetCategoriesQuery,
    GetLearnTopicsQuery,
    GetQuickPicksQuery,
    LearnTopic,
)

__all__ = [
    "CategoryInfo",
    "GetCategoriesQuery",
    "GetLearnTopicsQuery",
    "GetQuickPicksQuery",
    "LearnTopic",
]
