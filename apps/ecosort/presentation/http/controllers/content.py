"""Static Content Controller.

Read-only catalog data for clients: categories, learn topics, quick picks.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from ecosort.setup.dependencies import (
    GetCategoriesQueryDep,
    GetLearnTopicsQueryDep,
    GetQuickPicksQueryDep,
)

router = APIRouter(prefix="/api", tags=["content"])


class CategoryResponse(BaseModel):
    name: str
    label: str
    icon: str
    color: str


class LearnTopicResponse(BaseModel):
    title: str
    icon: str
    text: str


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(query: GetCategoriesQueryDep) -> list[CategoryResponse]:
    """Disposal categories with display metadata."""
    return [CategoryResponse(**vars(category)) for category in query.execute()]


@router.get("/learn", response_model=list[LearnTopicResponse])
async def list_learn_topics(query: GetLearnTopicsQueryDep) -> list[LearnTopicResponse]:
    return [LearnTopicResponse(**vars(topic)) for topic in query.execute()]


@router.get("/quick-picks", response_model=list[str])
async def list_quick_picks(query: GetQuickPicksQueryDep) -> list[str]:
    return query.execute()
