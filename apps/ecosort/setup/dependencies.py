"""EcoSort Dependencies - FastAPI Dependency Injection."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from ecosort.application.classify.commands import (
    ClassifyImageCommand,
    ClassifyTextCommand,
)
from ecosort.application.classify.ports import (
    ClassifierPort,
    ImageNormalizerPort,
    OraclePort,
    RateLimitConfig,
    RateLimiterPort,
)
from ecosort.application.classify.services import OracleGateway
from ecosort.application.content.ports import ContentRepository
from ecosort.application.content.queries import (
    GetCategoriesQuery,
    GetLearnTopicsQuery,
    GetQuickPicksQuery,
)
from ecosort.infrastructure.content import YamlContentRepository
from ecosort.infrastructure.imaging import PillowImageNormalizer
from ecosort.infrastructure.llm import GeminiOracle, RetryingOracle
from ecosort.infrastructure.ratelimit import InMemoryRateLimiter, RedisRateLimiter
from ecosort.setup.config import Settings, get_settings

# ─────────────────────────────────────────────────────────────────────────────
# Infrastructure Dependencies
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_oracle() -> OraclePort:
    """Gemini oracle, wrapped in a retry policy when retries are configured."""
    settings = get_settings()
    oracle: OraclePort = GeminiOracle(
        api_key=settings.gemini_api_key.get_secret_value(),
        model=settings.gemini_model,
        temperature=settings.oracle_temperature,
        max_output_tokens=settings.oracle_max_output_tokens,
        timeout_seconds=settings.oracle_timeout_seconds,
    )
    if settings.oracle_max_retries > 0:
        oracle = RetryingOracle(
            oracle,
            max_retries=settings.oracle_max_retries,
            backoff_factor=settings.oracle_retry_backoff,
        )
    return oracle


@lru_cache
def get_image_normalizer() -> ImageNormalizerPort | None:
    """Image normalizer, or None when upload normalization is disabled."""
    if not get_settings().normalize_uploads:
        return None
    return PillowImageNormalizer()


@lru_cache
def get_rate_limiter() -> RateLimiterPort:
    """Rate limiter for the classification routes."""
    settings = get_settings()
    config = RateLimitConfig(
        limit=settings.rate_limit_per_minute,
        window_seconds=settings.rate_limit_window_seconds,
    )
    if settings.rate_limit_backend == "redis":
        return RedisRateLimiter(
            Redis.from_url(settings.redis_url, decode_responses=True),
            config,
        )
    return InMemoryRateLimiter(config)


@lru_cache
def get_content_repository() -> ContentRepository:
    return YamlContentRepository()


# ─────────────────────────────────────────────────────────────────────────────
# Application Dependencies (Commands / Queries)
# ─────────────────────────────────────────────────────────────────────────────


def get_classifier(
    oracle: Annotated[OraclePort, Depends(get_oracle)],
) -> ClassifierPort:
    return OracleGateway(oracle)


def get_classify_text_command(
    classifier: Annotated[ClassifierPort, Depends(get_classifier)],
) -> ClassifyTextCommand:
    return ClassifyTextCommand(classifier)


def get_classify_image_command(
    classifier: Annotated[ClassifierPort, Depends(get_classifier)],
    normalizer: Annotated[ImageNormalizerPort | None, Depends(get_image_normalizer)],
) -> ClassifyImageCommand:
    return ClassifyImageCommand(classifier, normalizer)


def get_categories_query(
    repository: Annotated[ContentRepository, Depends(get_content_repository)],
) -> GetCategoriesQuery:
    return GetCategoriesQuery(repository)


def get_learn_topics_query(
    repository: Annotated[ContentRepository, Depends(get_content_repository)],
) -> GetLearnTopicsQuery:
    return GetLearnTopicsQuery(repository)


def get_quick_picks_query(
    repository: Annotated[ContentRepository, Depends(get_content_repository)],
) -> GetQuickPicksQuery:
    return GetQuickPicksQuery(repository)


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
RateLimiterDep = Annotated[RateLimiterPort, Depends(get_rate_limiter)]
ClassifyTextCommandDep = Annotated[ClassifyTextCommand, Depends(get_classify_text_command)]
ClassifyImageCommandDep = Annotated[ClassifyImageCommand, Depends(get_classify_image_command)]
GetCategoriesQueryDep = Annotated[GetCategoriesQuery, Depends(get_categories_query)]
GetLearnTopicsQueryDep = Annotated[GetLearnTopicsQuery, Depends(get_learn_topics_query)]
GetQuickPicksQueryDep = Annotated[GetQuickPicksQuery, Depends(get_quick_picks_query)]
