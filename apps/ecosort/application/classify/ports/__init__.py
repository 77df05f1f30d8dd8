"""Classify Ports (ABC).

Infrastructure provides the implementations.
"""

from ecosort.application.classify.ports.classifier import ClassifierPort
from ecosort.application.classify.ports.image_normalizer import ImageNormalizerPort
from ecosort.application.classify.ports.oracle import OraclePort
from ecosort.application.classify.ports.rate_limiter import (
    RateLimitConfig,
    RateLimiterPort,
    RateLimitStatus,
)

__all__ = [
    "ClassifierPort",
    "ImageNormalizerPort",
    "OraclePort",
    "RateLimitConfig",
    "RateLimitStatus",
    "RateLimiterPort",
]
