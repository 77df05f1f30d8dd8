"""HTTP middleware."""

from ecosort.presentation.http.middleware.body_limit import BodySizeLimitMiddleware
from ecosort.presentation.http.middleware.cors import JSONErrorCORSMiddleware
from ecosort.presentation.http.middleware.request_logging import RequestLoggingMiddleware
from ecosort.presentation.http.middleware.security_headers import (
    SECURITY_HEADERS,
    SecurityHeadersMiddleware,
)

__all__ = [
    "BodySizeLimitMiddleware",
    "JSONErrorCORSMiddleware",
    "RequestLoggingMiddleware",
    "SECURITY_HEADERS",
    "SecurityHeadersMiddleware",
]
