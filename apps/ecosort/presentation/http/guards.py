"""Route guards for the classification endpoints.

Origin policy runs before the rate limiter.
"""

from __future__ import annotations

import logging
import time
from urllib.parse import urlsplit

from fastapi import Request

from ecosort.application.common.exceptions import OriginRejectedError, RateLimitedError
from ecosort.setup.config import Settings
from ecosort.setup.dependencies import RateLimiterDep, SettingsDep

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def client_identity(request: Request, settings: Settings) -> str:
    """Rate-limit key for the caller.

    The first X-Forwarded-For hop is only honoured when the service is
    configured to sit behind a trusted proxy.
    """
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    if request.client is None:
        return UNKNOWN_CLIENT
    return request.client.host


def is_origin_allowed(origin: str | None, host: str | None, allowed: list[str]) -> bool:
    """Origin check.

    No Origin header (curl, server to server) and same-origin browser
    requests are accepted; everything else must be on the allow-list.
    """
    if not origin:
        return True
    if origin in allowed:
        return True
    return bool(host) and urlsplit(origin).netloc == host


async def enforce_origin_policy(request: Request, settings: SettingsDep) -> None:
    origin = request.headers.get("origin")
    if not is_origin_allowed(origin, request.headers.get("host"), settings.allowed_origins):
        logger.warning(
            "Origin rejected",
            extra={"origin": origin, "path": request.url.path},
        )
        raise OriginRejectedError(origin or "")


async def enforce_rate_limit(
    request: Request,
    settings: SettingsDep,
    limiter: RateLimiterDep,
) -> None:
    status = await limiter.check_and_consume(client_identity(request, settings))
    if not status.is_allowed:
        raise RateLimitedError(retry_after=max(0, status.reset_at - int(time.time())))
