"""Request boundary exceptions (limits and policies)."""

from ecosort.application.common.exceptions.base import ApplicationError

RATE_LIMIT_MESSAGE = "Rate limit reached. Please wait a minute."


class PayloadTooLargeError(ApplicationError):
    """Request body exceeds the configured ceiling."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        super().__init__("Request body too large")


class OriginRejectedError(ApplicationError):
    """Request origin is not on the allow-list."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__("Origin not allowed")


class RateLimitedError(ApplicationError):
    """Client exceeded its request budget for the current window."""

    def __init__(self, retry_after: int | None = None) -> None:
        self.retry_after = retry_after
        super().__init__(RATE_LIMIT_MESSAGE)
