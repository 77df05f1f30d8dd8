"""Application exceptions."""

from ecosort.application.common.exceptions.base import ApplicationError
from ecosort.application.common.exceptions.boundary import (
    RATE_LIMIT_MESSAGE,
    OriginRejectedError,
    PayloadTooLargeError,
    RateLimitedError,
)
from ecosort.application.common.exceptions.oracle import (
    OracleContractError,
    OracleError,
    OracleRefusalError,
    OracleUnavailableError,
)

__all__ = [
    "ApplicationError",
    "OracleContractError",
    "OracleError",
    "OracleRefusalError",
    "OracleUnavailableError",
    "OriginRejectedError",
    "PayloadTooLargeError",
    "RATE_LIMIT_MESSAGE",
    "RateLimitedError",
]
