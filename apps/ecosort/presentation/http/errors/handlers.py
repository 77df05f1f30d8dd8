"""Exception Handlers.

Domain/application exceptions are turned into ``{"error": message}`` bodies.
Oracle failures never expose the oracle's output; the detail stays in the
server log.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ecosort.application.common.exceptions import (
    ApplicationError,
    OracleContractError,
    OracleError,
    OriginRejectedError,
    PayloadTooLargeError,
    RateLimitedError,
)
from ecosort.domain.exceptions import DomainError, InvalidInputError

logger = logging.getLogger(__name__)

CLASSIFICATION_FAILED_MESSAGE = "Classification failed. Please try again."
INVALID_INPUT_MESSAGE = InvalidInputError().message


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(
            "Request validation failed",
            extra={
                "path": request.url.path,
                "fields": [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()],
            },
        )
        return error_response(400, INVALID_INPUT_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(PayloadTooLargeError)
    async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
        return error_response(413, exc.message)

    @app.exception_handler(OriginRejectedError)
    async def origin_rejected_handler(request: Request, exc: OriginRejectedError):
        return error_response(403, exc.message)

    @app.exception_handler(RateLimitedError)
    async def rate_limited_handler(request: Request, exc: RateLimitedError):
        headers = None
        if exc.retry_after is not None:
            headers = {"Retry-After": str(exc.retry_after)}
        return error_response(429, exc.message, headers=headers)

    @app.exception_handler(OracleError)
    async def oracle_error_handler(request: Request, exc: OracleError):
        extra = {
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "detail": exc.message,
        }
        if isinstance(exc, OracleContractError) and exc.raw_output is not None:
            extra["raw_preview"] = exc.raw_output[:200]
        logger.error("Classification failed", extra=extra)
        return error_response(500, CLASSIFICATION_FAILED_MESSAGE)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return error_response(400, exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        logger.error(
            "Unhandled application error",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return error_response(500, CLASSIFICATION_FAILED_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return error_response(500, "Internal server error")
