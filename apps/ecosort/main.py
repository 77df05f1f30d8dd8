"""EcoSort API Main Application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ecosort.presentation.http.controllers import (
    classify_router,
    content_router,
    health_router,
)
from ecosort.presentation.http.errors import register_exception_handlers
from ecosort.presentation.http.middleware import (
    BodySizeLimitMiddleware,
    JSONErrorCORSMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from ecosort.setup.config import Settings, get_settings
from ecosort.setup.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: service settings; defaults to the cached environment settings
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Starting {settings.service_name} v{settings.service_version}",
            extra={
                "model": settings.gemini_model,
                "rate_limit_per_minute": settings.rate_limit_per_minute,
                "rate_limit_backend": settings.rate_limit_backend,
                "allowed_origins": settings.allowed_origins,
            },
        )
        yield
        logger.info(f"Shutting down {settings.service_name}")

    app = FastAPI(
        title="EcoSort API",
        description="Waste classification backed by Gemini",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # Innermost first: body ceiling → security headers → CORS → request log
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        JSONErrorCORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(classify_router)
    app.include_router(content_router)

    return app


settings = get_settings()
configure_logging(
    service_name=settings.service_name,
    service_version=settings.service_version,
    environment=settings.environment,
    log_level=settings.log_level,
    json_format=settings.log_format == "json",
)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
