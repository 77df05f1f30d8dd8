"""Health Check Controller."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/api/health", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness check."""
    return "OK"
