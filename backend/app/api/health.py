"""
backend/app/api/health.py - health check
───────────────────────────────────────────────
"""

from fastapi import APIRouter

from backend.app.config import settings
from backend.app.models import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service status and version."""
    return HealthResponse(status="ok", version=settings.APP_VERSION)
