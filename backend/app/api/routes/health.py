"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if the process is up
"""

from fastapi import APIRouter, status

from app.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.version,
    }
