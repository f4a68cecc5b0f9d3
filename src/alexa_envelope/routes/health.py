"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings
from ..models.response import PROTOCOL_VERSION

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str | bool]:
    """Return service health status and the skill it answers for."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "protocol_version": PROTOCOL_VERSION,
        "skill_id_configured": bool(settings.skill_id),
    }
