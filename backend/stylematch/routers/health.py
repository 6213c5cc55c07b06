"""
Health check router
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from stylematch.config import Settings
from stylematch.dependencies import get_app_settings
from stylematch.models.analysis import HealthResponse, ServiceStatus

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Liveness plus whether the upstream credentials are configured (presence only)"""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        services=ServiceStatus(
            openai=settings.is_openai_configured,
            replicate=settings.is_replicate_configured,
        ),
    )
