"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.config import Settings
from app.infrastructure.api.dependencies import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(config: Settings = Depends(get_settings)):
    """Report whether the Webflow credentials are configured (no upstream call)."""
    store_status = "configured" if config.is_store_configured() else "missing credentials"

    return {
        "status": "ok" if config.is_store_configured() else "degraded",
        "store": store_status,
        "likeField": config.like_count_field,
        "service": "Like counter proxy",
    }
