"""Like counter proxy — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.api.routes_likes import router as likes_router

logger = logging.getLogger(__name__)

if settings.debug:
    logging.basicConfig(level=logging.DEBUG)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.is_store_configured():
        logger.info(
            "Proxying likes for collection %s (field '%s')",
            settings.webflow_collection_id, settings.like_count_field,
        )
    else:
        logger.warning("WEBFLOW_API_TOKEN / WEBFLOW_COLLECTION_ID not set")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Like counter proxy",
        description="Reads and increments like counts of Webflow CMS items",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS headers are set by LikeCounterProxy on every response, errors included.
    app.include_router(health_router, prefix="/api")
    app.include_router(likes_router, prefix="/api")

    return app


app = create_app()
