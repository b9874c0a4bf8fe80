"""Like endpoints — read and increment like counts of CMS items.

The route accepts every method and leaves dispatch to LikeCounterProxy, so
405 and preflight answers carry the same CORS headers as everything else.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from app.application.use_cases.like_proxy import LikeCounterProxy, LikeRequest
from app.infrastructure.api.dependencies import get_like_proxy

router = APIRouter(prefix="/likes", tags=["likes"])

ALL_METHODS = ["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE", "HEAD"]


@router.api_route("", methods=ALL_METHODS)
async def likes(request: Request, proxy: LikeCounterProxy = Depends(get_like_proxy)):
    """Read (GET) or increment (POST) the like count of ``itemId``."""
    body = await request.body() if request.method == "POST" else None
    result = await proxy.handle(
        LikeRequest(
            method=request.method,
            query_item_id=request.query_params.get("itemId"),
            body=body,
        )
    )
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )
