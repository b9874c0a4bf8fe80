"""Function-as-a-service entry point.

``handler(event, context)`` accepts the API-gateway style event used by
Netlify Functions and AWS Lambda (REST and HTTP API payloads) and returns
``{statusCode, headers, body}``. Malformed events still get a JSON error
response with the CORS headers attached; nothing is raised to the host.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging

from app.application.use_cases.like_proxy import LikeCounterProxy, LikeRequest, ProxyResponse
from app.domain.errors import InternalError, InvalidRequest, LikeProxyError
from app.infrastructure.api.dependencies import build_like_proxy

logger = logging.getLogger(__name__)

_proxy: LikeCounterProxy | None = None


def _get_proxy() -> LikeCounterProxy:
    global _proxy
    if _proxy is None:
        _proxy = build_like_proxy()
    return _proxy


def _mapping(value) -> dict:
    """Treat a missing/null section as empty; reject any other non-object."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidRequest("Malformed request event")
    return value


def event_to_request(event) -> LikeRequest:
    """Build a LikeRequest from a gateway event.

    Raises InvalidRequest when the event or one of its sections is not an object.
    """
    event = _mapping(event)
    http = _mapping(_mapping(event.get("requestContext")).get("http"))
    method = event.get("httpMethod") or http.get("method") or ""
    query = _mapping(event.get("queryStringParameters"))
    item_id = query.get("itemId")
    body = event.get("body")

    if body and event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body)
        except (binascii.Error, ValueError, TypeError):
            # left as-is; the proxy rejects it as an invalid JSON body
            logger.warning("Could not decode base64 request body")

    return LikeRequest(
        method=method if isinstance(method, str) else "",
        query_item_id=item_id if isinstance(item_id, str) else None,
        body=body if isinstance(body, (bytes, str)) else None,
    )


async def _handle(event, proxy: LikeCounterProxy | None) -> ProxyResponse:
    try:
        request = event_to_request(event)
        return await (proxy or _get_proxy()).handle(request)
    except LikeProxyError as e:
        logger.warning("Rejected function event: %s", e.message)
        return ProxyResponse.from_payload(e.status_code, e.to_body())
    except Exception as e:
        logger.exception("Unexpected error handling function event")
        return ProxyResponse.from_payload(500, InternalError(str(e) or type(e).__name__).to_body())


def handler(event, context, proxy: LikeCounterProxy | None = None):
    result = asyncio.run(_handle(event, proxy))
    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": result.body,
    }
