"""LikeCounterProxy — turns one inbound HTTP request into a normalized response.

Handles method dispatch, itemId validation (query string or JSON body),
CORS headers and the mapping of every failure to a JSON error body.
``handle`` never raises: whatever goes wrong, the caller gets a well-formed
response with the CORS headers attached so browser preflight keeps working.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from pydantic import BaseModel, Field, ValidationError

from app.application.use_cases.like_counter import LikeCounterUseCase
from app.domain.errors import InternalError, InvalidRequest, LikeProxyError, MethodNotSupported
from app.domain.value_objects.enums import HttpMethod

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


class LikeRequestBody(BaseModel):
    item_id: str | None = Field(default=None, alias="itemId")


@dataclass
class LikeRequest:
    method: str
    query_item_id: str | None = None
    body: bytes | str | None = None


@dataclass
class ProxyResponse:
    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    @classmethod
    def from_payload(cls, status_code: int, payload: dict) -> ProxyResponse:
        headers = dict(CORS_HEADERS)
        headers["Content-Type"] = "application/json"
        return cls(status_code=status_code, body=json.dumps(payload), headers=headers)


class LikeCounterProxy:
    """Single entry point for like-count reads and increments."""

    def __init__(self, like_counter: LikeCounterUseCase):
        self._like_counter = like_counter

    async def handle(self, request: LikeRequest) -> ProxyResponse:
        try:
            return await self._dispatch(request)
        except LikeProxyError as e:
            if e.status_code >= 500:
                logger.warning("Like request failed (%d): %s", e.status_code, e.details or e.message)
            return ProxyResponse.from_payload(e.status_code, e.to_body())
        except Exception as e:
            logger.exception("Unexpected error handling %s like request", request.method)
            return ProxyResponse.from_payload(500, InternalError(str(e) or type(e).__name__).to_body())

    async def _dispatch(self, request: LikeRequest) -> ProxyResponse:
        method = (request.method or "").upper()

        if method == HttpMethod.OPTIONS:
            return ProxyResponse(status_code=200)

        if method == HttpMethod.GET:
            item_id = self._require_item_id(request.query_item_id)
            result = await self._like_counter.get_likes(item_id)
            return ProxyResponse.from_payload(200, result.to_dict())

        if method == HttpMethod.POST:
            item_id = self._require_item_id(
                request.query_item_id or self._body_item_id(request.body)
            )
            result = await self._like_counter.add_like(item_id)
            return ProxyResponse.from_payload(200, result.to_dict())

        raise MethodNotSupported(method)

    @staticmethod
    def _body_item_id(body: bytes | str | None) -> str | None:
        """Read ``itemId`` from a JSON object body; an empty body yields None.

        Invalid UTF-8 is rejected rather than replaced.
        """
        if body is None:
            return None
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InvalidRequest("Invalid JSON body") from e
        if not body.strip():
            return None
        try:
            return LikeRequestBody.model_validate_json(body).item_id
        except ValidationError as e:
            raise InvalidRequest("Invalid JSON body") from e

    @staticmethod
    def _require_item_id(item_id: str | None) -> str:
        if not item_id:
            raise InvalidRequest("itemId required")
        return item_id
