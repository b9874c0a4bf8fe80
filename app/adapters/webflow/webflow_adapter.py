"""Webflow CMS adapter — implements ItemStorePort over the v2 REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.ports.item_store_port import ItemStorePort
from app.config import Settings
from app.domain.entities.collection_item import CollectionItem
from app.domain.errors import InternalError, UpstreamError

logger = logging.getLogger(__name__)


class WebflowItemStore(ItemStorePort):
    """Reads and patches items of a single Webflow collection.

    The bearer token and collection id come from Settings and stay
    server-side. Pass ``client`` to reuse a shared httpx.AsyncClient
    (tests hand in one built on httpx.MockTransport); otherwise a
    client is opened per call.
    """

    def __init__(self, config: Settings, client: httpx.AsyncClient | None = None):
        self._base_url = config.webflow_api_url.rstrip("/")
        self._token = config.webflow_api_token
        self._collection_id = config.webflow_collection_id
        self._timeout = config.http_timeout
        self._client = client

        if not self._token:
            logger.warning("Webflow API token is not set. Upstream calls will be rejected.")

    def item_url(self, item_id: str) -> str:
        return f"{self._base_url}/collections/{self._collection_id}/items/{item_id}"

    async def get_item(self, item_id: str) -> CollectionItem:
        response = await self._send("GET", item_id)

        if not response.is_success:
            logger.warning("Webflow read failed for item '%s': %d", item_id, response.status_code)
            raise UpstreamError(
                response.status_code,
                f"Webflow API error: {response.status_code}",
            )

        try:
            data = response.json()
        except ValueError as e:
            raise InternalError(f"Unreadable Webflow response: {e}") from e

        return self._to_item(item_id, data)

    async def update_fields(self, item_id: str, fields: dict[str, Any]) -> None:
        response = await self._send(
            "PATCH",
            item_id,
            json={"fieldData": fields},
            headers={"content-type": "application/json"},
        )

        if not response.is_success:
            logger.warning(
                "Webflow update failed for item '%s': %d %s",
                item_id, response.status_code, response.text,
            )
            raise UpstreamError(
                response.status_code,
                f"Webflow update error: {response.status_code} - {response.text}",
            )

    async def _send(self, method: str, item_id: str, **kwargs: Any) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "accept": "application/json",
            **kwargs.pop("headers", {}),
        }
        try:
            if self._client is not None:
                return await self._client.request(
                    method, self.item_url(item_id), headers=headers, timeout=self._timeout, **kwargs
                )
            async with httpx.AsyncClient() as client:
                return await client.request(
                    method, self.item_url(item_id), headers=headers, timeout=self._timeout, **kwargs
                )
        except httpx.HTTPError as e:
            logger.warning("Webflow %s request for item '%s' failed: %s", method, item_id, e)
            raise UpstreamError(None, f"Webflow request failed: {e}") from e

    @staticmethod
    def _to_item(item_id: str, data: Any) -> CollectionItem:
        """Map the API payload to a CollectionItem.

        A payload without a ``fieldData`` object is treated as an item with
        no fields, which the coercion rule turns into zero likes.
        """
        if not isinstance(data, dict):
            return CollectionItem(id=item_id)
        field_data = data.get("fieldData")
        return CollectionItem(
            id=str(data.get("id") or item_id),
            field_data=field_data if isinstance(field_data, dict) else {},
        )
