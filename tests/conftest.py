"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio

import pytest

from app.application.ports.item_store_port import ItemStorePort
from app.application.use_cases.like_counter import LikeCounterUseCase
from app.application.use_cases.like_proxy import LikeCounterProxy
from app.domain.entities.collection_item import CollectionItem
from app.domain.errors import UpstreamError

LIKE_FIELD = "like-count"


class FakeItemStore(ItemStorePort):
    """In-memory item store that records every call."""

    def __init__(self, items: dict[str, dict] | None = None):
        self.items: dict[str, dict] = items if items is not None else {}
        self.reads: list[str] = []
        self.updates: list[tuple[str, dict]] = []
        self.fail_read_status: int | None = None
        self.fail_update_status: int | None = None
        self.yield_after_read = False

    async def get_item(self, item_id):
        self.reads.append(item_id)
        if self.fail_read_status is not None:
            raise UpstreamError(self.fail_read_status, f"Webflow API error: {self.fail_read_status}")
        if item_id not in self.items:
            raise UpstreamError(404, "Webflow API error: 404")
        snapshot = dict(self.items[item_id])
        if self.yield_after_read:
            # let other requests run between this read and the caller's write
            await asyncio.sleep(0)
        return CollectionItem(id=item_id, field_data=snapshot)

    async def update_fields(self, item_id, fields):
        self.updates.append((item_id, dict(fields)))
        if self.fail_update_status is not None:
            raise UpstreamError(
                self.fail_update_status,
                f"Webflow update error: {self.fail_update_status} - validation failed",
            )
        self.items.setdefault(item_id, {}).update(fields)


@pytest.fixture
def store():
    return FakeItemStore()


@pytest.fixture
def like_counter(store):
    return LikeCounterUseCase(store=store, field_name=LIKE_FIELD)


@pytest.fixture
def proxy(like_counter):
    return LikeCounterProxy(like_counter)
