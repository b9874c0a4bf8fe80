"""LikeCounterUseCase — read and increment the like count of a CMS item.

The increment is a plain read-modify-write: the store has no atomic
increment or compare-and-swap, so two concurrent increments of the same
item can both read N and both write N + 1 (one like is lost). This is a
known limitation; no locking or retry is attempted here.
"""

from __future__ import annotations

import logging

from app.application.ports.item_store_port import ItemStorePort
from app.domain.entities.collection_item import LikeCount
from app.domain.value_objects.enums import CoercionMode
from app.domain.value_objects.field_value import coerce_like_count

logger = logging.getLogger(__name__)


class LikeCounterUseCase:
    """Orchestrates like-count reads and increments against the item store."""

    def __init__(
        self,
        store: ItemStorePort,
        field_name: str,
        coercion_mode: CoercionMode = CoercionMode.LENIENT,
    ):
        self._store = store
        self._field_name = field_name
        self._coercion_mode = coercion_mode

    async def get_likes(self, item_id: str) -> LikeCount:
        """Fetch the item once and return its coerced like count."""
        item = await self._store.get_item(item_id)
        likes = coerce_like_count(item.field_value(self._field_name), self._coercion_mode)
        logger.debug("Item '%s' has %d likes", item_id, likes)
        return LikeCount(item_id=item_id, likes=likes, name=item.name)

    async def add_like(self, item_id: str) -> LikeCount:
        """Increment the like count by one.

        Exactly one read and one write. The returned count is the value
        this request wrote, which may trail the true count if another
        writer interleaved.
        """
        current = await self.get_likes(item_id)
        new_likes = int(current.likes) + 1

        await self._store.update_fields(item_id, {self._field_name: new_likes})
        logger.info("Item '%s' likes %d → %d", item_id, current.likes, new_likes)

        return LikeCount(item_id=item_id, likes=new_likes, name=current.name)
