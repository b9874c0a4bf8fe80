"""Port interface for the remote collection-item store."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities.collection_item import CollectionItem


class ItemStorePort(ABC):
    @abstractmethod
    async def get_item(self, item_id: str) -> CollectionItem:
        """Fetch a single collection item.

        Raises UpstreamError if the store does not answer with a 2xx.
        """
        ...

    @abstractmethod
    async def update_fields(self, item_id: str, fields: dict[str, Any]) -> None:
        """Partially update an item, touching only the given fields.

        Raises UpstreamError if the store does not answer with a 2xx.
        """
        ...
