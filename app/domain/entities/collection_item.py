"""Collection item and like count entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.domain.value_objects.field_value import FieldValue, field_value_from_raw


@dataclass
class CollectionItem:
    """A record in the remote CMS collection, identified by an opaque id."""

    id: str
    field_data: dict[str, Any] = field(default_factory=dict)

    def field_value(self, name: str) -> FieldValue:
        return field_value_from_raw(self.field_data.get(name))

    @property
    def name(self) -> str | None:
        value = self.field_data.get("name")
        return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class LikeCount:
    item_id: str
    likes: int
    name: str | None = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"itemId": self.item_id, "likes": self.likes}
        if self.name is not None:
            data["name"] = self.name
        return data
