"""FastAPI dependency injection — wires the Webflow adapter into the use cases."""

from __future__ import annotations

from fastapi import Depends

from app.adapters.webflow.webflow_adapter import WebflowItemStore
from app.application.ports.item_store_port import ItemStorePort
from app.application.use_cases.like_counter import LikeCounterUseCase
from app.application.use_cases.like_proxy import LikeCounterProxy
from app.config import Settings, settings

# Singleton adapter (stateless, configuration fixed at startup)
_item_store = WebflowItemStore(settings)


def get_settings() -> Settings:
    return settings


def get_item_store() -> ItemStorePort:
    return _item_store


def get_like_counter_uc(
    store: ItemStorePort = Depends(get_item_store),
    config: Settings = Depends(get_settings),
) -> LikeCounterUseCase:
    return LikeCounterUseCase(
        store=store,
        field_name=config.like_count_field,
        coercion_mode=config.coercion_mode,
    )


def get_like_proxy(
    like_counter: LikeCounterUseCase = Depends(get_like_counter_uc),
) -> LikeCounterProxy:
    return LikeCounterProxy(like_counter)


def build_like_proxy(
    store: ItemStorePort | None = None,
    config: Settings = settings,
) -> LikeCounterProxy:
    """Manual wiring for entry points that run outside FastAPI."""
    return LikeCounterProxy(
        LikeCounterUseCase(
            store=store if store is not None else _item_store,
            field_name=config.like_count_field,
            coercion_mode=config.coercion_mode,
        )
    )
