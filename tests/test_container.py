"""Tests for container wiring."""

import asyncio

from nutrition_search.adapters.in_memory_kv_store import InMemoryKeyValueStore
from nutrition_search.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.search_service.usda is container.usda
    assert container.search_service.history is container.history_service
    assert isinstance(container.history_service.store, InMemoryKeyValueStore)
    assert not container.search_service.fatsecret.is_configured()
    assert not container.search_service.nutritionix.is_configured()
    assert container.catalog.get_food("f_0") is not None
    asyncio.run(container.close_resources())


def test_optional_sources_configured_from_settings(settings) -> None:
    configured = settings.model_copy(
        update={
            "fatsecret_client_id": "id",
            "fatsecret_client_secret": "secret",
            "nutritionix_app_id": "app",
            "nutritionix_app_key": "key",
        }
    )

    container = build_container(configured)

    assert container.search_service.fatsecret.is_configured()
    assert container.search_service.nutritionix.is_configured()
    asyncio.run(container.close_resources())
