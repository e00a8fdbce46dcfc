"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_search.adapters.fatsecret_client import HttpxFatSecretClient
from nutrition_search.adapters.in_memory_kv_store import InMemoryKeyValueStore
from nutrition_search.adapters.nutritionix_client import HttpxNutritionixClient
from nutrition_search.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from nutrition_search.adapters.supabase_kv_store import SupabaseKeyValueStore
from nutrition_search.adapters.usda_client import HttpxUsdaClient
from nutrition_search.config import Settings
from nutrition_search.services.cache import InMemoryCache
from nutrition_search.services.catalog import FoodCatalog
from nutrition_search.services.fatsecret import FatSecretSource
from nutrition_search.services.history import KeyValueStore, SearchHistoryService
from nutrition_search.services.nutritionix import NutritionixSource
from nutrition_search.services.open_food_facts import OpenFoodFactsSource
from nutrition_search.services.search import SearchService
from nutrition_search.services.usda import UsdaSource


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    usda: UsdaSource
    open_food_facts: OpenFoodFactsSource
    history_service: SearchHistoryService
    search_service: SearchService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    usda_client = HttpxUsdaClient.create(
        api_key=resolved_settings.usda_api_key,
        base_url=resolved_settings.usda_base_url,
    )
    open_food_facts_client = HttpxOpenFoodFactsClient.create(
        search_url=resolved_settings.open_food_facts_search_url,
        product_url=resolved_settings.open_food_facts_product_url,
        user_agent=resolved_settings.open_food_facts_user_agent,
    )
    fatsecret_client = HttpxFatSecretClient.create(
        client_id=resolved_settings.fatsecret_client_id,
        client_secret=resolved_settings.fatsecret_client_secret,
    )
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.nutritionix_app_id,
        app_key=resolved_settings.nutritionix_app_key,
    )
    usda = UsdaSource(client=usda_client, cache=InMemoryCache())
    open_food_facts = OpenFoodFactsSource(
        client=open_food_facts_client, cache=InMemoryCache()
    )
    history_service = SearchHistoryService(_build_store(resolved_settings))
    search_service = SearchService(
        usda=usda,
        open_food_facts=open_food_facts,
        fatsecret=FatSecretSource(client=fatsecret_client, cache=InMemoryCache()),
        nutritionix=NutritionixSource(client=nutritionix_client, cache=InMemoryCache()),
        history=history_service,
    )

    async def close_resources() -> None:
        await usda_client.close()
        await open_food_facts_client.close()
        await fatsecret_client.close()
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=FoodCatalog.default(),
        usda=usda,
        open_food_facts=open_food_facts,
        history_service=history_service,
        search_service=search_service,
        close_resources=close_resources,
    )


def _build_store(settings: Settings) -> KeyValueStore:
    if not settings.uses_supabase():
        return InMemoryKeyValueStore()
    supabase_client = create_client(
        settings.supabase_url, settings.supabase_service_key
    )
    return SupabaseKeyValueStore(
        supabase_client, table_name=settings.search_state_table
    )
