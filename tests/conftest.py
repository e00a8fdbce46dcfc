"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import httpx
import pytest

from nutrition_search.adapters.fatsecret_client import FatSecretClient
from nutrition_search.adapters.in_memory_kv_store import InMemoryKeyValueStore
from nutrition_search.adapters.nutritionix_client import NutritionixClient
from nutrition_search.adapters.open_food_facts_client import OpenFoodFactsClient
from nutrition_search.adapters.usda_client import UsdaClient
from nutrition_search.config import Settings
from nutrition_search.containers import AppContainer
from nutrition_search.domain.products import Product, SourceResult
from nutrition_search.services.cache import InMemoryCache
from nutrition_search.services.catalog import FoodCatalog
from nutrition_search.services.fatsecret import FatSecretSource
from nutrition_search.services.history import KeyValueStore, SearchHistoryService
from nutrition_search.services.nutritionix import NutritionixSource
from nutrition_search.services.open_food_facts import OpenFoodFactsSource
from nutrition_search.services.search import FoodSource, SearchService
from nutrition_search.services.usda import UsdaSource


def http_status_error(
    status_code: int, url: str = "https://example.test"
) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}", request=request, response=response
    )


@dataclass
class FakeSource(FoodSource):
    """Fake food source returning fixed products."""

    products: list[Product] = field(default_factory=list)
    count: int | None = None
    error: Exception | None = None
    delay_seconds: float = 0.0
    calls: list[tuple[str, int, int]] = field(default_factory=list)

    async def search(self, query: str, page_size: int, timeout_ms: int) -> SourceResult:
        self.calls.append((query, page_size, timeout_ms))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        count = len(self.products) if self.count is None else self.count
        return SourceResult(products=list(self.products), count=count)


@dataclass
class FakeOptionalSource(FakeSource):
    """Fake food source that may be unconfigured."""

    configured: bool = True
    configured_checks: int = 0
    configured_error: Exception | None = None

    def is_configured(self) -> bool:
        self.configured_checks += 1
        if self.configured_error is not None:
            raise self.configured_error
        return self.configured


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store whose every operation fails."""

    def get(self, key: str) -> str | None:
        raise RuntimeError("store unavailable")

    def set(self, key: str, value: str) -> None:
        raise RuntimeError("store unavailable")

    def remove(self, key: str) -> None:
        raise RuntimeError("store unavailable")


@dataclass
class FakeUsdaClient(UsdaClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "totalHits": 412,
            "foods": [
                {
                    "fdcId": 171477,
                    "description": "CHICKEN, BROILERS OR FRYERS, BREAST, MEAT ONLY, RAW",
                    "dataType": "SR Legacy",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 120},
                        {"nutrientId": 1003, "value": 22.5},
                        {"nutrientId": 1004, "value": 2.62},
                        {"nutrientId": 1005, "value": 0},
                        {"nutrientId": 1093, "value": 45},
                    ],
                },
                {
                    "fdcId": 2000001,
                    "description": "Grilled Chicken Strips",
                    "dataType": "Branded",
                    "brandOwner": "Tyson Foods, Inc.",
                    "gtinUpc": "023700043125",
                    "servingSize": 84,
                    "servingSizeUnit": "G",
                    "householdServingFullText": "3 oz",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 110},
                        {"nutrientId": 1003, "value": 19},
                        {"nutrientId": 1004, "value": 3},
                        {"nutrientId": 1005, "value": 1},
                    ],
                },
                {
                    "fdcId": 2000002,
                    "description": "Chicken broth",
                    "dataType": "Branded",
                    "foodNutrients": [{"nutrientId": 1003, "value": 1}],
                },
            ],
        }
    )
    foods: dict[int, dict[str, object]] = field(default_factory=dict)
    search_calls: list[tuple[str, int]] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)

    async def search_foods(
        self, query: str, page_size: int = 25, timeout: float = 15
    ) -> dict[str, object]:
        self.search_calls.append((query, page_size))
        return self.search_payload

    async def get_food(self, fdc_id: int, timeout: float = 15) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        if fdc_id not in self.foods:
            raise http_status_error(404)
        return self.foods[fdc_id]


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {"count": 0, "products": []}
    )
    products: dict[str, dict[str, object]] = field(default_factory=dict)
    search_calls: list[tuple[str, int]] = field(default_factory=list)

    async def search_products(
        self, query: str, page_size: int = 25, timeout: float = 8
    ) -> dict[str, object]:
        self.search_calls.append((query, page_size))
        return self.search_payload

    async def get_product(self, barcode: str, timeout: float = 8) -> dict[str, object]:
        product = self.products.get(barcode)
        if product is None:
            return {"status": 0, "status_verbose": "product not found"}
        return {"status": 1, "product": product}


@dataclass
class FakeFatSecretClient(FatSecretClient):
    """Fake FatSecret client."""

    configured: bool = False
    payload: dict[str, object] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def is_configured(self) -> bool:
        return self.configured

    async def search_foods(
        self, query: str, max_results: int = 25, timeout: float = 5
    ) -> dict[str, object]:
        self.calls.append(query)
        return self.payload


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client."""

    configured: bool = False
    instant_payload: dict[str, object] = field(
        default_factory=lambda: {"common": [], "branded": []}
    )
    nutrients_payload: dict[str, object] = field(default_factory=lambda: {"foods": []})
    nutrients_error: Exception | None = None
    instant_calls: list[str] = field(default_factory=list)
    nutrients_calls: list[str] = field(default_factory=list)

    def is_configured(self) -> bool:
        return self.configured

    async def instant_search(self, query: str, timeout: float = 5) -> dict[str, object]:
        self.instant_calls.append(query)
        return self.instant_payload

    async def natural_nutrients(
        self, query: str, timeout: float = 5
    ) -> dict[str, object]:
        self.nutrients_calls.append(query)
        if self.nutrients_error is not None:
            raise self.nutrients_error
        return self.nutrients_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        usda_api_key="usda-key",
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def usda_client() -> FakeUsdaClient:
    return FakeUsdaClient()


@pytest.fixture
def open_food_facts_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(
    settings: Settings,
    usda_client: FakeUsdaClient,
    open_food_facts_client: FakeOpenFoodFactsClient,
    kv_store: InMemoryKeyValueStore,
) -> AppContainer:
    usda = UsdaSource(client=usda_client, cache=InMemoryCache(), retry_delay_seconds=0)
    open_food_facts = OpenFoodFactsSource(
        client=open_food_facts_client, cache=InMemoryCache(), retry_delay_seconds=0
    )
    history_service = SearchHistoryService(kv_store)
    search_service = SearchService(
        usda=usda,
        open_food_facts=open_food_facts,
        fatsecret=FatSecretSource(client=FakeFatSecretClient(), cache=InMemoryCache()),
        nutritionix=NutritionixSource(
            client=FakeNutritionixClient(), cache=InMemoryCache()
        ),
        history=history_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=FoodCatalog.default(),
        usda=usda,
        open_food_facts=open_food_facts,
        history_service=history_service,
        search_service=search_service,
        close_resources=close_resources,
    )
