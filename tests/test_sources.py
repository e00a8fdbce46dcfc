"""Tests for the external food sources."""

import asyncio
from dataclasses import dataclass

import httpx
import pytest

from nutrition_search.adapters.usda_client import UsdaClient
from nutrition_search.services.cache import InMemoryCache
from nutrition_search.services.fatsecret import FatSecretSource
from nutrition_search.services.nutritionix import NutritionixSource
from nutrition_search.services.open_food_facts import (
    OpenFoodFactsSource,
    parse_serving_grams,
)
from nutrition_search.services.usda import UsdaSource, title_case_if_shouting
from tests.conftest import (
    FakeFatSecretClient,
    FakeNutritionixClient,
    FakeOpenFoodFactsClient,
    FakeUsdaClient,
    http_status_error,
)


@dataclass
class FlakyUsdaClient(UsdaClient):
    failures: int = 1
    calls: int = 0

    async def search_foods(
        self, query: str, page_size: int = 25, timeout: float = 15
    ) -> dict[str, object]:
        self.calls += 1
        if self.calls <= self.failures:
            raise http_status_error(503)
        return {"totalHits": 0, "foods": []}

    async def get_food(self, fdc_id: int, timeout: float = 15) -> dict[str, object]:
        raise http_status_error(503)


def test_usda_search_parses_foods() -> None:
    source = UsdaSource(FakeUsdaClient(), InMemoryCache())

    result = asyncio.run(source.search("chicken", page_size=25))

    assert result.count == 412
    assert len(result.products) == 2
    legacy, branded = result.products
    assert legacy.name == "Chicken, Broilers Or Fryers, Breast, Meat Only, Raw"
    assert (legacy.calories, legacy.protein, legacy.carbs, legacy.fat) == (120, 23, 0, 3)
    assert legacy.micronutrients == {"sodium": 45}
    assert legacy.serving == "100g"
    assert legacy.barcode == "usda-171477"
    assert legacy.source == "usda"
    assert branded.name == "Grilled Chicken Strips (Tyson Foods)"
    assert branded.serving == "3 oz (84g)"
    assert branded.serving_size == 84
    assert branded.barcode == "023700043125"


def test_usda_search_uses_cache() -> None:
    client = FakeUsdaClient()
    source = UsdaSource(client, InMemoryCache())

    asyncio.run(source.search("chicken"))
    asyncio.run(source.search("chicken"))

    assert client.search_calls == [("chicken", 25)]


def test_usda_blank_query_skips_client() -> None:
    client = FakeUsdaClient()
    result = asyncio.run(UsdaSource(client, InMemoryCache()).search("  "))

    assert result.products == []
    assert client.search_calls == []


def test_usda_retries_once_then_raises() -> None:
    flaky = FlakyUsdaClient(failures=1)
    source = UsdaSource(flaky, InMemoryCache(), retry_delay_seconds=0)
    asyncio.run(source.search("rice"))
    assert flaky.calls == 2

    broken = FlakyUsdaClient(failures=5)
    source = UsdaSource(broken, InMemoryCache(), retry_delay_seconds=0)
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(source.search("rice"))
    assert broken.calls == 2


def test_usda_get_food_reads_detail_nutrients() -> None:
    client = FakeUsdaClient(
        foods={
            171705: {
                "fdcId": 171705,
                "description": "Avocados, raw, all commercial varieties",
                "foodNutrients": [
                    {"nutrient": {"id": 1008}, "amount": 160},
                    {"nutrient": {"id": 1004}, "amount": 14.66},
                    {"nutrient": {"id": 1079}, "amount": 6.7},
                ],
            }
        }
    )
    source = UsdaSource(client, InMemoryCache())

    product = asyncio.run(source.get_food(171705))

    assert product is not None
    assert product.calories == 160
    assert product.fat == 15
    assert product.micronutrients == {"fiber": 6.7}


def test_title_case_only_for_shouting_names() -> None:
    assert title_case_if_shouting("BANANAS, RAW") == "Bananas, Raw"
    assert title_case_if_shouting("Bananas, raw") == "Bananas, raw"
    assert title_case_if_shouting("OJ") == "OJ"


def test_open_food_facts_search_parses_products() -> None:
    client = FakeOpenFoodFactsClient(
        search_payload={
            "count": 2310,
            "products": [
                {
                    "code": "3017620422003",
                    "product_name": "Nutella",
                    "brands": "Ferrero",
                    "serving_size": "15 g",
                    "nutrition_data_per": "100g",
                    "image_front_small_url": "https://images.off/nutella.jpg",
                    "nutriments": {
                        "energy-kcal_100g": 539,
                        "proteins_100g": 6.3,
                        "carbohydrates_100g": 57.5,
                        "fat_100g": 30.9,
                        "sugars_100g": 56.3,
                        "saturated-fat_100g": 10.6,
                    },
                },
                {
                    "code": "5000159484695",
                    "product_name": "Protein Bar",
                    "brands": "Grenade",
                    "serving_size": "1 bar (60 g)",
                    "nutrition_data_per": "serving",
                    "nutriments": {
                        "energy_100g": 1600,
                        "proteins_serving": 20.4,
                        "proteins_100g": 34,
                        "carbohydrates_serving": 13,
                        "fat_serving": 7.8,
                        "fiber_serving": 3.1,
                    },
                },
                {"code": "000", "nutriments": {}},
            ],
        }
    )
    source = OpenFoodFactsSource(client, InMemoryCache())

    result = asyncio.run(source.search("nutella"))

    assert result.count == 2310
    assert len(result.products) == 2
    nutella, bar = result.products
    assert nutella.name == "Nutella (Ferrero)"
    assert (nutella.calories, nutella.protein, nutella.carbs, nutella.fat) == (
        539,
        6,
        58,
        31,
    )
    assert nutella.serving == "100g"
    assert nutella.serving_size == 100
    assert nutella.micronutrients == {"sugar": 56.3, "saturated_fat": 10.6}
    assert nutella.image == "https://images.off/nutella.jpg"
    assert nutella.source == "openFoodFacts"
    assert bar.name == "Protein Bar (Grenade)"
    assert bar.calories == 382
    assert bar.protein == 20
    assert bar.serving == "1 bar (60 g)"
    assert bar.serving_size == 60
    assert bar.micronutrients == {"fiber": 3.1}


def test_open_food_facts_barcode_lookup() -> None:
    client = FakeOpenFoodFactsClient(
        products={
            "737628064502": {
                "product_name": "Thai Peanut Noodles",
                "brands": "Simply Asia",
                "nutriments": {"energy-kcal_100g": 385, "proteins_100g": 9.6},
            }
        }
    )
    source = OpenFoodFactsSource(client, InMemoryCache())

    product = asyncio.run(source.get_by_barcode("7376-2806-4502"))

    assert product is not None
    assert product.name == "Thai Peanut Noodles"
    assert product.barcode == "737628064502"
    assert product.calories == 385
    assert asyncio.run(source.get_by_barcode("404")) is None
    assert asyncio.run(source.get_by_barcode("--")) is None


def test_parse_serving_grams() -> None:
    assert parse_serving_grams("1 cup (240g)") == 240
    assert parse_serving_grams("30 G") == 30
    assert parse_serving_grams("2 pieces") == 2
    assert parse_serving_grams("a handful") == 100
    assert parse_serving_grams(None) == 100


def test_fatsecret_search_parses_first_serving() -> None:
    client = FakeFatSecretClient(
        configured=True,
        payload={
            "foods_search": {
                "total_results": "87",
                "results": {
                    "food": [
                        {
                            "food_id": "1641",
                            "food_name": "Chicken Breast",
                            "servings": {
                                "serving": [
                                    {
                                        "serving_description": "1 breast (172g)",
                                        "metric_serving_amount": "172.000",
                                        "metric_serving_unit": "g",
                                        "calories": "284",
                                        "protein": "53.39",
                                        "carbohydrate": "0",
                                        "fat": "6.17",
                                        "sodium": "126",
                                    },
                                    {"calories": "1"},
                                ]
                            },
                        },
                        {
                            "food_id": "99",
                            "food_name": "Diet Soda",
                            "brand_name": "Fizz",
                            "servings": {"serving": {"calories": "0"}},
                        },
                        {"food_id": "100", "food_name": "No Servings"},
                    ]
                },
            }
        },
    )
    source = FatSecretSource(client, InMemoryCache())

    result = asyncio.run(source.search("chicken breast"))

    assert result.count == 87
    assert len(result.products) == 1
    product = result.products[0]
    assert product.name == "Chicken Breast"
    assert (product.calories, product.protein, product.fat) == (284, 53, 6)
    assert product.serving == "1 breast (172g)"
    assert product.serving_size == 172
    assert product.micronutrients == {"sodium": 126}
    assert product.barcode == "fs-1641"
    assert product.source == "fatSecret"


def test_fatsecret_single_food_object() -> None:
    client = FakeFatSecretClient(
        configured=True,
        payload={
            "foods_search": {
                "total_results": "1",
                "results": {
                    "food": {
                        "food_id": "5",
                        "food_name": "Greek Yogurt",
                        "brand_name": "Fage",
                        "servings": {
                            "serving": {"calories": "100", "protein": "18"}
                        },
                    }
                },
            }
        },
    )

    result = asyncio.run(FatSecretSource(client, InMemoryCache()).search("yogurt"))

    assert [product.name for product in result.products] == ["Greek Yogurt (Fage)"]
    assert result.products[0].serving == "100g"


def test_unconfigured_fatsecret_returns_empty_without_calling() -> None:
    client = FakeFatSecretClient(configured=False)
    source = FatSecretSource(client, InMemoryCache())

    assert not source.is_configured()
    assert asyncio.run(source.search("rice")).products == []
    assert client.calls == []


def _nutritionix_client(**kwargs) -> FakeNutritionixClient:  # type: ignore[no-untyped-def]
    return FakeNutritionixClient(
        configured=True,
        instant_payload={
            "common": [{"food_name": "apple"}, {"food_name": "apple pie"}],
            "branded": [
                {
                    "food_name": "Apple Chips",
                    "brand_name": "Bare",
                    "brand_name_item_name": "Bare Apple Chips",
                    "nix_item_id": "abc123",
                    "serving_qty": 1,
                    "serving_unit": "bag",
                    "nf_calories": 140.4,
                    "photo": {"thumb": "https://nix/thumb.jpg"},
                },
                {
                    "food_name": "Apple Water",
                    "brand_name_item_name": "Zero Apple Water",
                    "nix_item_id": "zero",
                    "nf_calories": 0,
                },
            ],
        },
        nutrients_payload={
            "foods": [
                {
                    "food_name": "apple",
                    "serving_qty": 1,
                    "serving_unit": "medium",
                    "serving_weight_grams": 182,
                    "nf_calories": 94.64,
                    "nf_total_fat": 0.31,
                    "nf_total_carbohydrate": 25.13,
                    "nf_protein": 0.47,
                    "nf_dietary_fiber": 4.37,
                    "full_nutrients": [
                        {"attr_id": 301, "value": 10.92},
                        {"attr_id": 401, "value": 8.37},
                    ],
                }
            ]
        },
        **kwargs,
    )


def test_nutritionix_combines_common_and_branded() -> None:
    client = _nutritionix_client()
    source = NutritionixSource(client, InMemoryCache())

    result = asyncio.run(source.search("apple", page_size=10))

    assert client.nutrients_calls == ["apple, apple pie"]
    assert [product.name for product in result.products] == ["Apple", "Bare Apple Chips"]
    assert result.count == 2
    apple, chips = result.products
    assert (apple.calories, apple.protein, apple.carbs, apple.fat) == (95, 0, 25, 0)
    assert apple.serving == "1 medium (182g)"
    assert apple.serving_size == 182
    assert apple.micronutrients == {"calcium": 10.92, "vitamin_c": 8.37, "fiber": 4.37}
    assert apple.barcode == "nix-apple"
    assert chips.calories == 140
    assert chips.protein is None
    assert chips.serving == "1 bag"
    assert chips.image == "https://nix/thumb.jpg"


def test_nutritionix_skips_common_foods_when_nutrients_fail() -> None:
    client = _nutritionix_client(nutrients_error=http_status_error(500))
    source = NutritionixSource(client, InMemoryCache())

    result = asyncio.run(source.search("apple"))

    assert [product.name for product in result.products] == ["Bare Apple Chips"]
