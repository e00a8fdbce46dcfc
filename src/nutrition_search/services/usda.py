"""USDA FoodData Central source."""

import logging
import re
from dataclasses import dataclass
from typing import ClassVar

from nutrition_search.adapters.usda_client import UsdaClient
from nutrition_search.domain.products import Product, SourceName, SourceResult
from nutrition_search.services.cache import Cache
from nutrition_search.services.nutrients import (
    clamp_macros,
    format_amount,
    round_micro,
    round_whole,
    sanitize_query,
    to_float,
    with_brand,
)
from nutrition_search.services.retry import call_with_retry

ENERGY_ID = 1008
PROTEIN_ID = 1003
FAT_ID = 1004
CARBS_ID = 1005

MICRONUTRIENT_IDS = {
    "fiber": 1079,
    "sugar": 2000,
    "sodium": 1093,
    "saturated_fat": 1258,
    "trans_fat": 1257,
    "cholesterol": 1253,
    "calcium": 1087,
    "iron": 1089,
    "magnesium": 1090,
    "phosphorus": 1091,
    "potassium": 1092,
    "zinc": 1095,
    "copper": 1098,
    "manganese": 1101,
    "selenium": 1103,
    "vitamin_a": 1106,
    "vitamin_c": 1162,
    "vitamin_d": 1114,
    "vitamin_e": 1109,
    "vitamin_k": 1185,
    "vitamin_b1": 1165,
    "vitamin_b2": 1166,
    "vitamin_b3": 1167,
    "vitamin_b5": 1170,
    "vitamin_b6": 1175,
    "folate": 1177,
    "vitamin_b12": 1178,
}

MAX_BRAND_LENGTH = 40
_WORD_START = re.compile(r"(?:^|\s|,\s)\w")

_logger = logging.getLogger(__name__)


@dataclass
class UsdaSource:
    """Food search over USDA FoodData Central with caching."""

    client: UsdaClient
    cache: Cache
    cache_ttl_seconds: int = 300
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    name: ClassVar[SourceName] = SourceName.USDA

    async def search(
        self, query: str, page_size: int = 25, timeout_ms: int = 4000
    ) -> SourceResult:
        """Search generic and branded foods."""
        sanitized = sanitize_query(query)
        if not sanitized:
            return SourceResult(products=[], count=0)
        cache_key = f"usda:search:{sanitized}:{page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, SourceResult):
            return cached

        payload = await call_with_retry(
            lambda: self.client.search_foods(
                sanitized, page_size=page_size, timeout=timeout_ms / 1000
            ),
            action="USDA search",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        products = [
            food_to_product(food)
            for food in payload.get("foods") or []
            if food.get("description")
            and round_whole(_nutrient_value(food, ENERGY_ID) or 0) > 0
        ]
        total = int(payload.get("totalHits") or 0)
        result = SourceResult(products=products, count=total)
        self.cache.set(cache_key, result, ttl_seconds=self.cache_ttl_seconds)
        _logger.debug("USDA search: query=%s results=%s", sanitized, len(products))
        return result

    async def get_food(self, fdc_id: int, timeout_ms: int = 4000) -> Product | None:
        """Look up a single food by FDC id."""
        cache_key = f"usda:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, Product):
            return cached

        payload = await call_with_retry(
            lambda: self.client.get_food(fdc_id, timeout=timeout_ms / 1000),
            action=f"USDA get_food:{fdc_id}",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        if not payload or not payload.get("description"):
            return None
        product = food_to_product(payload)
        self.cache.set(cache_key, product, ttl_seconds=self.cache_ttl_seconds)
        return product


def food_to_product(food: dict[str, object]) -> Product:
    """Convert a raw FDC food record into a product."""
    calories, protein, carbs, fat = clamp_macros(
        *(
            round_whole(_nutrient_value(food, nutrient_id) or 0)
            for nutrient_id in (ENERGY_ID, PROTEIN_ID, CARBS_ID, FAT_ID)
        )
    )
    brand = food.get("brandOwner") or food.get("brandName") or None
    serving_size = to_float(food.get("servingSize")) or 100
    serving_unit = str(food.get("servingSizeUnit") or "g").lower()
    serving = f"{format_amount(serving_size)}{serving_unit}"
    household = food.get("householdServingFullText")
    if household:
        serving = f"{household} ({serving})"

    micronutrients = {}
    for key, nutrient_id in MICRONUTRIENT_IDS.items():
        value = _nutrient_value(food, nutrient_id)
        if value is not None:
            micronutrients[key] = round_micro(value)

    return Product(
        name=with_brand(
            title_case_if_shouting(str(food["description"])),
            brand,
            max_brand_length=MAX_BRAND_LENGTH,
        ),
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        micronutrients=micronutrients,
        serving=serving,
        serving_size=serving_size,
        serving_unit=serving_unit,
        brand=brand,
        barcode=food.get("gtinUpc") or f"usda-{food.get('fdcId')}",
        source=SourceName.USDA.value,
    )


def title_case_if_shouting(name: str) -> str:
    """Convert SR Legacy ALL-CAPS descriptions to title case."""
    if name != name.upper() or len(name) <= 3:
        return name
    return _WORD_START.sub(lambda match: match.group(0).upper(), name.lower())


def _nutrient_value(food: dict[str, object], nutrient_id: int) -> float | None:
    # Search results carry nutrientId/value, food details carry nutrient.id/amount.
    for nutrient in food.get("foodNutrients") or []:
        nutrient_info = nutrient.get("nutrient") or {}
        current_id = nutrient.get("nutrientId") or nutrient_info.get("id")
        if current_id != nutrient_id:
            continue
        value = nutrient.get("value")
        if value is None:
            value = nutrient.get("amount")
        return to_float(value)
    return None
