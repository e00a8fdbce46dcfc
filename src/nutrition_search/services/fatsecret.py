"""FatSecret source."""

import logging
from dataclasses import dataclass
from typing import ClassVar

from nutrition_search.adapters.fatsecret_client import FatSecretClient
from nutrition_search.domain.products import Product, SourceName, SourceResult
from nutrition_search.services.cache import Cache
from nutrition_search.services.nutrients import (
    clamp_macros,
    format_amount,
    round_micro,
    round_whole,
    sanitize_query,
    to_float,
)
from nutrition_search.services.retry import call_with_retry

MICRONUTRIENT_FIELDS = {
    "fiber": "fiber",
    "sugar": "sugar",
    "sodium": "sodium",
    "saturated_fat": "saturated_fat",
    "trans_fat": "trans_fat",
    "cholesterol": "cholesterol",
    "calcium": "calcium",
    "iron": "iron",
    "potassium": "potassium",
    "vitamin_a": "vitamin_a",
    "vitamin_c": "vitamin_c",
    "vitamin_d": "vitamin_d",
}

_logger = logging.getLogger(__name__)


@dataclass
class FatSecretSource:
    """Food search over the FatSecret Platform API with caching."""

    client: FatSecretClient
    cache: Cache
    cache_ttl_seconds: int = 300
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    name: ClassVar[SourceName] = SourceName.FATSECRET

    def is_configured(self) -> bool:
        """Return True when FatSecret credentials are set."""
        return self.client.is_configured()

    async def search(
        self, query: str, page_size: int = 25, timeout_ms: int = 5000
    ) -> SourceResult:
        """Search FatSecret foods using each food's default serving."""
        sanitized = sanitize_query(query)
        if not sanitized or not self.is_configured():
            return SourceResult(products=[], count=0)
        cache_key = f"fs:search:{sanitized}:{page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, SourceResult):
            return cached

        payload = await call_with_retry(
            lambda: self.client.search_foods(
                sanitized, max_results=page_size, timeout=timeout_ms / 1000
            ),
            action="FatSecret search",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        search = payload.get("foods_search") or {}
        foods = _as_list((search.get("results") or {}).get("food"))
        products = [
            product for product in map(food_to_product, foods) if product is not None
        ]
        result = SourceResult(
            products=products, count=int(search.get("total_results") or 0)
        )
        self.cache.set(cache_key, result, ttl_seconds=self.cache_ttl_seconds)
        _logger.debug("FatSecret search: query=%s results=%s", sanitized, len(products))
        return result


def food_to_product(food: dict[str, object]) -> Product | None:
    """Convert a FatSecret food to a product, or None when it has no data."""
    servings = _as_list((food.get("servings") or {}).get("serving"))
    if not servings:
        return None
    serving = servings[0]

    macros = [
        round_whole(to_float(serving.get(key)) or 0)
        for key in ("calories", "protein", "carbohydrate", "fat")
    ]
    if not any(macros):
        return None
    calories, protein, carbs, fat = clamp_macros(*macros)

    amount = to_float(serving.get("metric_serving_amount")) or 100
    unit = str(serving.get("metric_serving_unit") or "g").lower()
    micronutrients = {}
    for key, field_name in MICRONUTRIENT_FIELDS.items():
        value = to_float(serving.get(field_name))
        if value is not None:
            micronutrients[key] = round_micro(value)

    brand = food.get("brand_name") or None
    name = str(food.get("food_name") or "")
    return Product(
        name=f"{name} ({brand})" if brand else name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        micronutrients=micronutrients,
        serving=serving.get("serving_description") or f"{format_amount(amount)}{unit}",
        serving_size=amount,
        serving_unit=unit,
        brand=brand,
        barcode=f"fs-{food.get('food_id')}",
        source=SourceName.FATSECRET.value,
    )


def _as_list(value: object) -> list[dict[str, object]]:
    # FatSecret returns a bare object instead of a one-element list.
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    return []
