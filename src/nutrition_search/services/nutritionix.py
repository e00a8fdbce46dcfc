"""Nutritionix source."""

import logging
from dataclasses import dataclass
from typing import ClassVar

import httpx

from nutrition_search.adapters.nutritionix_client import NutritionixClient
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

MAX_RESULTS = 10

_MACRO_KEYS = ("nf_calories", "nf_protein", "nf_total_carbohydrate", "nf_total_fat")

NAMED_MICRONUTRIENTS = {
    "fiber": "nf_dietary_fiber",
    "sugar": "nf_sugars",
    "sodium": "nf_sodium",
    "saturated_fat": "nf_saturated_fat",
    "cholesterol": "nf_cholesterol",
    "potassium": "nf_potassium",
    "calcium": "nf_calcium",
    "iron": "nf_iron",
    "vitamin_d": "nf_vitamin_d",
}

# Nutritionix full_nutrients attr_id values.
ATTR_MICRONUTRIENTS = {
    "calcium": 301,
    "iron": 303,
    "magnesium": 304,
    "phosphorus": 305,
    "zinc": 309,
    "copper": 312,
    "manganese": 315,
    "selenium": 317,
    "vitamin_a": 320,
    "vitamin_c": 401,
    "vitamin_d": 324,
    "vitamin_e": 323,
    "vitamin_k": 430,
    "vitamin_b1": 404,
    "vitamin_b2": 405,
    "vitamin_b3": 406,
    "vitamin_b5": 410,
    "vitamin_b6": 415,
    "folate": 417,
    "vitamin_b12": 418,
    "trans_fat": 605,
}

_logger = logging.getLogger(__name__)


@dataclass
class NutritionixSource:
    """Common and branded food search over Nutritionix with caching."""

    client: NutritionixClient
    cache: Cache
    cache_ttl_seconds: int = 300
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    name: ClassVar[SourceName] = SourceName.NUTRITIONIX

    def is_configured(self) -> bool:
        """Return True when Nutritionix credentials are set."""
        return self.client.is_configured()

    async def search(
        self, query: str, page_size: int = MAX_RESULTS, timeout_ms: int = 5000
    ) -> SourceResult:
        """Search common foods (with full nutrients) and branded foods."""
        sanitized = sanitize_query(query)
        if not sanitized or not self.is_configured():
            return SourceResult(products=[], count=0)
        cache_key = f"nix:search:{sanitized}:{page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, SourceResult):
            return cached

        timeout = timeout_ms / 1000
        instant = await call_with_retry(
            lambda: self.client.instant_search(sanitized, timeout=timeout),
            action="Nutritionix instant search",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        common_names = [
            food.get("food_name")
            for food in (instant.get("common") or [])[:page_size]
            if food.get("food_name")
        ]
        common_products = await self._common_products(common_names, timeout)
        branded_products = [
            product
            for product in map(
                branded_to_product, (instant.get("branded") or [])[:page_size]
            )
            if (product.calories or 0) > 0
        ]
        products = common_products + branded_products
        result = SourceResult(products=products, count=len(products))
        self.cache.set(cache_key, result, ttl_seconds=self.cache_ttl_seconds)
        _logger.debug(
            "Nutritionix search: query=%s results=%s", sanitized, len(products)
        )
        return result

    async def _common_products(
        self, names: list[str], timeout: float
    ) -> list[Product]:
        if not names:
            return []
        try:
            payload = await self.client.natural_nutrients(
                ", ".join(names), timeout=timeout
            )
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Nutritionix nutrients lookup failed: %s", exc)
            return []
        return [nutrient_food_to_product(food) for food in payload.get("foods") or []]


def branded_to_product(food: dict[str, object]) -> Product:
    """Convert an instant-search branded food; only calories are known."""
    quantity = to_float(food.get("serving_qty")) or 1
    unit = str(food.get("serving_unit") or "serving")
    return Product(
        name=str(food.get("brand_name_item_name") or food.get("food_name") or ""),
        calories=round_whole(to_float(food.get("nf_calories")) or 0),
        serving=f"{format_amount(quantity)} {unit}",
        serving_size=quantity,
        serving_unit=unit,
        brand=food.get("brand_name") or None,
        barcode=f"nix-{food.get('nix_item_id')}",
        image=(food.get("photo") or {}).get("thumb") or None,
        source=SourceName.NUTRITIONIX.value,
    )


def nutrient_food_to_product(food: dict[str, object]) -> Product:
    """Convert a natural/nutrients food record into a product."""
    calories, protein, carbs, fat = clamp_macros(
        *(round_whole(to_float(food.get(key)) or 0) for key in _MACRO_KEYS)
    )
    food_name = str(food.get("food_name") or "")
    brand = food.get("brand_name") or None
    if brand:
        name = f"{food_name} ({brand})"
    else:
        name = food_name[:1].upper() + food_name[1:]
    item_id = food.get("nix_item_id")
    if item_id:
        barcode = f"nix-{item_id}"
    else:
        barcode = "nix-" + "-".join(food_name.lower().split())
    grams = to_float(food.get("serving_weight_grams")) or 0
    quantity = to_float(food.get("serving_qty")) or 1

    return Product(
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        micronutrients=_micronutrients(food),
        serving=(
            f"{format_amount(quantity)} {food.get('serving_unit') or 'serving'}"
            f" ({round_whole(grams)}g)"
        ),
        serving_size=grams or 100,
        serving_unit="g",
        brand=brand,
        barcode=barcode,
        image=(food.get("photo") or {}).get("thumb") or None,
        source=SourceName.NUTRITIONIX.value,
    )


def _micronutrients(food: dict[str, object]) -> dict[str, float]:
    attrs = {
        entry.get("attr_id"): to_float(entry.get("value"))
        for entry in food.get("full_nutrients") or []
    }
    micronutrients = {}
    for key, attr_id in ATTR_MICRONUTRIENTS.items():
        if attrs.get(attr_id) is not None:
            micronutrients[key] = round_micro(attrs[attr_id])
    # Named nf_* fields take precedence over full_nutrients.
    for key, field_name in NAMED_MICRONUTRIENTS.items():
        value = to_float(food.get(field_name))
        if value is not None:
            micronutrients[key] = round_micro(value)
    return micronutrients
