"""Open Food Facts source."""

import logging
import re
from dataclasses import dataclass
from typing import ClassVar

from nutrition_search.adapters.open_food_facts_client import OpenFoodFactsClient
from nutrition_search.domain.products import Product, SourceName, SourceResult
from nutrition_search.services.cache import Cache
from nutrition_search.services.nutrients import (
    clamp_macros,
    round_micro,
    round_whole,
    sanitize_query,
    to_float,
    with_brand,
)
from nutrition_search.services.retry import call_with_retry

KJ_PER_KCAL = 4.184
DEFAULT_SERVING = "100g"
DEFAULT_SERVING_G = 100.0
MAX_BARCODE_LENGTH = 30

MICRONUTRIENT_KEYS = {
    "fiber": "fiber",
    "sugar": "sugars",
    "sodium": "sodium",
    "saturated_fat": "saturated-fat",
    "trans_fat": "trans-fat",
    "cholesterol": "cholesterol",
    "calcium": "calcium",
    "iron": "iron",
    "magnesium": "magnesium",
    "potassium": "potassium",
    "zinc": "zinc",
    "copper": "copper",
    "manganese": "manganese",
    "selenium": "selenium",
    "phosphorus": "phosphorus",
    "vitamin_a": "vitamin-a",
    "vitamin_c": "vitamin-c",
    "vitamin_d": "vitamin-d",
    "vitamin_e": "vitamin-e",
    "vitamin_k": "vitamin-k",
    "vitamin_b1": "vitamin-b1",
    "vitamin_b2": "vitamin-b2",
    "vitamin_b3": "vitamin-pp",
    "vitamin_b5": "pantothenic-acid",
    "vitamin_b6": "vitamin-b6",
    "vitamin_b12": "vitamin-b12",
    "folate": "vitamin-b9",
    "omega3": "omega-3-fat",
    "omega6": "omega-6-fat",
}

_GRAMS = re.compile(r"(\d+(?:\.\d+)?)\s*g", re.IGNORECASE)
_NUMBER = re.compile(r"(\d+(?:\.\d+)?)")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

_logger = logging.getLogger(__name__)


@dataclass
class OpenFoodFactsSource:
    """Packaged-product search over Open Food Facts with caching."""

    client: OpenFoodFactsClient
    cache: Cache
    cache_ttl_seconds: int = 300
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    name: ClassVar[SourceName] = SourceName.OPEN_FOOD_FACTS

    async def search(
        self, query: str, page_size: int = 25, timeout_ms: int = 4000
    ) -> SourceResult:
        """Search the world catalog, most scanned first."""
        sanitized = sanitize_query(query)
        if not sanitized:
            return SourceResult(products=[], count=0)
        cache_key = f"off:search:{sanitized}:{page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, SourceResult):
            return cached

        payload = await call_with_retry(
            lambda: self.client.search_products(
                sanitized, page_size=page_size, timeout=timeout_ms / 1000
            ),
            action="Open Food Facts search",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        products = [
            raw_to_product(raw, name=format_product_name(raw))
            for raw in payload.get("products") or []
            if raw.get("product_name") or raw.get("product_name_en")
        ]
        result = SourceResult(products=products, count=int(payload.get("count") or 0))
        self.cache.set(cache_key, result, ttl_seconds=self.cache_ttl_seconds)
        _logger.debug(
            "Open Food Facts search: query=%s results=%s", sanitized, len(products)
        )
        return result

    async def get_by_barcode(
        self, barcode: str, timeout_ms: int = 5000
    ) -> Product | None:
        """Look up a product by barcode, or None when unknown."""
        sanitized = _NON_ALNUM.sub("", barcode)[:MAX_BARCODE_LENGTH]
        if not sanitized:
            return None
        payload = await call_with_retry(
            lambda: self.client.get_product(sanitized, timeout=timeout_ms / 1000),
            action=f"Open Food Facts barcode:{sanitized}",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        raw = payload.get("product")
        if payload.get("status") != 1 or not raw:
            return None
        name = _product_name(raw)
        return raw_to_product(raw, name=name, barcode=sanitized)


def raw_to_product(
    raw: dict[str, object], *, name: str, barcode: str | None = None
) -> Product:
    """Convert a raw Open Food Facts product into a product."""
    nutriments = raw.get("nutriments") or {}
    per_serving = raw.get("nutrition_data_per") == "serving"
    serving_text = str(raw.get("serving_size") or DEFAULT_SERVING)

    calories = _calories(nutriments, per_serving)
    if calories is None:
        calories = round_whole(to_float(nutriments.get("energy-kcal_100g")) or 0)
    macros = [calories]
    for key in ("proteins", "carbohydrates", "fat"):
        value = _nutriment(nutriments, key, per_serving)
        macros.append(round_whole(value) if value is not None else 0)
    calories, protein, carbs, fat = clamp_macros(*macros)

    micronutrients = {}
    for name_key, off_key in MICRONUTRIENT_KEYS.items():
        value = _nutriment(nutriments, off_key, per_serving)
        if value is not None and value >= 0:
            micronutrients[name_key] = round_micro(value)

    return Product(
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        micronutrients=micronutrients,
        serving=serving_text if per_serving else DEFAULT_SERVING,
        serving_size=(
            parse_serving_grams(serving_text) if per_serving else DEFAULT_SERVING_G
        ),
        serving_unit="g",
        brand=raw.get("brands") or None,
        barcode=barcode or raw.get("code") or raw.get("_id") or "",
        image=raw.get("image_front_small_url")
        or raw.get("image_front_thumb_url")
        or raw.get("image_url")
        or None,
        source=SourceName.OPEN_FOOD_FACTS.value,
    )


def format_product_name(raw: dict[str, object]) -> str:
    """Return ``name (brand)`` for a raw product."""
    return with_brand(_product_name(raw), raw.get("brands"))


def _product_name(raw: dict[str, object]) -> str:
    name = raw.get("product_name") or raw.get("product_name_en")
    return str(name or "Unknown Product")


def parse_serving_grams(serving: str | None) -> float:
    """Extract grams from a serving string like ``1 cup (240g)``."""
    if not serving:
        return DEFAULT_SERVING_G
    match = _GRAMS.search(serving) or _NUMBER.search(serving)
    if match:
        return float(match.group(1))
    return DEFAULT_SERVING_G


def _calories(nutriments: dict[str, object], per_serving: bool) -> int | None:
    if per_serving and to_float(nutriments.get("energy-kcal_serving")):
        return round_whole(to_float(nutriments["energy-kcal_serving"]))
    for key in ("energy-kcal_100g", "energy-kcal"):
        value = to_float(nutriments.get(key))
        if value:
            return round_whole(value)
    kilojoules = to_float(nutriments.get("energy_100g"))
    if kilojoules:
        return round_whole(kilojoules / KJ_PER_KCAL)
    return None


def _nutriment(
    nutriments: dict[str, object], key: str, per_serving: bool
) -> float | None:
    if per_serving and nutriments.get(f"{key}_serving") is not None:
        return to_float(nutriments[f"{key}_serving"])
    return to_float(nutriments.get(f"{key}_100g"))
