"""Serving size normalization."""

from nutrition_search.domain.products import NormalizedServing, Product

DEFAULT_SERVING_GRAMS = 100.0
DEFAULT_SERVING_LABEL = "100g"


def normalize_serving(product: Product) -> NormalizedServing:
    """Rescale a product's macros to a per-100g basis."""
    grams = product.serving_size
    if grams is None or grams <= 0:
        grams = DEFAULT_SERVING_GRAMS
    scale = 100 / grams
    return NormalizedServing(
        original=product.serving or DEFAULT_SERVING_LABEL,
        grams_per_serving=grams,
        calories_per_100g=_scaled(product.calories, scale),
        protein_per_100g=_scaled(product.protein, scale),
        carbs_per_100g=_scaled(product.carbs, scale),
        fat_per_100g=_scaled(product.fat, scale),
    )


def _scaled(value: float | None, scale: float) -> float:
    return round((value or 0.0) * scale, 1)
