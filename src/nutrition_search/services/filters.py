"""Quick filters applied to search results."""

from enum import Enum

from nutrition_search.domain.products import Product

HIGH_PROTEIN_MIN_PCT = 30
LOW_CARB_MAX_G = 15
LOW_CALORIE_MAX_KCAL = 200
KETO_MAX_NET_CARBS_G = 10


class QuickFilter(Enum):
    """Named result filters offered by the search UI."""

    HIGH_PROTEIN = "high_protein"
    LOW_CARB = "low_carb"
    LOW_CALORIE = "low_calorie"
    KETO_FRIENDLY = "keto_friendly"


def apply_quick_filter(
    products: list[Product], quick_filter: QuickFilter | None
) -> list[Product]:
    """Return the products matching a quick filter."""
    if quick_filter is None:
        return products
    return [product for product in products if _matches(product, quick_filter)]


def _matches(product: Product, quick_filter: QuickFilter) -> bool:
    calories = product.calories or 0
    carbs = product.carbs or 0
    if quick_filter is QuickFilter.HIGH_PROTEIN:
        if calories <= 0:
            return False
        return (product.protein or 0) * 4 / calories * 100 >= HIGH_PROTEIN_MIN_PCT
    if quick_filter is QuickFilter.LOW_CARB:
        return carbs <= LOW_CARB_MAX_G
    if quick_filter is QuickFilter.LOW_CALORIE:
        return calories <= LOW_CALORIE_MAX_KCAL
    net_carbs = carbs - product.micronutrients.get("fiber", 0)
    return net_carbs <= KETO_MAX_NET_CARBS_G and (product.fat or 0) > 0
