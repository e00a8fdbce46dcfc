"""Nutrition completeness scoring."""

from nutrition_search.domain.products import Product

_MAX_SCORE = 8.0
_KEY_MICRONUTRIENTS = ("fiber", "sugar", "sodium", "saturated_fat")
_KEY_MICRO_CREDIT = 0.5
_BREADTH_THRESHOLDS = (5, 10)


def nutrition_completeness_score(product: Product) -> float:
    """Score 0..1 for how much nutrition detail a product carries.

    Macros only count when present and nonzero; a zero is treated as
    missing rather than as a verified zero.
    """
    score = 0.0
    for value in (product.calories, product.protein, product.carbs, product.fat):
        if value:
            score += 1
    micros = product.micronutrients
    if micros:
        for key in _KEY_MICRONUTRIENTS:
            if key in micros:
                score += _KEY_MICRO_CREDIT
        for threshold in _BREADTH_THRESHOLDS:
            if len(micros) > threshold:
                score += _KEY_MICRO_CREDIT
    return min(1.0, score / _MAX_SCORE)
