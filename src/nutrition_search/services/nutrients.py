"""Helpers shared by the source parsers."""

import math

MAX_CALORIES = 5000
MAX_PROTEIN_G = 500
MAX_CARBS_G = 1000
MAX_FAT_G = 500
MAX_QUERY_LENGTH = 200


def to_float(value: object) -> float | None:
    """Parse a number from an API field, or None when it isn't numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def round_whole(value: float) -> int:
    """Round half up to an integer."""
    return math.floor(value + 0.5)


def round_micro(value: float) -> float:
    """Round a micronutrient amount to two decimals."""
    return round(value, 2)


def clamp(value: float, upper: float) -> float:
    """Clamp a nutrient amount into ``[0, upper]``."""
    return max(0, min(upper, value))


def clamp_macros(
    calories: float, protein: float, carbs: float, fat: float
) -> tuple[float, float, float, float]:
    """Clamp macros into plausible per-serving ranges."""
    return (
        clamp(calories, MAX_CALORIES),
        clamp(protein, MAX_PROTEIN_G),
        clamp(carbs, MAX_CARBS_G),
        clamp(fat, MAX_FAT_G),
    )


def with_brand(
    name: str, brand: str | None, max_brand_length: int | None = None
) -> str:
    """Append the primary brand to a name unless it is already there."""
    if not brand or brand.lower() in name.lower():
        return name
    primary = brand.split(",")[0].strip()
    if max_brand_length is not None and len(primary) >= max_brand_length:
        return name
    return f"{name} ({primary})"


def sanitize_query(query: str) -> str:
    """Trim a query and cap its length before sending it upstream."""
    return query.strip()[:MAX_QUERY_LENGTH]


def format_amount(value: float) -> str:
    """Format a numeric amount without a trailing ``.0``."""
    return f"{value:g}"
