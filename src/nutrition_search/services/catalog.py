"""Local food catalog generation and lexical search."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from functools import cache

from nutrition_search.catalog_foods import BASE_FOODS, COOKING_METHODS, NO_RAW_VARIANT
from nutrition_search.domain.catalog import BaseFood, CatalogFood, CookingMethod
from nutrition_search.domain.products import Product, SourceName
from nutrition_search.services.nutrients import format_amount

FAT_KCAL_PER_GRAM = 9
DEFAULT_PORTION_G = 100.0
DEFAULT_UNIT = "g"
MAX_RESULTS = 50
MIN_FUZZY_QUERY_LENGTH = 3

EXACT_SCORE = 100
PREFIX_SCORE = 80
SUBSTRING_SCORE = 60
FUZZY_BASE_SCORE = 50
FUZZY_PENALTY = 10


def build_catalog(
    base_foods: Iterable[BaseFood],
    methods: Iterable[CookingMethod] = COOKING_METHODS,
) -> list[CatalogFood]:
    """Expand base foods and their cooking-method variants into catalog entries."""
    methods = tuple(methods)
    foods: list[CatalogFood] = []
    for base in base_foods:
        portion = base.portion or DEFAULT_PORTION_G
        unit = base.unit or DEFAULT_UNIT
        foods.append(
            _catalog_entry(
                len(foods),
                base.name,
                (base.calories, base.protein, base.carbs, base.fat),
                portion,
                unit,
                base,
            )
        )
        if not base.variations:
            continue
        for method in methods:
            if method.name == "Raw" and any(
                meat in base.name for meat in NO_RAW_VARIANT
            ):
                continue
            per_100g = (
                base.calories * method.calorie_factor
                + method.fat_added_g * FAT_KCAL_PER_GRAM,
                base.protein * method.protein_factor,
                base.carbs * method.carb_factor,
                base.fat + method.fat_added_g,
            )
            foods.append(
                _catalog_entry(
                    len(foods),
                    f"{base.name} ({method.name})",
                    per_100g,
                    portion,
                    unit,
                    base,
                )
            )
    return foods


def _catalog_entry(  # noqa: PLR0913
    index: int,
    name: str,
    per_100g: tuple[float, float, float, float],
    portion: float,
    unit: str,
    base: BaseFood,
) -> CatalogFood:
    ratio = portion / 100
    calories, protein, carbs, fat = per_100g
    return CatalogFood(
        id=f"f_{index}",
        name=name,
        calories=math.floor(calories * ratio + 0.5),
        protein=round(protein * ratio, 1),
        carbs=round(carbs * ratio, 1),
        fat=round(fat * ratio, 1),
        serving_size=portion,
        serving_unit=unit,
        category=base.category,
    )


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between two strings."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def lexical_score(name: str, query: str) -> int:
    """Score how well a lowercased catalog name matches a lowercased query."""
    if name == query:
        return EXACT_SCORE
    if name.startswith(query):
        return PREFIX_SCORE
    if query in name:
        return SUBSTRING_SCORE
    if len(query) < MIN_FUZZY_QUERY_LENGTH:
        return 0
    distance = levenshtein_distance(query, name)
    allowed = len(name) // 3 + 1
    if distance > allowed:
        return 0
    return FUZZY_BASE_SCORE - distance * FUZZY_PENALTY


@dataclass
class FoodCatalog:
    """In-memory searchable food catalog."""

    foods: list[CatalogFood]

    @classmethod
    def default(cls) -> "FoodCatalog":
        """Return the catalog generated from the built-in base table."""
        return cls(foods=_default_foods())

    def search_foods(self, query: str, limit: int = MAX_RESULTS) -> list[CatalogFood]:
        """Return catalog entries ranked by lexical match quality."""
        normalized = query.lower().strip()
        if not normalized:
            return []
        scored = [
            (lexical_score(food.name.lower(), normalized), food) for food in self.foods
        ]
        matches = [(score, food) for score, food in scored if score > 0]
        matches.sort(key=lambda item: item[0], reverse=True)
        return [food for _, food in matches[:limit]]

    def get_food(self, food_id: str) -> CatalogFood | None:
        """Return a catalog entry by id, if present."""
        for food in self.foods:
            if food.id == food_id:
                return food
        return None

    def search_products(self, query: str, limit: int = MAX_RESULTS) -> list[Product]:
        """Search the catalog and return matches as products."""
        return [to_product(food) for food in self.search_foods(query, limit)]


def to_product(food: CatalogFood) -> Product:
    """Convert a catalog entry to a local-source product."""
    size = format_amount(food.serving_size)
    if food.serving_unit == DEFAULT_UNIT:
        serving = f"{size}g"
    else:
        serving = f"1 {food.serving_unit} ({size}g)"
    return Product(
        name=food.name,
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fat=food.fat,
        serving=serving,
        serving_size=food.serving_size,
        serving_unit=food.serving_unit,
        barcode=food.id,
        source=SourceName.LOCAL.value,
    )


@cache
def _default_foods() -> list[CatalogFood]:
    return build_catalog(BASE_FOODS)
