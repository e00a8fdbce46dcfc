"""Domain models for the local food catalog."""

from dataclasses import dataclass
from enum import Enum


class FoodCategory(Enum):
    """Coarse catalog category."""

    PROTEIN = "Protein"
    CARB = "Carb"
    FAT = "Fat"
    FRUIT = "Fruit"
    VEG = "Veg"
    DAIRY = "Dairy"
    SNACK = "Snack"
    DRINK = "Drink"


@dataclass(frozen=True)
class BaseFood:
    """Base table row with macros per 100g."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    category: FoodCategory
    variations: bool = False
    portion: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class CookingMethod:
    """Multiplicative modifiers for a cooking method, plus added fat per 100g."""

    name: str
    calorie_factor: float
    protein_factor: float
    carb_factor: float
    fat_added_g: float


@dataclass(frozen=True)
class CatalogFood:
    """Generated catalog entry with macros per serving."""

    id: str
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_size: float
    serving_unit: str
    category: FoodCategory
    is_verified: bool = True
