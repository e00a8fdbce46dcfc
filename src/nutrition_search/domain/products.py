"""Product domain models shared by every food source."""

from dataclasses import dataclass, field
from enum import Enum


class SourceName(Enum):
    """Food sources, declared in merge priority order."""

    LOCAL = "local"
    USDA = "usda"
    FATSECRET = "fatSecret"
    OPEN_FOOD_FACTS = "openFoodFacts"
    NUTRITIONIX = "nutritionix"


@dataclass(frozen=True)
class Product:
    """A food record as returned by a single source."""

    name: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    micronutrients: dict[str, float] = field(default_factory=dict)
    serving: str | None = None
    serving_size: float | None = None
    serving_unit: str | None = None
    brand: str | None = None
    barcode: str | None = None
    image: str | None = None
    source: str | None = None


@dataclass(frozen=True)
class NormalizedServing:
    """Per-100g view of a product's nutrition."""

    original: str
    grams_per_serving: float
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fat_per_100g: float


@dataclass(frozen=True)
class SourceResult:
    """Successful outcome of a source search."""

    products: list[Product]
    count: int


@dataclass(frozen=True)
class SourceFailure:
    """Failed outcome of a source search."""

    source: SourceName
    reason: str


SourceOutcome = SourceResult | SourceFailure


@dataclass(frozen=True)
class SearchResult:
    """Merged, deduplicated results across all sources."""

    products: list[Product]
    count: int
    sources: dict[str, int]

    @classmethod
    def empty(cls) -> "SearchResult":
        """Return a result with no products and zero source counts."""
        return cls(
            products=[],
            count=0,
            sources={source.value: 0 for source in SourceName},
        )
