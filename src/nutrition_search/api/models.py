"""Response models for the search API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    micronutrients: dict[str, float] = Field(default_factory=dict)
    serving: str | None = None
    serving_size: float | None = None
    serving_unit: str | None = None
    brand: str | None = None
    barcode: str | None = None
    image: str | None = None
    source: str | None = None


class SearchResponse(BaseModel):
    products: list[ProductModel]
    count: int
    sources: dict[str, int]


class RecentSearchModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    term: str
    timestamp: datetime
    result_count: int


class TrendingTermModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    term: str
    frequency: int
    last_searched: datetime
