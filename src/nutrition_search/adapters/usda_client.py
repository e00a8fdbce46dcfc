"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

DATA_TYPES = ["SR Legacy", "Foundation", "Branded", "Survey (FNDDS)"]
NUTRIENT_NUMBERS = [
    "1008", "1003", "1004", "1005",
    "1079", "2000", "1093",
    "1258", "1257", "1253",
    "1087", "1089", "1090", "1091", "1092",
    "1095", "1098", "1101", "1103",
    "1106", "1162", "1114", "1109", "1185",
    "1165", "1166", "1167", "1170",
    "1175", "1177", "1178",
]  # fmt: skip


class UsdaClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self, query: str, page_size: int = 25, timeout: float = 15
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int, timeout: float = 15) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""


@dataclass
class HttpxUsdaClient(UsdaClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxUsdaClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(
        self, query: str, page_size: int = 25, timeout: float = 15
    ) -> dict[str, object]:
        """Search foods across all data types."""
        url = f"{self.base_url}/foods/search"
        response = await self.http_client.post(
            url,
            params={"api_key": self.api_key},
            json={
                "query": query,
                "pageSize": page_size,
                "pageNumber": 1,
                "sortBy": "dataType.keyword",
                "sortOrder": "asc",
                "dataType": DATA_TYPES,
                "nutrientNumbers": NUTRIENT_NUMBERS,
            },
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, fdc_id: int, timeout: float = 15) -> dict[str, object]:
        """Fetch a food by FDC id."""
        url = f"{self.base_url}/food/{fdc_id}"
        response = await self.http_client.get(
            url,
            params={"api_key": self.api_key, "nutrients": ",".join(NUTRIENT_NUMBERS)},
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
