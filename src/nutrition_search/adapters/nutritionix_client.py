"""Nutritionix API v2 client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

API_BASE = "https://trackapi.nutritionix.com/v2"


class NutritionixClient(Protocol):
    """Interface for Nutritionix API interactions."""

    def is_configured(self) -> bool:
        """Return True when API credentials are present."""

    async def instant_search(self, query: str, timeout: float = 5) -> dict[str, object]:
        """Run an instant (autocomplete) search and return raw API data."""

    async def natural_nutrients(
        self, query: str, timeout: float = 5
    ) -> dict[str, object]:
        """Resolve a natural-language food list to full nutrients."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str | None
    app_key: str | None
    http_client: httpx.AsyncClient
    base_url: str = API_BASE

    @classmethod
    def create(
        cls, app_id: str | None, app_key: str | None
    ) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(app_id=app_id, app_key=app_key, http_client=httpx.AsyncClient())

    def is_configured(self) -> bool:
        """Return True when both app id and key are set."""
        return bool(self.app_id and self.app_key)

    async def instant_search(self, query: str, timeout: float = 5) -> dict[str, object]:
        """Search common and branded foods by name."""
        response = await self.http_client.get(
            f"{self.base_url}/search/instant",
            params={"query": query},
            headers=self._auth_headers(),
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def natural_nutrients(
        self, query: str, timeout: float = 5
    ) -> dict[str, object]:
        """Fetch full nutrients for a comma-separated list of foods."""
        response = await self.http_client.post(
            f"{self.base_url}/natural/nutrients",
            json={"query": query},
            headers=self._auth_headers(),
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    def _auth_headers(self) -> dict[str, str]:
        return {"x-app-id": self.app_id or "", "x-app-key": self.app_key or ""}

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
