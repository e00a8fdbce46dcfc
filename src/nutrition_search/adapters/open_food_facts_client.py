"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts API interactions."""

    async def search_products(
        self, query: str, page_size: int = 25, timeout: float = 8
    ) -> dict[str, object]:
        """Search products by text and return raw API data."""

    async def get_product(self, barcode: str, timeout: float = 8) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    search_url: str
    product_url: str
    user_agent: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, search_url: str, product_url: str, user_agent: str
    ) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            search_url=search_url,
            product_url=product_url,
            user_agent=user_agent,
            http_client=httpx.AsyncClient(headers={"User-Agent": user_agent}),
        )

    async def search_products(
        self, query: str, page_size: int = 25, timeout: float = 8
    ) -> dict[str, object]:
        """Search the world catalog, most scanned products first."""
        response = await self.http_client.get(
            self.search_url,
            params={
                "search_terms": query,
                "search_simple": "1",
                "action": "process",
                "json": "1",
                "page_size": str(page_size),
                "sort_by": "unique_scans_n",
            },
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    async def get_product(self, barcode: str, timeout: float = 8) -> dict[str, object]:
        """Fetch a single product by barcode."""
        response = await self.http_client.get(
            f"{self.product_url}/{barcode}.json", timeout=timeout
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
