"""FatSecret Platform API client."""

import time
from dataclasses import dataclass
from typing import Protocol

import httpx

TOKEN_URL = "https://oauth.fatsecret.com/connect/token"
API_URL = "https://platform.fatsecret.com/rest/server.api"
TOKEN_EXPIRY_BUFFER_SECONDS = 60
DEFAULT_TOKEN_TTL_SECONDS = 86400
MAX_RESULTS = 50


class FatSecretClient(Protocol):
    """Interface for FatSecret API interactions."""

    def is_configured(self) -> bool:
        """Return True when API credentials are present."""

    async def search_foods(
        self, query: str, max_results: int = 25, timeout: float = 5
    ) -> dict[str, object]:
        """Search foods and return raw API data."""


@dataclass
class HttpxFatSecretClient(FatSecretClient):
    """HTTPX-backed FatSecret client using OAuth2 client credentials."""

    client_id: str | None
    client_secret: str | None
    http_client: httpx.AsyncClient
    token_url: str = TOKEN_URL
    api_url: str = API_URL
    _access_token: str | None = None
    _token_expires_at: float = 0.0

    @classmethod
    def create(
        cls, client_id: str | None, client_secret: str | None
    ) -> "HttpxFatSecretClient":
        """Create a FatSecret client with a managed httpx session."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            http_client=httpx.AsyncClient(),
        )

    def is_configured(self) -> bool:
        """Return True when both client id and secret are set."""
        return bool(self.client_id and self.client_secret)

    async def search_foods(
        self, query: str, max_results: int = 25, timeout: float = 5
    ) -> dict[str, object]:
        """Search foods with the v4 search method."""
        token = await self._get_access_token(timeout)
        response = await self.http_client.post(
            self.api_url,
            headers={"Authorization": f"Bearer {token}"},
            data={
                "method": "foods.search.v4",
                "search_expression": query,
                "max_results": str(min(max_results, MAX_RESULTS)),
                "page_number": "0",
                "format": "json",
                "flag_default_serving": "true",
            },
            timeout=timeout,
        )
        if response.status_code == httpx.codes.UNAUTHORIZED:
            self._access_token = None
            self._token_expires_at = 0.0
        response.raise_for_status()
        return response.json()

    async def _get_access_token(self, timeout: float) -> str:
        """Return a cached token, fetching a new one near expiry."""
        now = time.monotonic()
        if (
            self._access_token
            and now < self._token_expires_at - TOKEN_EXPIRY_BUFFER_SECONDS
        ):
            return self._access_token
        response = await self.http_client.post(
            self.token_url,
            auth=(self.client_id or "", self.client_secret or ""),
            data={"grant_type": "client_credentials", "scope": "basic"},
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()
        token = payload.get("access_token")
        if not token:
            raise RuntimeError("FatSecret token response missing access_token")
        expires_in = payload.get("expires_in") or DEFAULT_TOKEN_TTL_SECONDS
        self._access_token = str(token)
        self._token_expires_at = now + float(expires_in)
        return self._access_token

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
