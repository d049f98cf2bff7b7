"""Shared async HTTP plumbing for data-source clients."""

from typing import Any

import httpx


class SourceError(Exception):
    """A data source answered, but with a payload that cannot be used."""


class HttpSourceClient:
    """Lazily created ``httpx.AsyncClient`` with a fixed User-Agent."""

    BASE_URL = ""

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str = "",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or self.BASE_URL
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {}
            if self.user_agent:
                headers["User-Agent"] = self.user_agent
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, endpoint: str = "", params: dict[str, Any] | None = None) -> httpx.Response:
        """GET ``endpoint`` and raise on a non-success status."""
        client = await self._get_client()
        response = await client.get(endpoint, params=params)
        response.raise_for_status()
        return response

    async def _get_json(self, endpoint: str = "", params: dict[str, Any] | None = None) -> Any:
        response = await self._get(endpoint, params)
        try:
            return response.json()
        except ValueError as e:
            raise SourceError(f"{self.base_url}{endpoint} returned invalid JSON") from e
