"""CoinGecko simple-price client."""

import logging
import math
from typing import Any

from app.clients.http import HttpSourceClient, SourceError
from core.models import PriceTicker
from core.signal import round_half_up

logger = logging.getLogger(__name__)


class CoinGeckoClient(HttpSourceClient):
    """Spot-price source backed by ``/simple/price``."""

    BASE_URL = "https://api.coingecko.com/api/v3"

    def __init__(self, coin_id: str = "bitcoin", vs_currency: str = "usd", **kwargs):
        super().__init__(**kwargs)
        self.coin_id = coin_id
        self.vs_currency = vs_currency

    async def _simple_price(self, include_change: bool = False) -> dict[str, Any]:
        params = {"ids": self.coin_id, "vs_currencies": self.vs_currency}
        if include_change:
            params["include_24hr_change"] = "true"
        data = await self._get_json("/simple/price", params)
        entry = data.get(self.coin_id) if isinstance(data, dict) else None
        if not isinstance(entry, dict):
            raise SourceError(f"CoinGecko response has no '{self.coin_id}' entry")
        return entry

    @staticmethod
    def _number(entry: dict[str, Any], key: str) -> float:
        value = entry.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SourceError(f"CoinGecko response field '{key}' is not a number: {value!r}")
        if not math.isfinite(value):
            raise SourceError(f"CoinGecko response field '{key}' is not finite: {value!r}")
        return float(value)

    async def get_price(self) -> float:
        """
        Fetch the current spot price.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status
            SourceError: If the body lacks a numeric price
        """
        entry = await self._simple_price()
        return self._number(entry, self.vs_currency)

    async def get_ticker(self) -> PriceTicker:
        """Fetch spot price (rounded to whole units) and 24h change in percent."""
        entry = await self._simple_price(include_change=True)
        price = self._number(entry, self.vs_currency)
        change_key = f"{self.vs_currency}_24h_change"
        change = 0.0 if entry.get(change_key) is None else self._number(entry, change_key)
        return PriceTicker(price=round_half_up(price), change24h=change)
