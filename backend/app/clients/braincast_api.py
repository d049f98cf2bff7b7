"""Client for a deployed Braincast API.

Reads the ticker and a scalp directive from a running deployment at the
same time and normalizes whatever shape the deployment answers with.
"""

import asyncio
import logging
import math
from typing import Any

import httpx

from app.clients.http import HttpSourceClient, SourceError
from core.models import FallbackDefaults, PriceTicker, Report
from core.signal import normalize_directive, round_half_up

logger = logging.getLogger(__name__)


class BraincastClient(HttpSourceClient):
    """Read-only client for ``/api/btc-price`` and a scalp endpoint."""

    BASE_URL = "http://localhost:8000"

    def __init__(
        self,
        signal_path: str = "/api/scalp",
        defaults: FallbackDefaults | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.signal_path = signal_path
        self.defaults = defaults or FallbackDefaults()

    async def _fetch(self, endpoint: str) -> Any:
        try:
            return await self._get_json(endpoint)
        except (httpx.HTTPError, SourceError) as e:
            logger.warning(f"Request to {self.base_url}{endpoint} failed: {e}")
            return None

    def _to_ticker(self, payload: Any) -> PriceTicker:
        price = payload.get("price") if isinstance(payload, dict) else None
        if isinstance(price, bool) or not isinstance(price, (int, float)) or not math.isfinite(price):
            return PriceTicker(
                price=self.defaults.ticker_price,
                change24h=self.defaults.ticker_change_24h,
            )
        change = payload.get("change24h")
        if isinstance(change, bool) or not isinstance(change, (int, float)) or not math.isfinite(change):
            change = 0.0
        return PriceTicker(price=round_half_up(price), change24h=float(change))

    async def fetch_report(self) -> Report:
        """Fetch ticker and directive concurrently. Never raises on bad data."""
        ticker_payload, directive_payload = await asyncio.gather(
            self._fetch("/api/btc-price"),
            self._fetch(self.signal_path),
        )
        return Report(
            ticker=self._to_ticker(ticker_payload),
            directive=normalize_directive(directive_payload, self.defaults),
        )
