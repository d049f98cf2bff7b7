"""Signal service: concurrent data acquisition feeding the signal engine.

Indicator counts and spot price come from independent sources. Both are
requested at the same time, each under its own timeout, and a failing
source only costs its own input: the engine substitutes defaults for
whatever is missing.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Protocol, Sequence

from app.clients import CoinalyzeClient, CoinGeckoClient
from app.config import Settings
from core.models import (
    ENGINE_VARIANTS,
    Directive,
    FallbackDefaults,
    PriceTicker,
    Report,
)
from core.signal import SignalEngine

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = "scalp"


class IndicatorSource(Protocol):
    async def get_indicator_counts(self) -> Sequence[Sequence[int]]: ...


class PriceSource(Protocol):
    async def get_price(self) -> float: ...

    async def get_ticker(self) -> PriceTicker: ...


class SignalService:
    """Acquire inputs concurrently and produce directives and tickers."""

    def __init__(
        self,
        indicator_source: IndicatorSource,
        price_source: PriceSource,
        defaults: FallbackDefaults | None = None,
        engines: dict[str, SignalEngine] | None = None,
        source_timeout: float = 10.0,
    ):
        self.indicator_source = indicator_source
        self.price_source = price_source
        self.defaults = defaults or FallbackDefaults()
        self.engines = engines or {
            name: SignalEngine(config, self.defaults)
            for name, config in ENGINE_VARIANTS.items()
        }
        self.source_timeout = source_timeout

    @property
    def variants(self) -> list[str]:
        return list(self.engines)

    async def _acquire(self, name: str, fetch: Callable[[], Awaitable[Any]]) -> Any | None:
        """Run one source call under the timeout; ``None`` if it fails."""
        try:
            return await asyncio.wait_for(fetch(), timeout=self.source_timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{name} source timed out after {self.source_timeout:.1f}s")
        except Exception as e:
            logger.warning(f"{name} source failed: {e}")
        return None

    async def get_directive(self, variant: str = DEFAULT_VARIANT) -> Directive:
        """
        Produce a directive for the named engine variant.

        Raises:
            ValueError: If the variant is unknown
        """
        engine = self.engines.get(variant)
        if engine is None:
            raise ValueError(f"variant must be one of {self.variants}, got '{variant}'")

        counts, price = await asyncio.gather(
            self._acquire("Indicator", self.indicator_source.get_indicator_counts),
            self._acquire("Price", self.price_source.get_price),
        )
        return engine.produce(counts, price)

    async def get_ticker(self) -> PriceTicker:
        """Spot price and 24h change, or the fallback ticker."""
        ticker = await self._acquire("Ticker", self.price_source.get_ticker)
        if ticker is None:
            return PriceTicker(
                price=self.defaults.ticker_price,
                change24h=self.defaults.ticker_change_24h,
            )
        return ticker

    async def get_report(self, variant: str = DEFAULT_VARIANT) -> Report:
        """Ticker and directive, acquired concurrently."""
        ticker, directive = await asyncio.gather(
            self.get_ticker(),
            self.get_directive(variant),
        )
        return Report(ticker=ticker, directive=directive)

    async def close(self) -> None:
        """Close source clients that hold connections."""
        for source in (self.indicator_source, self.price_source):
            close = getattr(source, "close", None)
            if close is not None:
                await close()


def create_signal_service(settings: Settings) -> SignalService:
    """Wire clients and engine variants from settings."""
    defaults = settings.fallback_defaults()
    scalp = settings.engine_config()
    consensus = ENGINE_VARIANTS["consensus"].model_copy(
        update={"leverage_window": scalp.leverage_window}
    )
    return SignalService(
        indicator_source=CoinalyzeClient(
            base_url=settings.coinalyze_url,
            user_agent=settings.user_agent,
            timeout=settings.source_timeout,
        ),
        price_source=CoinGeckoClient(
            coin_id=settings.coin_id,
            vs_currency=settings.vs_currency,
            base_url=settings.coingecko_url,
            user_agent=settings.user_agent,
            timeout=settings.source_timeout,
        ),
        defaults=defaults,
        engines={
            "scalp": SignalEngine(scalp, defaults),
            "consensus": SignalEngine(consensus, defaults),
        },
        source_timeout=settings.source_timeout,
    )
