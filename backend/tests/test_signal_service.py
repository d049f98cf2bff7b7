"""Tests for SignalService concurrent acquisition and fallbacks."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from app.clients import CoinalyzeClient, CoinGeckoClient, SourceError
from app.config import Settings
from app.services import SignalService, create_signal_service
from core.models import Direction, FallbackDefaults, PriceTicker, WindowSelector

BULLISH = [(10, 2, 0), (9, 3, 0), (8, 4, 0), (0, 0, 0), (7, 1, 0), (6, 2, 0), (5, 3, 0)]


@pytest.fixture
def indicator_source():
    source = MagicMock()
    source.get_indicator_counts = AsyncMock(return_value=BULLISH)
    return source


@pytest.fixture
def price_source():
    source = MagicMock()
    source.get_price = AsyncMock(return_value=100000.0)
    source.get_ticker = AsyncMock(return_value=PriceTicker(price=100000, change24h=1.25))
    return source


@pytest.fixture
def service(indicator_source, price_source):
    return SignalService(indicator_source, price_source, source_timeout=1.0)


class TestGetDirective:
    """Tests for SignalService.get_directive."""

    @pytest.mark.asyncio
    async def test_both_sources_available(self, service, indicator_source, price_source):
        directive = await service.get_directive()

        assert directive.direction == Direction.LONG
        assert directive.leverage == 45
        assert directive.entry_price == 100000
        assert directive.target_price == 101700
        indicator_source.get_indicator_counts.assert_awaited_once()
        price_source.get_price.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_indicator_failure_keeps_price(self, service, indicator_source):
        indicator_source.get_indicator_counts.side_effect = httpx.ConnectError("down")

        directive = await service.get_directive()

        assert directive.direction == Direction.SHORT
        assert directive.leverage == 30
        assert directive.entry_price == 100000

    @pytest.mark.asyncio
    async def test_price_failure_keeps_counts(self, service, price_source):
        price_source.get_price.side_effect = SourceError("no price")

        directive = await service.get_directive()

        assert directive.direction == Direction.LONG
        assert directive.leverage == 45
        assert directive.entry_price == 119500

    @pytest.mark.asyncio
    async def test_non_finite_price_keeps_counts(self, indicator_source):
        transport = httpx.MockTransport(
            lambda r: httpx.Response(200, content=b'{"bitcoin": {"usd": NaN}}')
        )
        price_source = CoinGeckoClient(transport=transport)
        service = SignalService(indicator_source, price_source, source_timeout=1.0)

        directive = await service.get_directive()
        await price_source.close()

        assert directive.direction == Direction.LONG
        assert directive.leverage == 45
        assert directive.entry_price == 119500
        assert directive.target_price == 121532

    @pytest.mark.asyncio
    async def test_price_timeout_does_not_block_counts(self, indicator_source, price_source):
        async def slow_price():
            await asyncio.sleep(5)
            return 1.0

        price_source.get_price = slow_price
        service = SignalService(indicator_source, price_source, source_timeout=0.05)

        directive = await service.get_directive()

        assert directive.direction == Direction.LONG
        assert directive.entry_price == 119500

    @pytest.mark.asyncio
    async def test_both_sources_down(self, service, indicator_source, price_source):
        indicator_source.get_indicator_counts.side_effect = httpx.ReadTimeout("slow")
        price_source.get_price.side_effect = httpx.HTTPStatusError(
            "503", request=httpx.Request("GET", "http://x"), response=httpx.Response(503)
        )

        directive = await service.get_directive()

        assert directive.direction == Direction.SHORT
        assert directive.leverage == 30
        assert directive.entry_price == 119500
        assert directive.target_price == 117469
        assert directive.stop_price == 120098

    @pytest.mark.asyncio
    async def test_sources_run_concurrently(self, indicator_source, price_source):
        async def slow_counts():
            await asyncio.sleep(0.2)
            return BULLISH

        async def slow_price():
            await asyncio.sleep(0.2)
            return 100000.0

        indicator_source.get_indicator_counts = slow_counts
        price_source.get_price = slow_price
        service = SignalService(indicator_source, price_source, source_timeout=2.0)

        loop = asyncio.get_running_loop()
        started = loop.time()
        directive = await service.get_directive()
        elapsed = loop.time() - started

        assert directive.entry_price == 100000
        assert elapsed < 0.35

    @pytest.mark.asyncio
    async def test_consensus_variant(self, service, indicator_source):
        indicator_source.get_indicator_counts.return_value = [(0, 5, 0)] * 3 + [(10, 0, 0)] * 4

        scalp = await service.get_directive("scalp")
        consensus = await service.get_directive("consensus")

        assert scalp.direction == Direction.SHORT
        assert consensus.direction == Direction.LONG
        assert consensus.leverage == 50

    @pytest.mark.asyncio
    async def test_unknown_variant(self, service):
        with pytest.raises(ValueError, match="variant"):
            await service.get_directive("swing")

    @pytest.mark.asyncio
    async def test_custom_defaults(self, indicator_source, price_source):
        price_source.get_price.side_effect = SourceError("no price")
        service = SignalService(
            indicator_source,
            price_source,
            defaults=FallbackDefaults(entry_price=80000),
        )

        directive = await service.get_directive()
        assert directive.entry_price == 80000


class TestGetTicker:
    """Tests for SignalService.get_ticker."""

    @pytest.mark.asyncio
    async def test_ticker(self, service):
        ticker = await service.get_ticker()
        assert ticker == PriceTicker(price=100000, change24h=1.25)

    @pytest.mark.asyncio
    async def test_ticker_fallback(self, service, price_source):
        price_source.get_ticker.side_effect = httpx.ConnectError("down")

        ticker = await service.get_ticker()

        assert ticker.price == 113279
        assert ticker.change24h == -2.76


class TestGetReport:
    """Tests for SignalService.get_report."""

    @pytest.mark.asyncio
    async def test_report(self, service):
        report = await service.get_report()

        assert report.ticker.price == 100000
        assert report.directive.direction == Direction.LONG

    @pytest.mark.asyncio
    async def test_ticker_failure_does_not_affect_directive(self, service, price_source):
        price_source.get_ticker.side_effect = SourceError("bad body")

        report = await service.get_report()

        assert report.ticker.price == 113279
        assert report.directive.entry_price == 100000


class TestLifecycle:
    """Tests for service wiring and shutdown."""

    @pytest.mark.asyncio
    async def test_close_closes_sources(self, service, indicator_source, price_source):
        indicator_source.close = AsyncMock()
        price_source.close = AsyncMock()

        await service.close()

        indicator_source.close.assert_awaited_once()
        price_source.close.assert_awaited_once()

    def test_create_from_settings(self):
        settings = Settings(
            _env_file=None,
            coin_id="ethereum",
            source_timeout=3.0,
            leverage_window="trailing:2",
            fallback_entry_price=3000,
        )
        service = create_signal_service(settings)

        assert isinstance(service.indicator_source, CoinalyzeClient)
        assert isinstance(service.price_source, CoinGeckoClient)
        assert service.price_source.coin_id == "ethereum"
        assert service.source_timeout == 3.0
        assert service.defaults.entry_price == 3000
        assert service.variants == ["scalp", "consensus"]

        consensus = service.engines["consensus"].config
        assert consensus.direction_window == WindowSelector.full()
        assert consensus.leverage_window == WindowSelector.trailing(2)
        assert service.engines["scalp"].config.leverage_window == WindowSelector.trailing(2)
