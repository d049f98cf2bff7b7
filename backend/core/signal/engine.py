"""Signal engine: indicator counts and spot price to a trading directive.

This module is pure business logic with no I/O dependencies. Data
acquisition (scraping, price APIs) happens in the caller, which hands
whatever it obtained to ``SignalEngine.produce``.

Fallback policy:
- An *absent* input (``None``, or a non-positive price) is replaced
  field by field: zero counts, ``FallbackDefaults.entry_price``. The
  normal computation then runs on the substituted values.
- An *unusable* input (malformed triples, negative counts, a non-numeric
  price) or any error inside the computation short-circuits to the static
  ``FallbackDefaults.directive()``.
"""

import logging
import math
from decimal import Decimal
from typing import Iterable

from core.models.config import SCALP, EngineConfig, FallbackDefaults
from core.models.signal import Directive, PriceQuote
from core.signal.direction import DirectionResolver
from core.signal.levels import PriceLevelCalculator
from core.signal.leverage import LeverageResolver
from core.signal.rounding import round_half_up
from core.signal.series import RawCount, TimeframeSeries

logger = logging.getLogger(__name__)

SpotPrice = int | float | Decimal | PriceQuote


class SignalEngine:
    """Orchestrates direction, leverage and price levels into a Directive."""

    def __init__(
        self,
        config: EngineConfig = SCALP,
        defaults: FallbackDefaults | None = None,
    ):
        self.config = config
        self.defaults = defaults or FallbackDefaults()
        self.direction_resolver = DirectionResolver(config.direction_window)
        self.leverage_resolver = LeverageResolver(config.leverage_window)
        self.level_calculator = PriceLevelCalculator(
            target_pct=config.target_pct,
            stop_budget=config.stop_budget,
        )

    def produce(
        self,
        raw_counts: Iterable[RawCount] | None = None,
        spot_price: SpotPrice | None = None,
    ) -> Directive:
        """Derive a directive. Never raises."""
        try:
            series = TimeframeSeries.build(raw_counts)
            price = self._resolve_price(spot_price)
            return self._compute(series, price)
        except Exception:
            logger.exception("Signal computation failed, returning static fallback directive")
            return self.defaults.directive()

    def _resolve_price(self, spot_price: SpotPrice | None) -> float | Decimal:
        if spot_price is None:
            logger.debug(f"No spot price, using fallback entry {self.defaults.entry_price}")
            return self.defaults.entry_price
        if isinstance(spot_price, PriceQuote):
            return spot_price.price
        if isinstance(spot_price, bool) or not isinstance(spot_price, (int, float, Decimal)):
            raise TypeError(f"spot price must be numeric, got {type(spot_price).__name__}")
        if not math.isfinite(spot_price):
            raise ValueError(f"spot price must be finite, got {spot_price}")
        if spot_price <= 0:
            logger.debug(
                f"Non-positive spot price {spot_price}, "
                f"using fallback entry {self.defaults.entry_price}"
            )
            return self.defaults.entry_price
        return spot_price

    def _compute(self, series: TimeframeSeries, price: float | Decimal) -> Directive:
        direction = self.direction_resolver.resolve(series)
        leverage = self.leverage_resolver.resolve(series, direction)
        levels = self.level_calculator.compute(price, direction, leverage)

        directive = Directive(
            direction=direction,
            entry_price=round_half_up(price),
            target_price=levels.target_price,
            stop_price=levels.stop_price,
            leverage=leverage,
        )
        logger.debug(
            f"Directive {directive.direction.name} entry={directive.entry_price} "
            f"target={directive.target_price} stop={directive.stop_price} "
            f"leverage={directive.leverage}x"
        )
        return directive
