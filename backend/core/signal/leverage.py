"""Leverage from higher-timeframe consensus."""

from decimal import Decimal

from core.models.config import MAX_LEVERAGE, MIN_LEVERAGE, WindowSelector
from core.models.signal import Direction
from core.signal.rounding import round_half_up
from core.signal.series import TimeframeSeries


class LeverageResolver:
    """Map the share of window votes aligned with a direction to leverage.

    ``leverage = round(30 + 20 * aligned / (up + down))`` clamped to
    [30, 50]. A window without directional votes yields the floor.
    """

    def __init__(self, window: WindowSelector | None = None):
        self.window = window or WindowSelector.trailing(3)

    @staticmethod
    def consensus_ratio(up: int, down: int, direction: Direction) -> Decimal:
        """Fraction of directional votes aligned with ``direction`` (0 to 1)."""
        total = up + down
        if total <= 0:
            return Decimal("0")
        aligned = up if direction == Direction.LONG else down
        return Decimal(aligned) / Decimal(total)

    def resolve(
        self,
        series: TimeframeSeries,
        direction: Direction,
        window: WindowSelector | None = None,
    ) -> int:
        up, down = series.totals(window or self.window)
        ratio = self.consensus_ratio(up, down, direction)
        leverage = round_half_up(MIN_LEVERAGE + (MAX_LEVERAGE - MIN_LEVERAGE) * ratio)
        return max(MIN_LEVERAGE, min(MAX_LEVERAGE, leverage))
