"""Directional verdict from a window of indicator counts."""

from core.models.config import WindowSelector
from core.models.signal import Direction
from core.signal.series import TimeframeSeries


class DirectionResolver:
    """Reduce a window of timeframes to LONG or SHORT.

    Neutral votes are ignored. A balanced window, including one with no
    votes at all, resolves to SHORT. That tie-break is a conservative
    policy choice kept for compatibility with existing consumers.
    """

    def __init__(self, window: WindowSelector | None = None):
        self.window = window or WindowSelector.leading(3)

    def resolve(self, series: TimeframeSeries, window: WindowSelector | None = None) -> Direction:
        up, down = series.totals(window or self.window)
        if up > down:
            return Direction.LONG
        return Direction.SHORT
