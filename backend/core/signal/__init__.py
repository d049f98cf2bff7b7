"""Signal derivation: series, resolvers, price levels and the engine."""

from core.signal.series import TimeframeSeries
from core.signal.direction import DirectionResolver
from core.signal.leverage import LeverageResolver
from core.signal.levels import PriceLevelCalculator, PriceLevels
from core.signal.engine import SignalEngine
from core.signal.normalize import normalize_directive, payload_shape
from core.signal.rounding import round_half_up

__all__ = [
    "TimeframeSeries",
    "DirectionResolver",
    "LeverageResolver",
    "PriceLevelCalculator",
    "PriceLevels",
    "SignalEngine",
    "normalize_directive",
    "payload_shape",
    "round_half_up",
]
