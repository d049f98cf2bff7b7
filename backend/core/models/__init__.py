"""Data models for the signal engine."""

from core.models.signal import (
    Direction,
    Directive,
    IndicatorCount,
    PriceQuote,
    PriceTicker,
    Report,
)
from core.models.config import (
    CONSENSUS,
    ENGINE_VARIANTS,
    MAX_LEVERAGE,
    MIN_LEVERAGE,
    SCALP,
    TIMEFRAMES,
    EngineConfig,
    FallbackDefaults,
    WindowSelector,
)

__all__ = [
    "Direction",
    "Directive",
    "IndicatorCount",
    "PriceQuote",
    "PriceTicker",
    "Report",
    "CONSENSUS",
    "ENGINE_VARIANTS",
    "MAX_LEVERAGE",
    "MIN_LEVERAGE",
    "SCALP",
    "TIMEFRAMES",
    "EngineConfig",
    "FallbackDefaults",
    "WindowSelector",
]
