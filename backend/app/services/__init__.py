"""Business services."""

from app.services.signal_service import (
    DEFAULT_VARIANT,
    IndicatorSource,
    PriceSource,
    SignalService,
    create_signal_service,
)

__all__ = [
    "DEFAULT_VARIANT",
    "IndicatorSource",
    "PriceSource",
    "SignalService",
    "create_signal_service",
]
