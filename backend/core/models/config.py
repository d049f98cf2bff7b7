"""Signal engine configuration models."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from core.models.signal import Direction, Directive

T = TypeVar("T")

# Canonical timeframe labels, shortest to longest.
TIMEFRAMES: tuple[str, ...] = ("5m", "15m", "1h", "2h", "4h", "6h", "1d")

MIN_LEVERAGE = 30
MAX_LEVERAGE = 50


class WindowSelector(BaseModel):
    """Contiguous window over a timeframe series.

    ``leading`` selects the first ``size`` entries (low timeframes),
    ``trailing`` the last ``size`` entries (high timeframes) and ``all``
    the whole series.
    """

    model_config = ConfigDict(frozen=True)

    anchor: Literal["leading", "trailing", "all"] = "leading"
    size: int = Field(default=3, ge=1)

    @classmethod
    def leading(cls, size: int) -> WindowSelector:
        return cls(anchor="leading", size=size)

    @classmethod
    def trailing(cls, size: int) -> WindowSelector:
        return cls(anchor="trailing", size=size)

    @classmethod
    def full(cls) -> WindowSelector:
        return cls(anchor="all", size=len(TIMEFRAMES))

    @classmethod
    def parse(cls, text: str) -> WindowSelector:
        """Parse ``leading:N``, ``trailing:N`` or ``all``.

        Raises:
            ValueError: If the text is not one of the accepted forms.
        """
        value = text.strip().lower()
        if value == "all":
            return cls.full()
        anchor, sep, size = value.partition(":")
        if not sep or anchor not in ("leading", "trailing") or not size.isdigit():
            raise ValueError(
                f"window must be 'leading:N', 'trailing:N' or 'all', got '{text}'"
            )
        return cls(anchor=anchor, size=int(size))

    def select(self, items: Sequence[T]) -> list[T]:
        """Return the window's slice of ``items``."""
        if self.anchor == "all":
            return list(items)
        if self.anchor == "leading":
            return list(items[: self.size])
        return list(items[-self.size :])

    def __str__(self) -> str:
        if self.anchor == "all":
            return "all"
        return f"{self.anchor}:{self.size}"


class EngineConfig(BaseModel):
    """Windows and price-level parameters for one engine variant."""

    model_config = ConfigDict(frozen=True)

    direction_window: WindowSelector = WindowSelector.leading(3)
    leverage_window: WindowSelector = WindowSelector.trailing(3)

    # Target move in the trade direction (1.7%)
    target_pct: Decimal = Decimal("0.017")

    # Margin-loss budget; stop distance = stop_budget / leverage
    stop_budget: Decimal = Decimal("0.15")


class FallbackDefaults(BaseModel):
    """Pre-agreed values substituted when sources or computation fail."""

    model_config = ConfigDict(frozen=True)

    # Entry price used when the spot-price source is unavailable
    entry_price: int = Field(default=119500, gt=0)

    # Static directive returned on total failure
    direction: Direction = Direction.LONG
    target_price: int = 121500
    stop_price: int = 119200
    leverage: int = Field(default=MIN_LEVERAGE, ge=MIN_LEVERAGE, le=MAX_LEVERAGE)

    # Ticker response when the price source is unavailable
    ticker_price: int = 113279
    ticker_change_24h: float = -2.76

    def directive(self) -> Directive:
        """Build the fully static fallback directive."""
        return Directive(
            direction=self.direction,
            entry_price=self.entry_price,
            target_price=self.target_price,
            stop_price=self.stop_price,
            leverage=self.leverage,
        )


# Direction from the three lowest timeframes.
SCALP = EngineConfig()

# Direction from the sum over every timeframe.
CONSENSUS = EngineConfig(direction_window=WindowSelector.full())

ENGINE_VARIANTS: dict[str, EngineConfig] = {
    "scalp": SCALP,
    "consensus": CONSENSUS,
}
