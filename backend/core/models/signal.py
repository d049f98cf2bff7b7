"""Indicator count and directive data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Direction(int, Enum):
    """Trade direction."""

    LONG = 1
    SHORT = -1


class IndicatorCount(BaseModel):
    """One timeframe's tally of bullish, bearish and neutral indicators."""

    model_config = ConfigDict(frozen=True)

    timeframe: str
    up: int = Field(default=0, ge=0, strict=True)
    down: int = Field(default=0, ge=0, strict=True)
    neutral: int = Field(default=0, ge=0, strict=True)

    @property
    def total(self) -> int:
        """Number of directional (non-neutral) votes."""
        return self.up + self.down


class PriceQuote(BaseModel):
    """Spot price supplied by a market-data source."""

    model_config = ConfigDict(frozen=True)

    price: float = Field(gt=0, allow_inf_nan=False)


class PriceTicker(BaseModel):
    """Spot price plus its 24-hour percentage change."""

    model_config = ConfigDict(frozen=True)

    price: int
    change24h: float


class Directive(BaseModel):
    """The engine's output: direction, leverage and integer price levels."""

    model_config = ConfigDict(frozen=True)

    direction: Direction
    entry_price: int
    target_price: int
    stop_price: int
    leverage: int = Field(ge=30, le=50)

    @field_serializer("direction")
    def _direction_name(self, direction: Direction) -> str:
        return direction.name

    @property
    def target_percent(self) -> float:
        """Distance from entry to target as a percentage of entry."""
        if self.entry_price == 0:
            return 0.0
        return abs(self.target_price - self.entry_price) / self.entry_price * 100


class Report(BaseModel):
    """Ticker and directive acquired together for one request."""

    model_config = ConfigDict(frozen=True)

    ticker: PriceTicker
    directive: Directive
