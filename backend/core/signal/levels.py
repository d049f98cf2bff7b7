"""Target and stop prices for a directive."""

from dataclasses import dataclass
from decimal import Decimal

from core.models.signal import Direction
from core.signal.rounding import round_half_up, to_decimal


@dataclass(frozen=True)
class PriceLevels:
    """Integer target and stop prices."""
    target_price: int
    stop_price: int


class PriceLevelCalculator:
    """Compute target and stop around an entry price.

    The target is a fixed fractional move in the trade direction. The stop
    sits ``stop_budget / leverage`` against it, so higher leverage gives a
    tighter stop for the same margin-loss budget.
    """

    def __init__(
        self,
        target_pct: Decimal = Decimal("0.017"),
        stop_budget: Decimal = Decimal("0.15"),
    ):
        self.target_pct = target_pct
        self.stop_budget = stop_budget

    def stop_threshold(self, leverage: int) -> Decimal:
        if leverage <= 0:
            raise ValueError(f"leverage must be positive, got {leverage}")
        return self.stop_budget / Decimal(leverage)

    def compute(
        self,
        entry_price: int | float | Decimal,
        direction: Direction,
        leverage: int,
    ) -> PriceLevels:
        """
        Args:
            entry_price: Entry price (> 0)
            direction: Trade direction
            leverage: Leverage multiplier (> 0)

        Returns:
            PriceLevels rounded half-up to whole price units

        Raises:
            ValueError: If entry_price or leverage is not positive
        """
        entry = to_decimal(entry_price)
        if not entry > 0:
            raise ValueError(f"entry_price must be positive, got {entry_price}")
        stop = self.stop_threshold(leverage)

        if direction == Direction.LONG:
            target = entry * (1 + self.target_pct)
            stop_price = entry * (1 - stop)
        else:
            target = entry * (1 - self.target_pct)
            stop_price = entry * (1 + stop)

        return PriceLevels(
            target_price=round_half_up(target),
            stop_price=round_half_up(stop_price),
        )
