"""Half-up rounding to integer price and leverage units."""

from decimal import ROUND_HALF_UP, Decimal

_UNIT = Decimal("1")


def to_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a number to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: int | float | Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(to_decimal(value).quantize(_UNIT, rounding=ROUND_HALF_UP))
