"""Conversion of SEK/kWh prices to rounded öre values for output."""

from decimal import ROUND_HALF_UP, Decimal

from spotpris.config import DISPLAY_SCALE

TWO_PLACES = Decimal("0.01")


def to_display_value(price_per_unit: float) -> Decimal:
    """Scale a SEK/kWh price to öre/kWh and round half up to 2 decimals.

    The float is taken at its shortest repr so that 0.12345 rounds as the
    decimal 12.345 rather than its binary neighbour.
    """
    scaled = Decimal(repr(float(price_per_unit))) * DISPLAY_SCALE
    rounded = scaled.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    # No "-0.00" for tiny negative prices
    return rounded.copy_abs() if rounded.is_zero() else rounded


def to_display_unit(price_per_unit: float, decimal_separator: str = ".") -> str:
    """Format a SEK/kWh price as an öre string with exactly two decimals.

    Examples:
        >>> to_display_unit(0.12345)
        '12.35'
        >>> to_display_unit(1.5, decimal_separator=",")
        '150,00'
    """
    text = f"{to_display_value(price_per_unit):.2f}"
    if decimal_separator != ".":
        text = text.replace(".", decimal_separator)
    return text
