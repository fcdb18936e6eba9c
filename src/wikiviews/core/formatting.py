"""Formatting utilities for domain values."""

from decimal import Decimal


def change_to_color(change: Decimal | None) -> str:
    """Map a percent change to a color name.

    Args:
        change: Percent change as a whole number, or None.

    Returns:
        Color name string:
        - positive -> "green"
        - negative -> "red"
        - zero or missing -> empty string
    """
    if change is None or change == 0:
        return ""
    return "green" if change > 0 else "red"


def format_decimal(value: Decimal | None, places: int = 2) -> str:
    """Format a decimal for display, "-" when missing.

    Integral values print without a fractional part.
    """
    if value is None:
        return "-"
    if value == value.to_integral_value():
        return f"{value:,.0f}"
    return f"{value:,.{places}f}"
