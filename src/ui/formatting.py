# src/ui/formatting.py
from __future__ import annotations


def _grouped(value: float, min_decimals: int, max_decimals: int) -> str:
    """en-US grouping with trailing zeros trimmed back to min_decimals."""
    text = f"{abs(value):,.{max_decimals}f}"
    if max_decimals > min_decimals:
        whole, _, frac = text.partition(".")
        frac = frac.rstrip("0")
        if len(frac) < min_decimals:
            frac = frac.ljust(min_decimals, "0")
        text = f"{whole}.{frac}" if frac else whole
    return text


def format_number(value: float) -> str:
    """e.g. 13745.454545 -> '13,745.4545', 24 -> '24.00'."""
    sign = "-" if value < 0 else ""
    return f"{sign}{_grouped(value, 2, 4)}"


def format_usd(value: float) -> str:
    """e.g. 0.05 -> '$0.05', -1234.5 -> '-$1,234.50'."""
    sign = "-" if value < 0 else ""
    return f"{sign}${_grouped(value, 2, 4)}"


def format_percent(value: float) -> str:
    """Two fixed decimals, no % sign (the caller appends it)."""
    return f"{value:,.2f}"
