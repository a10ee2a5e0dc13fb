"""Display formatting for dashboard figures.

Amounts use Indian units (crore = 10^7, lakh = 10^5); areas are in
square metres.
"""

from __future__ import annotations

from datetime import date, datetime

CRORE = 10_000_000
LAKH = 100_000
SQ_M_PER_HECTARE = 10_000

RUPEE_SYMBOL = "₹"


def format_currency(amount: float, include_symbol: bool = True) -> str:
    """Format an amount in rupees.

    Examples:
        25_000_000 -> "₹2.50 Cr"
        450_000 -> "₹4.50 Lac"
        12_500 -> "₹12,500"
    """
    symbol = RUPEE_SYMBOL if include_symbol else ""
    if amount >= CRORE:
        return f"{symbol}{amount / CRORE:.2f} Cr"
    if amount >= LAKH:
        return f"{symbol}{amount / LAKH:.2f} Lac"
    return f"{symbol}{_grouped(amount)}"


def format_area(area: float) -> str:
    """Format an area, switching to hectares from 1 ha upwards."""
    if area >= SQ_M_PER_HECTARE:
        return f"{area / SQ_M_PER_HECTARE:.2f} Hectares"
    return f"{_grouped(area)} sq.m"


def format_percentage(value: float, decimal_places: int = 1) -> str:
    """Format a percentage value, e.g. 42.26 -> "42.3%"."""
    return f"{value:.{decimal_places}f}%"


def format_date(value: date | datetime | str | None) -> str:
    """Format a date as "DD Mon YYYY", or "N/A" when missing."""
    if value is None:
        return "N/A"
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip()[:10])
        except ValueError:
            return "N/A"
    return value.strftime("%d %b %Y")


def _grouped(number: float) -> str:
    """Thousands-separated number, without a trailing .0 for whole values."""
    if float(number).is_integer():
        return f"{int(number):,}"
    return f"{number:,.2f}"
