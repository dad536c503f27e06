"""
Display helpers for money, rates and durations.

Rounding is half away from zero (ROUND_HALF_UP on the magnitude), not the
banker's rounding of the built-in round().
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from calc_toolkit.data.defaults import CURRENCY_SYMBOL, MONEY_DECIMALS


def round_half_up(value: float, places: int = MONEY_DECIMALS) -> float:
    """Round to `places` decimals, ties away from zero. inf and NaN pass through."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: float) -> str:
    """
    US dollar formatting: "$1,234.57", "-$1,234.56".
    A value that rounds to zero is shown without a sign.
    """
    rounded = round_half_up(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(rounded):,.{MONEY_DECIMALS}f}"


def format_percentage(rate: float) -> str:
    return f"{round_half_up(rate):.2f}%"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_timeperiod(months: float) -> str:
    """
    Render a month count as years and months, e.g. "2 years and 1 month".

    Whole years are floor(months / 12); the remaining months are rounded, so
    13.7 becomes "1 year and 2 months". A remainder that rounds up to 12 is
    carried into the years (23.6 is "2 years"). Zero renders as "0 months".
    """
    years = math.floor(months / 12)
    remaining = math.floor(months % 12 + 0.5)
    if remaining == 12:
        years += 1
        remaining = 0

    if years == 0:
        return _plural(remaining, "month")
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} and {_plural(remaining, 'month')}"
