"""Helper utilities for formatting numeric outputs."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ciderplan.config import settings


def _is_missing(value: Optional[float]) -> bool:
    return value is None or math.isnan(value) or math.isinf(value)


def _round_half_up(value: float, decimals: int) -> Decimal:
    quant = Decimal(1).scaleb(-decimals)
    return Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP)


def _group_number(value: float, decimals: int) -> str:
    """Round half-up and apply the configured separators, e.g. 1.234,5."""
    rounded = _round_half_up(value, decimals)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0"
    text = f"{rounded:,.{decimals}f}"
    # Swap via a placeholder so "." and "," can trade places.
    return (
        text.replace(",", "\0")
        .replace(".", settings.DECIMAL_SEPARATOR)
        .replace("\0", settings.THOUSANDS_SEPARATOR)
    )


def format_currency(value: Optional[float], decimals: int = 0) -> str:
    if _is_missing(value):
        return settings.MISSING_VALUE_TEXT
    return f"{_group_number(value, decimals)} {settings.CURRENCY_SYMBOL}"


def format_percent(value: Optional[float], decimals: int = 1) -> str:
    """Percentages are plain numbers: 37.5 -> '37.5%'."""
    if _is_missing(value):
        return settings.MISSING_VALUE_TEXT
    rounded = _round_half_up(value, decimals)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{decimals}f}%"


def format_years(value: Optional[float]) -> str:
    if _is_missing(value):
        return "No payback in horizon"
    if value < 0:
        return "N/A"
    return f"{value:,.1f} years"


def format_breakeven_year(year_index: Optional[int]) -> str:
    """Breakeven indices are 0-based; people read 'Year 1' for index 0."""
    if year_index is None:
        return "Not reached"
    return f"Year {year_index + 1}"
