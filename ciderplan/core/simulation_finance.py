# ciderplan/core/simulation_finance.py
from __future__ import annotations

from typing import Callable, Optional, Sequence

from ciderplan.core.cost_models import YearlyProjection
from ciderplan.core.year_projector import safe_divide


def find_breakeven_year(projections: Sequence[YearlyProjection]) -> Optional[int]:
    """
    Return the 0-based index of the first year whose cumulative cash flow is
    positive, or None if the projection never turns cash-positive.
    """
    for idx, projection in enumerate(projections):
        if projection.cumulative_cash_flow > 0:
            return idx
    return None


def calculate_payback_period(
    projections: Sequence[YearlyProjection],
    breakeven_year: Optional[int],
) -> Optional[float]:
    """
    Interpolate the fractional year at which cumulative cash crosses zero.

    Only defined when breakeven happens after the first year; a scenario that
    is cash-positive from year one has no bracketing negative year, so the
    payback stays None.
    """
    if breakeven_year is None or breakeven_year <= 0:
        return None

    previous = projections[breakeven_year - 1].cumulative_cash_flow
    current = projections[breakeven_year].cumulative_cash_flow
    ratio = safe_divide(abs(previous), current - previous)
    return (breakeven_year - 1) + ratio


def calculate_roi_percent(total_net_income: float, depreciation_yearly: float) -> float:
    """
    ROI against the initial investment proxy (|yearly depreciation|), in %.
    """
    initial_investment = abs(depreciation_yearly)
    return safe_divide(total_net_income, initial_investment) * 100.0


def calculate_revenue_weighted_margin(
    projections: Sequence[YearlyProjection],
    numerator: Callable[[YearlyProjection], float],
) -> float:
    """
    Compute a revenue-weighted average margin in %, i.e. the summed numerator
    over summed revenue. Small early years do not get the same weight as
    mature years, unlike a plain mean of yearly percentages.
    """
    total_revenue = sum(p.total_revenue for p in projections)
    total_numerator = sum(numerator(p) for p in projections)
    return safe_divide(total_numerator, total_revenue) * 100.0
