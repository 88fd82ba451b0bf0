import pytest

from ciderplan.core.simulation_finance import (
    calculate_payback_period,
    calculate_revenue_weighted_margin,
    calculate_roi_percent,
    find_breakeven_year,
)


def _cash_path(make_projection, values):
    return [
        make_projection(year=i + 1, cumulative_cash_flow=value)
        for i, value in enumerate(values)
    ]


def test_find_breakeven_year_first_positive(make_projection):
    projections = _cash_path(make_projection, [-100.0, -40.0, 0.0, 25.0, 80.0])
    # zero is not yet "positive"
    assert find_breakeven_year(projections) == 3


def test_find_breakeven_year_none_when_never_positive(make_projection):
    projections = _cash_path(make_projection, [-100.0, -50.0, -1.0])
    assert find_breakeven_year(projections) is None
    assert find_breakeven_year([]) is None


def test_payback_interpolates_between_bracketing_years(make_projection):
    projections = _cash_path(make_projection, [-100.0, -30.0, 70.0])
    assert calculate_payback_period(projections, 2) == pytest.approx(1.3)


def test_payback_undefined_without_a_negative_year(make_projection):
    projections = _cash_path(make_projection, [10.0, 20.0])
    assert calculate_payback_period(projections, 0) is None
    assert calculate_payback_period(projections, None) is None


def test_roi_percent():
    assert calculate_roi_percent(75_000.0, 50_000.0) == pytest.approx(150.0)
    assert calculate_roi_percent(-25_000.0, -50_000.0) == pytest.approx(-50.0)
    assert calculate_roi_percent(10_000.0, 0.0) == 0.0


def test_revenue_weighted_margin(make_projection):
    projections = [
        make_projection(year=1, total_revenue=100.0, ebitda=-50.0),
        make_projection(year=2, total_revenue=900.0, ebitda=450.0),
    ]
    # (-50 + 450) / 1000, not the mean of -50% and 50%
    assert calculate_revenue_weighted_margin(
        projections, lambda p: p.ebitda
    ) == pytest.approx(40.0)


def test_revenue_weighted_margin_without_revenue(make_projection):
    projections = [make_projection(year=1, ebitda=-120_000.0)]
    assert calculate_revenue_weighted_margin(projections, lambda p: p.ebitda) == 0.0
    assert calculate_revenue_weighted_margin([], lambda p: p.ebitda) == 0.0
