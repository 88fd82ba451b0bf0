"""Shared test fixtures for the cost simulation engine."""

from dataclasses import fields

import pytest

from ciderplan.core.cost_models import (
    CostScenario,
    CostTemplate,
    SimulationResult,
    YearlyProjection,
)


@pytest.fixture
def seed_template() -> CostTemplate:
    """The reference cost template used for hand-computed figures."""
    return CostTemplate(
        juice_per_liter=8,
        yeast_per_1000l=741,
        sugar_per_kg=0.1,
        other_per_bottle=10.96,
        bottle_75cl=3,
        bottle_150cl=5,
        label=4,
        cap=0.1,
        box_cost=2,
        hourly_rate=350,
        hours_per_batch=8,
        monthly_fixed_labor=0,
        monthly_fixed_overhead=10000,
        overhead_per_liter=0.5,
        overhead_percent_of_cogs=15,
        wastage_percent=5,
        yield_efficiency=95,
        bottle_75cl_price=110,
        bottle_150cl_price=200,
        price_inflation_yearly=3,
        depreciation_yearly=50000,
        interest_expense_yearly=0,
        tax_rate=22,
    )


@pytest.fixture
def seed_scenario() -> CostScenario:
    return CostScenario(
        volume_multiplier=1,
        price_multiplier=1,
        cost_multiplier=1,
        labor_multiplier=1,
        demand_growth_yearly=50,
        direct_sales_percent=40,
        wholesale_percent=40,
        retail_percent=20,
        wholesale_discount_percent=15,
        retail_discount_percent=10,
        holding_cost_per_bottle_monthly=0.5,
        id="scenario-1",
    )


@pytest.fixture
def make_projection():
    """Factory for YearlyProjection rows with every field zeroed by default."""

    def _make(year: int = 1, **overrides) -> YearlyProjection:
        values = {f.name: 0.0 for f in fields(YearlyProjection)}
        values.update(year=year, bottles_75cl=0, bottles_150cl=0)
        values.update(overrides)
        return YearlyProjection(**values)

    return _make


@pytest.fixture
def make_result(make_projection):
    """Factory for SimulationResult objects with chosen summary metrics."""

    def _make(
        revenues=(100.0, 200.0, 300.0),
        avg_gross_margin_percent: float = 50.0,
        avg_ebitda_margin_percent: float = 25.0,
        breakeven_year=3,
        roi_percent: float = 100.0,
    ) -> SimulationResult:
        projections = [
            make_projection(year=i + 1, total_revenue=revenue)
            for i, revenue in enumerate(revenues)
        ]
        return SimulationResult(
            yearly_projections=projections,
            years_projected=len(projections),
            total_revenue=sum(revenues),
            total_cogs=0.0,
            total_gross_profit=0.0,
            total_ebitda=0.0,
            total_ebit=0.0,
            total_net_income=0.0,
            avg_gross_margin_percent=avg_gross_margin_percent,
            avg_ebitda_margin_percent=avg_ebitda_margin_percent,
            breakeven_year=breakeven_year,
            payback_period_years=None,
            roi_percent=roi_percent,
        )

    return _make
