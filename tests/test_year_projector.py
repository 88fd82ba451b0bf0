import math
from dataclasses import asdict, replace

import pytest

from ciderplan.core.year_projector import growth_factor, project_year, safe_divide


def test_safe_divide_guards_non_positive_denominators():
    assert safe_divide(10.0, 4.0) == 2.5
    assert safe_divide(10.0, 0.0) == 0.0
    assert safe_divide(10.0, -2.0) == 0.0


def test_growth_factor_compounds():
    assert growth_factor(50.0, 0) == 1.0
    assert growth_factor(50.0, 2) == pytest.approx(2.25)
    assert growth_factor(-10.0, 1) == pytest.approx(0.9)


def test_year_one_volumes(seed_template, seed_scenario):
    year = project_year(seed_template, seed_scenario, 0, 1000.0, -50_000.0)

    assert year.year == 1
    assert year.production_liters == pytest.approx(1000.0)
    assert year.effective_liters == pytest.approx(950.0)
    assert year.bottles_75cl == 886
    assert year.bottles_150cl == 190


def test_year_one_revenue_by_channel(seed_template, seed_scenario):
    year = project_year(seed_template, seed_scenario, 0, 1000.0, -50_000.0)

    # 886 x 110 = 97,460 and 190 x 200 = 38,000 at full price
    assert year.price_75cl == pytest.approx(110.0)
    assert year.price_150cl == pytest.approx(200.0)
    assert year.revenue_direct == pytest.approx(38_984.0 + 15_200.0)
    assert year.revenue_wholesale == pytest.approx(33_136.4 + 12_920.0)
    assert year.revenue_retail == pytest.approx(17_542.8 + 6_840.0)
    assert year.total_revenue == pytest.approx(124_623.2)


def test_year_one_costs(seed_template, seed_scenario):
    year = project_year(seed_template, seed_scenario, 0, 1000.0, -50_000.0)

    # juice 8,000 + yeast 741 + sugar 5 + other 1,076 x 10.96
    assert year.cogs_ingredients == pytest.approx(20_538.96)
    # bottles 2,658 + 950, label 4,304, cap 107.6, box 2,152
    assert year.cogs_packaging == pytest.approx(10_171.6)
    # one batch of 8 h at 350
    assert year.cogs_labor == pytest.approx(2_800.0)
    assert year.total_cogs == pytest.approx(33_510.56)

    assert year.fixed_overhead == pytest.approx(120_000.0)
    assert year.fixed_labor == 0.0
    # 120,000 fixed + 500 per-litre + 15% of COGS
    assert year.overhead == pytest.approx(125_526.584)
    # 538 average bottles x 0.5 x 12
    assert year.inventory_holding_cost == pytest.approx(3_228.0)
    assert year.total_operating_expenses == pytest.approx(125_526.584 + 3_228.0)


def test_year_one_profitability_and_cash(seed_template, seed_scenario):
    year = project_year(seed_template, seed_scenario, 0, 1000.0, -50_000.0)

    assert year.gross_profit == pytest.approx(91_112.64)
    assert year.gross_margin_percent == pytest.approx(91_112.64 / 124_623.2 * 100)
    assert year.ebitda == pytest.approx(-37_641.944)
    assert year.ebitda_margin_percent == pytest.approx(-37_641.944 / 124_623.2 * 100)
    assert year.depreciation == 50_000
    assert year.ebit == pytest.approx(-87_641.944)
    assert year.interest_expense == 0
    assert year.ebt == pytest.approx(-87_641.944)
    assert year.tax == 0.0
    assert year.net_income == pytest.approx(-87_641.944)
    assert year.net_margin_percent == pytest.approx(-87_641.944 / 124_623.2 * 100)

    assert year.cash_balance == pytest.approx(-37_641.944)
    assert year.cumulative_cash_flow == pytest.approx(-87_641.944)


def test_year_one_unit_economics_and_breakeven(seed_template, seed_scenario):
    year = project_year(seed_template, seed_scenario, 0, 1000.0, -50_000.0)

    assert year.cost_per_liter == pytest.approx(33_510.56 / 950)
    cost_75 = 33_510.56 * 0.7 / 886
    assert year.cost_per_bottle_75cl == pytest.approx(cost_75)
    assert year.cost_per_bottle_150cl == pytest.approx(33_510.56 * 0.3 / 190)

    # fixed costs: 120,000 overhead + 50,000 depreciation
    expected_bottles = 170_000 / (110 - cost_75)
    assert year.breakeven_bottles == pytest.approx(expected_bottles)
    assert year.breakeven_revenue == pytest.approx(expected_bottles * 110)


def test_inflation_applies_to_prices_and_materials_not_labour(
    seed_template, seed_scenario
):
    flat = replace(seed_scenario, demand_growth_yearly=0.0)
    year = project_year(seed_template, flat, 1, 1000.0, 0.0)

    assert year.year == 2
    assert year.bottles_75cl == 886
    assert year.price_75cl == pytest.approx(110 * 1.03)
    assert year.price_150cl == pytest.approx(200 * 1.03)
    assert year.cogs_ingredients == pytest.approx(20_538.96 * 1.025)
    assert year.cogs_packaging == pytest.approx(10_171.6 * 1.025)
    assert year.cogs_labor == pytest.approx(2_800.0)
    assert year.overhead == pytest.approx(
        120_000 + 500 + year.total_cogs * 0.15
    )


def test_demand_growth_compounds_volume(seed_template, seed_scenario):
    year = project_year(seed_template, seed_scenario, 2, 1000.0, 0.0)
    assert year.production_liters == pytest.approx(2250.0)
    # 3 batches of 1000 L
    assert year.cogs_labor == pytest.approx(3 * 8 * 350)


def test_production_cap_is_a_hard_clamp(seed_template, seed_scenario):
    capped = replace(seed_scenario, max_production_liters_yearly=2000.0)

    year = project_year(seed_template, capped, 3, 1000.0, 0.0)
    assert year.production_liters == pytest.approx(2000.0)

    small = project_year(seed_template, capped, 0, 1000.0, 0.0)
    assert small.production_liters == pytest.approx(1000.0)


def test_zero_caps_mean_unconstrained(seed_template, seed_scenario):
    uncapped = replace(
        seed_scenario, max_production_liters_yearly=0, max_storage_bottles=0
    )
    year = project_year(seed_template, uncapped, 0, 1000.0, 0.0)
    assert year.production_liters == pytest.approx(1000.0)
    assert year.bottles_75cl + year.bottles_150cl == 1076


def test_storage_cap_scales_sizes_proportionally(seed_template, seed_scenario):
    capped = replace(seed_scenario, max_storage_bottles=538)
    year = project_year(seed_template, capped, 0, 1000.0, 0.0)

    assert year.bottles_75cl == 443
    assert year.bottles_150cl == 95
    # production volume itself is not reduced by the storage cap
    assert year.production_liters == pytest.approx(1000.0)
    assert year.inventory_holding_cost == pytest.approx(538 / 2 * 0.5 * 12)


def test_tax_charged_only_on_positive_ebt(seed_template, seed_scenario):
    premium = replace(seed_scenario, price_multiplier=10.0)
    year = project_year(seed_template, premium, 0, 1000.0, -50_000.0)

    assert year.total_revenue == pytest.approx(1_246_232.0)
    assert year.ebt == pytest.approx(1_033_966.856)
    assert year.tax == pytest.approx(1_033_966.856 * 0.22)
    assert year.net_income == pytest.approx(year.ebt - year.tax)

    loss = project_year(seed_template, seed_scenario, 0, 1000.0, -50_000.0)
    assert loss.ebt < 0
    assert loss.tax == 0.0


def test_interest_reduces_ebt(seed_template, seed_scenario):
    indebted = replace(seed_template, interest_expense_yearly=10_000)
    year = project_year(indebted, seed_scenario, 0, 1000.0, 0.0)
    assert year.ebt == pytest.approx(year.ebit - 10_000)
    # interest also counts as a fixed cost for breakeven
    expected = 180_000 / (year.price_75cl - year.cost_per_bottle_75cl)
    assert year.breakeven_bottles == pytest.approx(expected)


def test_all_direct_sales_equals_full_price_revenue(seed_template, seed_scenario):
    direct_only = replace(
        seed_scenario,
        direct_sales_percent=100,
        wholesale_percent=0,
        retail_percent=0,
    )
    year = project_year(seed_template, direct_only, 0, 1000.0, 0.0)

    assert year.revenue_wholesale == 0.0
    assert year.revenue_retail == 0.0
    assert year.total_revenue == pytest.approx(886 * 110 + 190 * 200)
    assert year.revenue_direct == pytest.approx(year.total_revenue)


@pytest.mark.parametrize("volume, multiplier", [(0.0, 1.0), (1000.0, 0.0)])
def test_zero_volume_leaves_only_fixed_costs(
    seed_template, seed_scenario, volume, multiplier
):
    scenario = replace(seed_scenario, volume_multiplier=multiplier)
    year = project_year(seed_template, scenario, 0, volume, -50_000.0)

    assert year.production_liters == 0
    assert year.effective_liters == 0
    assert year.bottles_75cl == 0
    assert year.bottles_150cl == 0
    assert year.total_revenue == 0
    assert year.cogs_ingredients == 0
    assert year.cogs_packaging == 0
    assert year.cogs_labor == 0
    assert year.inventory_holding_cost == 0
    assert year.cost_per_liter == 0
    assert year.cost_per_bottle_75cl == 0
    assert year.cost_per_bottle_150cl == 0
    assert year.gross_margin_percent == 0
    assert year.ebitda_margin_percent == 0
    assert year.net_margin_percent == 0

    assert year.overhead == pytest.approx(120_000.0)
    assert year.ebitda == pytest.approx(-120_000.0)
    assert year.net_income == pytest.approx(-170_000.0)
    assert year.breakeven_bottles == pytest.approx(170_000 / 110)


def test_fixed_labour_remains_at_zero_volume(seed_template, seed_scenario):
    staffed = replace(seed_template, monthly_fixed_labor=20_000)
    year = project_year(staffed, seed_scenario, 0, 0.0, 0.0)

    assert year.fixed_labor == pytest.approx(240_000.0)
    assert year.cogs_labor == pytest.approx(240_000.0)
    assert year.total_revenue == 0


@pytest.mark.parametrize(
    "template_changes, scenario_changes, volume",
    [
        ({}, {}, 1000.0),
        ({"yield_efficiency": 0}, {}, 1000.0),
        ({"bottle_75cl_price": 0, "bottle_150cl_price": 0}, {}, 1000.0),
        ({"depreciation_yearly": 0}, {}, 0.0),
        ({}, {"price_multiplier": 0}, 1000.0),
        ({}, {"max_storage_bottles": 1}, 1000.0),
        (
            {},
            {"direct_sales_percent": 0, "wholesale_percent": 0, "retail_percent": 0},
            1000.0,
        ),
    ],
)
def test_projection_fields_are_always_finite(
    seed_template, seed_scenario, template_changes, scenario_changes, volume
):
    template = replace(seed_template, **template_changes)
    scenario = replace(seed_scenario, **scenario_changes)
    year = project_year(template, scenario, 4, volume, -50_000.0)

    for name, value in asdict(year).items():
        assert math.isfinite(value), name


def test_price_multiplier_increases_revenue(seed_template, seed_scenario):
    low = project_year(seed_template, seed_scenario, 0, 1000.0, 0.0)
    high = project_year(
        seed_template, replace(seed_scenario, price_multiplier=1.1), 0, 1000.0, 0.0
    )
    assert high.total_revenue > low.total_revenue


def test_cost_multiplier_increases_cogs(seed_template, seed_scenario):
    low = project_year(seed_template, seed_scenario, 0, 1000.0, 0.0)
    high = project_year(
        seed_template, replace(seed_scenario, cost_multiplier=1.1), 0, 1000.0, 0.0
    )
    assert high.total_cogs > low.total_cogs
    assert high.total_revenue == pytest.approx(low.total_revenue)
