# ciderplan/core/year_projector.py
from __future__ import annotations

import math

from ciderplan.config import settings
from ciderplan.core.cost_models import CostScenario, CostTemplate, YearlyProjection


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 unless the denominator is strictly positive."""
    return numerator / denominator if denominator > 0 else 0.0


def growth_factor(rate_pct: float, year_index: int) -> float:
    """Compounded growth multiplier after year_index years at rate_pct % p.a."""
    return (1.0 + rate_pct / 100.0) ** year_index


def _apply_volume_cap(volume_liters: float, scenario: CostScenario) -> float:
    if scenario.max_production_liters_yearly:
        return min(volume_liters, scenario.max_production_liters_yearly)
    return volume_liters


def _apply_storage_cap(
    bottles_75cl: int, bottles_150cl: int, scenario: CostScenario
) -> tuple[int, int]:
    """
    Scale both bottle counts down by the same ratio when the total exceeds
    the storage cap.
    """
    total_bottles = bottles_75cl + bottles_150cl
    cap = scenario.max_storage_bottles
    if cap and total_bottles > cap:
        ratio = cap / total_bottles
        return math.floor(bottles_75cl * ratio), math.floor(bottles_150cl * ratio)
    return bottles_75cl, bottles_150cl


def _channel_revenue(
    bottles: int, price: float, scenario: CostScenario
) -> tuple[float, float, float]:
    """Split one bottle size's gross sales into (direct, wholesale, retail)."""
    gross = bottles * price
    direct = gross * (scenario.direct_sales_percent / 100.0)
    wholesale = (
        gross
        * (scenario.wholesale_percent / 100.0)
        * (1.0 - scenario.wholesale_discount_percent / 100.0)
    )
    retail = (
        gross
        * (scenario.retail_percent / 100.0)
        * (1.0 - scenario.retail_discount_percent / 100.0)
    )
    return direct, wholesale, retail


def project_year(
    template: CostTemplate,
    scenario: CostScenario,
    year_index: int,
    base_volume_liters: float,
    previous_cumulative_cash: float,
) -> YearlyProjection:
    """
    Project a single year's volumes, P&L, cash flow and unit economics.

    Parameters
    ----------
    template:
        Cost and pricing assumptions.
    scenario:
        Multipliers, growth, channel mix and capacity caps.
    year_index:
        Zero-based projection year (0 = first year).
    base_volume_liters:
        Year-one production volume before growth and multipliers.
    previous_cumulative_cash:
        Cumulative cash flow at the end of the previous year.

    Never raises for finite input and never returns NaN / Infinity: every
    ratio goes through safe_divide.
    """

    # ---- Volume ----
    volume_liters = (
        base_volume_liters
        * growth_factor(scenario.demand_growth_yearly, year_index)
        * scenario.volume_multiplier
    )
    volume_liters = _apply_volume_cap(volume_liters, scenario)

    effective_liters = volume_liters * (template.yield_efficiency / 100.0)

    bottles_75cl = math.floor(
        settings.BOTTLE_75CL_VOLUME_SHARE * effective_liters
        / settings.BOTTLE_75CL_LITERS
    )
    bottles_150cl = math.floor(
        settings.BOTTLE_150CL_VOLUME_SHARE * effective_liters
        / settings.BOTTLE_150CL_LITERS
    )
    bottles_75cl, bottles_150cl = _apply_storage_cap(
        bottles_75cl, bottles_150cl, scenario
    )
    total_bottles = bottles_75cl + bottles_150cl

    # ---- Revenue ----
    price_factor = (
        growth_factor(template.price_inflation_yearly, year_index)
        * scenario.price_multiplier
    )
    price_75cl = template.bottle_75cl_price * price_factor
    price_150cl = template.bottle_150cl_price * price_factor

    direct_75, wholesale_75, retail_75 = _channel_revenue(
        bottles_75cl, price_75cl, scenario
    )
    direct_150, wholesale_150, retail_150 = _channel_revenue(
        bottles_150cl, price_150cl, scenario
    )
    revenue_direct = direct_75 + direct_150
    revenue_wholesale = wholesale_75 + wholesale_150
    revenue_retail = retail_75 + retail_150
    total_revenue = revenue_direct + revenue_wholesale + revenue_retail

    # ---- COGS ----
    # Materials carry the flat cost inflation and the scenario cost multiplier.
    material_factor = (
        growth_factor(settings.COST_INFLATION_YEARLY_PCT, year_index)
        * scenario.cost_multiplier
    )

    juice_cost = volume_liters * template.juice_per_liter
    yeast_cost = (volume_liters / 1000.0) * template.yeast_per_1000l
    sugar_cost = volume_liters * settings.SUGAR_KG_PER_LITER * template.sugar_per_kg
    other_cost = total_bottles * template.other_per_bottle
    cogs_ingredients = (juice_cost + yeast_cost + sugar_cost + other_cost) * (
        material_factor
    )

    bottle_cost = (
        bottles_75cl * template.bottle_75cl + bottles_150cl * template.bottle_150cl
    )
    closure_cost = total_bottles * (template.label + template.cap + template.box_cost)
    cogs_packaging = (bottle_cost + closure_cost) * material_factor

    batch_count = math.ceil(volume_liters / settings.BATCH_SIZE_LITERS)
    variable_labor = (
        batch_count
        * template.hours_per_batch
        * template.hourly_rate
        * scenario.labor_multiplier
    )
    fixed_labor = (
        template.monthly_fixed_labor
        * settings.MONTHS_PER_YEAR
        * scenario.labor_multiplier
    )
    cogs_labor = variable_labor + fixed_labor

    total_cogs = cogs_ingredients + cogs_packaging + cogs_labor

    # ---- Operating expenses ----
    fixed_overhead = template.monthly_fixed_overhead * settings.MONTHS_PER_YEAR
    variable_overhead = volume_liters * template.overhead_per_liter
    percent_overhead = total_cogs * (template.overhead_percent_of_cogs / 100.0)
    overhead = fixed_overhead + variable_overhead + percent_overhead

    average_inventory = total_bottles * settings.AVERAGE_INVENTORY_FRACTION
    inventory_holding_cost = (
        average_inventory
        * scenario.holding_cost_per_bottle_monthly
        * settings.MONTHS_PER_YEAR
    )
    total_operating_expenses = overhead + inventory_holding_cost

    # ---- Profitability cascade ----
    gross_profit = total_revenue - total_cogs
    gross_margin_percent = safe_divide(gross_profit, total_revenue) * 100.0

    ebitda = gross_profit - overhead - inventory_holding_cost
    ebitda_margin_percent = safe_divide(ebitda, total_revenue) * 100.0

    depreciation = template.depreciation_yearly
    ebit = ebitda - depreciation

    interest_expense = template.interest_expense_yearly
    ebt = ebit - interest_expense

    # No tax credit on losses
    tax = ebt * (template.tax_rate / 100.0) if ebt > 0 else 0.0
    net_income = ebt - tax
    net_margin_percent = safe_divide(net_income, total_revenue) * 100.0

    # ---- Cash flow ----
    cash_generated = net_income + depreciation
    cumulative_cash_flow = previous_cumulative_cash + cash_generated

    # ---- Unit economics ----
    cost_per_liter = safe_divide(total_cogs, effective_liters)
    cost_per_bottle_75cl = safe_divide(
        total_cogs * settings.BOTTLE_75CL_VOLUME_SHARE, bottles_75cl
    )
    cost_per_bottle_150cl = safe_divide(
        total_cogs * settings.BOTTLE_150CL_VOLUME_SHARE, bottles_150cl
    )

    # ---- Breakeven (75cl is the reference SKU) ----
    fixed_costs = fixed_labor + fixed_overhead + depreciation + interest_expense
    contribution_margin_75cl = price_75cl - cost_per_bottle_75cl
    breakeven_bottles = safe_divide(fixed_costs, contribution_margin_75cl)
    breakeven_revenue = breakeven_bottles * price_75cl

    return YearlyProjection(
        year=year_index + 1,
        production_liters=volume_liters,
        effective_liters=effective_liters,
        bottles_75cl=bottles_75cl,
        bottles_150cl=bottles_150cl,
        price_75cl=price_75cl,
        price_150cl=price_150cl,
        revenue_direct=revenue_direct,
        revenue_wholesale=revenue_wholesale,
        revenue_retail=revenue_retail,
        total_revenue=total_revenue,
        cogs_ingredients=cogs_ingredients,
        cogs_packaging=cogs_packaging,
        cogs_labor=cogs_labor,
        total_cogs=total_cogs,
        fixed_labor=fixed_labor,
        fixed_overhead=fixed_overhead,
        overhead=overhead,
        inventory_holding_cost=inventory_holding_cost,
        total_operating_expenses=total_operating_expenses,
        gross_profit=gross_profit,
        gross_margin_percent=gross_margin_percent,
        ebitda=ebitda,
        ebitda_margin_percent=ebitda_margin_percent,
        depreciation=depreciation,
        ebit=ebit,
        interest_expense=interest_expense,
        ebt=ebt,
        tax=tax,
        net_income=net_income,
        net_margin_percent=net_margin_percent,
        cash_balance=cash_generated,
        cumulative_cash_flow=cumulative_cash_flow,
        cost_per_liter=cost_per_liter,
        cost_per_bottle_75cl=cost_per_bottle_75cl,
        cost_per_bottle_150cl=cost_per_bottle_150cl,
        breakeven_bottles=breakeven_bottles,
        breakeven_revenue=breakeven_revenue,
    )
