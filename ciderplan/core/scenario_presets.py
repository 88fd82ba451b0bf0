# ciderplan/core/scenario_presets.py
from __future__ import annotations

from dataclasses import replace
from typing import Literal

from ciderplan.config import settings
from ciderplan.core.cost_models import CostScenario, CostTemplate

PresetName = Literal["best", "realistic", "worst"]

PRESET_LABELS: dict[PresetName, str] = {
    "best": "Best case",
    "realistic": "Base case",
    "worst": "Worst case",
}


def build_default_template() -> CostTemplate:
    """
    Cost template pre-filled with the defaults from settings.py.

    UI and scripts should start from this instead of hard-coding values.
    """

    return CostTemplate(
        juice_per_liter=settings.DEFAULT_JUICE_PER_LITER,
        yeast_per_1000l=settings.DEFAULT_YEAST_PER_1000L,
        sugar_per_kg=settings.DEFAULT_SUGAR_PER_KG,
        other_per_bottle=settings.DEFAULT_OTHER_PER_BOTTLE,
        bottle_75cl=settings.DEFAULT_BOTTLE_75CL_COST,
        bottle_150cl=settings.DEFAULT_BOTTLE_150CL_COST,
        label=settings.DEFAULT_LABEL_COST,
        cap=settings.DEFAULT_CAP_COST,
        box_cost=settings.DEFAULT_BOX_COST,
        hourly_rate=settings.DEFAULT_HOURLY_RATE,
        hours_per_batch=settings.DEFAULT_HOURS_PER_BATCH,
        monthly_fixed_labor=settings.DEFAULT_MONTHLY_FIXED_LABOR,
        monthly_fixed_overhead=settings.DEFAULT_MONTHLY_FIXED_OVERHEAD,
        overhead_per_liter=settings.DEFAULT_OVERHEAD_PER_LITER,
        overhead_percent_of_cogs=settings.DEFAULT_OVERHEAD_PERCENT_OF_COGS,
        wastage_percent=settings.DEFAULT_WASTAGE_PCT,
        yield_efficiency=settings.DEFAULT_YIELD_EFFICIENCY_PCT,
        bottle_75cl_price=settings.DEFAULT_BOTTLE_75CL_PRICE,
        bottle_150cl_price=settings.DEFAULT_BOTTLE_150CL_PRICE,
        price_inflation_yearly=settings.DEFAULT_PRICE_INFLATION_YEARLY_PCT,
        depreciation_yearly=settings.DEFAULT_DEPRECIATION_YEARLY,
        interest_expense_yearly=settings.DEFAULT_INTEREST_EXPENSE_YEARLY,
        tax_rate=settings.DEFAULT_TAX_RATE_PCT,
        name=settings.DEFAULT_TEMPLATE_NAME,
    )


def build_default_scenario() -> CostScenario:
    """Realistic scenario with the default growth and channel mix."""

    return CostScenario(
        volume_multiplier=settings.PRESET_REALISTIC_VOLUME_MULTIPLIER,
        price_multiplier=settings.PRESET_REALISTIC_PRICE_MULTIPLIER,
        cost_multiplier=settings.PRESET_REALISTIC_COST_MULTIPLIER,
        labor_multiplier=1.0,
        demand_growth_yearly=settings.DEFAULT_DEMAND_GROWTH_YEARLY_PCT,
        direct_sales_percent=settings.DEFAULT_DIRECT_SALES_PCT,
        wholesale_percent=settings.DEFAULT_WHOLESALE_PCT,
        retail_percent=settings.DEFAULT_RETAIL_PCT,
        wholesale_discount_percent=settings.DEFAULT_WHOLESALE_DISCOUNT_PCT,
        retail_discount_percent=settings.DEFAULT_RETAIL_DISCOUNT_PCT,
        holding_cost_per_bottle_monthly=(
            settings.DEFAULT_HOLDING_COST_PER_BOTTLE_MONTHLY
        ),
        name=settings.DEFAULT_SCENARIO_NAME,
        scenario_type="realistic",
    )


def apply_preset(scenario: CostScenario, preset: PresetName) -> CostScenario:
    """
    Return a copy of scenario with the preset's volume / price / cost
    multipliers. Labour multiplier, growth, channel mix and caps are kept.
    """

    if preset == "best":
        volume, price, cost = (
            settings.PRESET_BEST_VOLUME_MULTIPLIER,
            settings.PRESET_BEST_PRICE_MULTIPLIER,
            settings.PRESET_BEST_COST_MULTIPLIER,
        )
    elif preset == "worst":
        volume, price, cost = (
            settings.PRESET_WORST_VOLUME_MULTIPLIER,
            settings.PRESET_WORST_PRICE_MULTIPLIER,
            settings.PRESET_WORST_COST_MULTIPLIER,
        )
    elif preset == "realistic":
        volume, price, cost = (
            settings.PRESET_REALISTIC_VOLUME_MULTIPLIER,
            settings.PRESET_REALISTIC_PRICE_MULTIPLIER,
            settings.PRESET_REALISTIC_COST_MULTIPLIER,
        )
    else:
        raise ValueError(f"Unknown scenario preset: {preset!r}")

    return replace(
        scenario,
        scenario_type=preset,
        volume_multiplier=volume,
        price_multiplier=price,
        cost_multiplier=cost,
    )


def build_preset_scenarios(
    base: CostScenario,
) -> dict[PresetName, CostScenario]:
    """
    Factory that builds the best / realistic / worst variants of a scenario,
    named after PRESET_LABELS.
    """

    return {
        name: replace(apply_preset(base, name), name=PRESET_LABELS[name])
        for name in ("best", "realistic", "worst")
    }
