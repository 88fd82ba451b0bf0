# ciderplan/core/simulation_engine.py
from __future__ import annotations

import logging
from typing import Dict, List

from ciderplan.config import settings
from ciderplan.core.cost_models import (
    CostScenario,
    CostTemplate,
    SimulationResult,
    YearlyProjection,
)
from ciderplan.core.scenario_presets import PresetName, build_preset_scenarios
from ciderplan.core.simulation_finance import (
    calculate_payback_period,
    calculate_revenue_weighted_margin,
    calculate_roi_percent,
    find_breakeven_year,
)
from ciderplan.core.year_projector import project_year

logger = logging.getLogger("ciderplan.engine")


def run_simulation(
    template: CostTemplate,
    scenario: CostScenario,
    years: int = settings.DEFAULT_PROJECTION_YEARS,
    base_volume_liters: float = settings.DEFAULT_BASE_VOLUME_LITERS,
) -> SimulationResult:
    """
    Run a multi-year projection for one template / scenario pair.

    Parameters
    ----------
    template:
        CostTemplate with per-unit costs and prices.
    scenario:
        CostScenario with multipliers, growth and channel mix.
    years:
        Projection horizon; year 1 is index 0 of the result.
    base_volume_liters:
        Year-one production volume before growth and multipliers.

    Cumulative cash starts at -depreciation_yearly, used as a proxy for the
    up-front capital outlay.
    """

    if years <= 0:
        return SimulationResult(
            yearly_projections=[],
            years_projected=0,
            total_revenue=0.0,
            total_cogs=0.0,
            total_gross_profit=0.0,
            total_ebitda=0.0,
            total_ebit=0.0,
            total_net_income=0.0,
            avg_gross_margin_percent=0.0,
            avg_ebitda_margin_percent=0.0,
            breakeven_year=None,
            payback_period_years=None,
            roi_percent=0.0,
            scenario_id=scenario.id,
        )

    logger.debug(
        "Running %d-year simulation from %.1f L (scenario=%r)",
        years,
        base_volume_liters,
        scenario.name or scenario.id,
    )

    projections: List[YearlyProjection] = []
    cumulative_cash = -template.depreciation_yearly

    for year_index in range(years):
        projection = project_year(
            template,
            scenario,
            year_index,
            base_volume_liters,
            cumulative_cash,
        )
        cumulative_cash = projection.cumulative_cash_flow
        projections.append(projection)

    # Aggregates
    total_revenue = sum(p.total_revenue for p in projections)
    total_cogs = sum(p.total_cogs for p in projections)
    total_gross_profit = sum(p.gross_profit for p in projections)
    total_ebitda = sum(p.ebitda for p in projections)
    total_ebit = sum(p.ebit for p in projections)
    total_net_income = sum(p.net_income for p in projections)

    avg_gross_margin_percent = calculate_revenue_weighted_margin(
        projections, lambda p: p.gross_profit
    )
    avg_ebitda_margin_percent = calculate_revenue_weighted_margin(
        projections, lambda p: p.ebitda
    )

    # Investment metrics
    breakeven_year = find_breakeven_year(projections)
    payback_period_years = calculate_payback_period(projections, breakeven_year)
    roi_percent = calculate_roi_percent(total_net_income, template.depreciation_yearly)

    logger.debug(
        "Simulation done: breakeven_year=%s payback=%s roi=%.1f%%",
        breakeven_year,
        payback_period_years,
        roi_percent,
    )

    return SimulationResult(
        yearly_projections=projections,
        years_projected=years,
        total_revenue=total_revenue,
        total_cogs=total_cogs,
        total_gross_profit=total_gross_profit,
        total_ebitda=total_ebitda,
        total_ebit=total_ebit,
        total_net_income=total_net_income,
        avg_gross_margin_percent=avg_gross_margin_percent,
        avg_ebitda_margin_percent=avg_ebitda_margin_percent,
        breakeven_year=breakeven_year,
        payback_period_years=payback_period_years,
        roi_percent=roi_percent,
        scenario_id=scenario.id,
    )


def run_preset_comparison(
    template: CostTemplate,
    scenario: CostScenario,
    years: int = settings.DEFAULT_PROJECTION_YEARS,
    base_volume_liters: float = settings.DEFAULT_BASE_VOLUME_LITERS,
) -> Dict[PresetName, SimulationResult]:
    """
    Run the scenario under the best / realistic / worst presets so they can
    be compared side by side. Everything except the preset multipliers is
    taken from the given scenario.
    """
    return {
        name: run_simulation(template, preset, years, base_volume_liters)
        for name, preset in build_preset_scenarios(scenario).items()
    }
