# scripts/run_simulation_smoke.py
from __future__ import annotations

from ciderplan.config import settings
from ciderplan.core.cost_models import SimulationResult
from ciderplan.core.recommendations import generate_recommendations
from ciderplan.core.scenario_presets import build_default_scenario, build_default_template
from ciderplan.core.simulation_engine import run_simulation
from ciderplan.ui.formatting import (
    format_breakeven_year,
    format_currency,
    format_percent,
    format_years,
)


def main() -> None:
    template = build_default_template()
    scenario = build_default_scenario()

    result: SimulationResult = run_simulation(
        template,
        scenario,
        years=settings.DEFAULT_PROJECTION_YEARS,
        base_volume_liters=settings.DEFAULT_BASE_VOLUME_LITERS,
    )

    print("=== Cost simulation smoke test ===")
    print(f"Years: {result.years_projected}")
    print(f"Total revenue: {format_currency(result.total_revenue)}")
    print(f"Total COGS: {format_currency(result.total_cogs)}")
    print(f"Total EBITDA: {format_currency(result.total_ebitda)}")
    print(f"Total net income: {format_currency(result.total_net_income)}")
    print(f"Avg gross margin: {format_percent(result.avg_gross_margin_percent)}")
    print(f"Avg EBITDA margin: {format_percent(result.avg_ebitda_margin_percent)}")
    print(f"Breakeven: {format_breakeven_year(result.breakeven_year)}")
    print(f"Payback: {format_years(result.payback_period_years)}")
    print(f"ROI: {format_percent(result.roi_percent)}")

    print("\nRecommendations:")
    for message in generate_recommendations(result):
        print(f"- {message}")


if __name__ == "__main__":
    main()
