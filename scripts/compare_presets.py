# scripts/compare_presets.py
from ciderplan.core.scenario_presets import (
    PRESET_LABELS,
    build_default_scenario,
    build_default_template,
)
from ciderplan.core.simulation_engine import run_preset_comparison


def print_comparison(years: int = 11, base_volume_liters: float = 1000.0):
    """
    Print headline metrics for the best / base / worst presets of the
    default scenario, for a quick sanity check of the multipliers.
    """
    results = run_preset_comparison(
        build_default_template(),
        build_default_scenario(),
        years=years,
        base_volume_liters=base_volume_liters,
    )

    print(f"\n=== Preset comparison ({years} years from {base_volume_liters:,.0f} L) ===")
    print("-" * 96)
    print(
        f"{'Scenario':12}  {'Revenue':>16}  {'EBITDA':>16}  "
        f"{'EBITDA %':>9}  {'Breakeven':>9}  {'Payback':>8}  {'ROI %':>10}"
    )
    print("-" * 96)

    for name, result in results.items():
        breakeven = (
            f"Y{result.breakeven_year + 1}"
            if result.breakeven_year is not None
            else "-"
        )
        payback = (
            f"{result.payback_period_years:.2f}"
            if result.payback_period_years is not None
            else "-"
        )
        print(
            f"{PRESET_LABELS[name]:12}  {result.total_revenue:16,.0f}  "
            f"{result.total_ebitda:16,.0f}  "
            f"{result.avg_ebitda_margin_percent:9.1f}  {breakeven:>9}  "
            f"{payback:>8}  {result.roi_percent:10.1f}"
        )


if __name__ == "__main__":
    print_comparison()
