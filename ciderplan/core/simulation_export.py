# ciderplan/core/simulation_export.py
from __future__ import annotations

import json
from dataclasses import asdict, fields
from datetime import datetime
from typing import Any, Dict, Literal

import pandas as pd

from ciderplan.config import settings
from ciderplan.core.cost_models import SimulationResult, YearlyProjection

ExportFormat = Literal["csv", "json"]

PROJECTION_COLUMNS = [f.name for f in fields(YearlyProjection)]

# Yearly P&L columns in the CSV export, with their printed headers
_CSV_COLUMNS = {
    "year": "Year",
    "total_revenue": f"Revenue ({settings.CURRENCY_CODE})",
    "total_cogs": f"COGS ({settings.CURRENCY_CODE})",
    "gross_profit": f"Gross Profit ({settings.CURRENCY_CODE})",
    "gross_margin_percent": "Gross Margin %",
    "ebitda": f"EBITDA ({settings.CURRENCY_CODE})",
    "ebitda_margin_percent": "EBITDA Margin %",
    "depreciation": f"Depreciation ({settings.CURRENCY_CODE})",
    "ebit": f"EBIT ({settings.CURRENCY_CODE})",
    "interest_expense": f"Interest ({settings.CURRENCY_CODE})",
    "tax": f"Tax ({settings.CURRENCY_CODE})",
    "net_income": f"Net Income ({settings.CURRENCY_CODE})",
    "net_margin_percent": "Net Margin %",
    "cash_balance": f"Cash Balance ({settings.CURRENCY_CODE})",
    "cumulative_cash_flow": f"Cumulative Cash ({settings.CURRENCY_CODE})",
}


def simulation_to_dataframe(result: SimulationResult) -> pd.DataFrame:
    """One row per projection year; columns are the YearlyProjection fields."""
    records = [asdict(p) for p in result.yearly_projections]
    return pd.DataFrame.from_records(records, columns=PROJECTION_COLUMNS)


def summary_to_dict(result: SimulationResult) -> Dict[str, Any]:
    return {
        "years_projected": result.years_projected,
        "total_revenue": result.total_revenue,
        "total_cogs": result.total_cogs,
        "total_gross_profit": result.total_gross_profit,
        "total_ebitda": result.total_ebitda,
        "total_ebit": result.total_ebit,
        "total_net_income": result.total_net_income,
        "avg_gross_margin_percent": result.avg_gross_margin_percent,
        "avg_ebitda_margin_percent": result.avg_ebitda_margin_percent,
        "breakeven_year": result.breakeven_year,
        "payback_period_years": result.payback_period_years,
        "roi_percent": result.roi_percent,
    }


def export_simulation_csv(result: SimulationResult) -> str:
    """
    Yearly P&L table followed by a SUMMARY block.

    The breakeven year is printed 1-based ("Year 3"), matching the Year column.
    """
    df = simulation_to_dataframe(result)[list(_CSV_COLUMNS)]
    table = df.rename(columns=_CSV_COLUMNS).to_csv(index=False, float_format="%.2f")

    breakeven = (
        str(result.breakeven_year + 1) if result.breakeven_year is not None else "N/A"
    )
    summary_lines = [
        "",
        "SUMMARY",
        f"Total Revenue,{result.total_revenue:.2f}",
        f"Total EBITDA,{result.total_ebitda:.2f}",
        f"Avg EBITDA Margin %,{result.avg_ebitda_margin_percent:.2f}",
        f"Breakeven Year,{breakeven}",
        f"ROI %,{result.roi_percent:.2f}",
    ]
    return table + "\n".join(summary_lines) + "\n"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def export_simulation_json(result: SimulationResult) -> str:
    """Full result with field names verbatim."""
    return json.dumps(asdict(result), indent=2, default=_json_default)


def export_simulation(result: SimulationResult, fmt: ExportFormat) -> str:
    if fmt == "csv":
        return export_simulation_csv(result)
    if fmt == "json":
        return export_simulation_json(result)
    raise ValueError(f"Unsupported export format: {fmt!r}")
