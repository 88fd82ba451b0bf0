# ciderplan/ui/simulation_panel.py

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from ciderplan.config import settings
from ciderplan.core.cost_models import SimulationResult
from ciderplan.core.recommendations import evaluate_recommendations
from ciderplan.core.simulation_export import (
    export_simulation_csv,
    export_simulation_json,
    simulation_to_dataframe,
)
from ciderplan.ui.charts import render_cumulative_cash_chart, render_pnl_chart
from ciderplan.ui.formatting import (
    format_breakeven_year,
    format_currency,
    format_percent,
    format_years,
)

# Columns shown in the annual P&L table, with display headers
_TABLE_COLUMNS = {
    "year": "Year",
    "production_liters": "Production (L)",
    "bottles_75cl": "75cl bottles",
    "bottles_150cl": "150cl bottles",
    "total_revenue": "Revenue",
    "total_cogs": "COGS",
    "gross_margin_percent": "Gross margin (%)",
    "overhead": "Overhead",
    "ebitda": "EBITDA",
    "ebitda_margin_percent": "EBITDA margin (%)",
    "net_income": "Net income",
    "cumulative_cash_flow": "Cumulative cash",
    "cost_per_liter": "Cost / L",
    "cost_per_bottle_75cl": "Cost / 75cl",
}


def _render_headline_metrics(result: SimulationResult) -> None:
    """
    The handful of numbers people ask about first.
    """

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric(
            label="Total revenue",
            value=format_currency(result.total_revenue),
        )

    with col2:
        st.metric(
            label="Total net income",
            value=format_currency(result.total_net_income),
        )

    with col3:
        st.metric(
            label="Breakeven",
            value=format_breakeven_year(result.breakeven_year),
            help="First year with positive cumulative cash flow.",
        )

    with col4:
        st.metric(
            label="Payback period",
            value=format_years(result.payback_period_years),
        )

    col5, col6, col7, col8 = st.columns(4)

    with col5:
        st.metric(
            label="Avg gross margin",
            value=format_percent(result.avg_gross_margin_percent),
        )

    with col6:
        st.metric(
            label="Avg EBITDA margin",
            value=format_percent(result.avg_ebitda_margin_percent),
        )

    with col7:
        st.metric(
            label="Total EBITDA",
            value=format_currency(result.total_ebitda),
        )

    with col8:
        st.metric(
            label="ROI (net income / investment)",
            value=format_percent(result.roi_percent),
        )


def _render_recommendations(result: SimulationResult) -> None:
    recommendations = evaluate_recommendations(result)
    if not recommendations:
        st.caption("No flags raised for this scenario.")
        return

    for rec in recommendations:
        if rec.kind == "warning":
            st.warning(rec.message)
        else:
            st.success(rec.message)


def _build_channel_dataframe(result: SimulationResult) -> pd.DataFrame:
    records = []
    for p in result.yearly_projections:
        records.extend(
            [
                {"Year": p.year, "Channel": "Direct", "Revenue": p.revenue_direct},
                {
                    "Year": p.year,
                    "Channel": "Wholesale",
                    "Revenue": p.revenue_wholesale,
                },
                {"Year": p.year, "Channel": "Retail", "Revenue": p.revenue_retail},
            ]
        )
    return pd.DataFrame.from_records(records)


def _render_channel_chart(result: SimulationResult) -> None:
    """
    Stacked bars of revenue by sales channel per year.
    """

    df = _build_channel_dataframe(result)
    if df.empty:
        st.info("No annual data available for this scenario.")
        return

    channels = list(settings.CHANNEL_COLORS)
    chart = (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("Year:O", axis=alt.Axis(title="Year", labelAngle=0)),
            y=alt.Y(
                "Revenue:Q",
                axis=alt.Axis(title=f"Revenue ({settings.CURRENCY_CODE})"),
            ),
            color=alt.Color(
                "Channel:N",
                scale=alt.Scale(
                    domain=channels,
                    range=[settings.CHANNEL_COLORS[c] for c in channels],
                ),
            ),
            tooltip=["Year", "Channel", alt.Tooltip("Revenue:Q", format=",.0f")],
        )
    )

    st.markdown("#### Revenue by sales channel")
    st.altair_chart(chart, width="stretch")


def _render_yearly_table(result: SimulationResult) -> None:
    """
    Tabular annual breakdown for people who want to see the numbers.
    """

    df = simulation_to_dataframe(result)
    if df.empty:
        return

    df = df[list(_TABLE_COLUMNS)].rename(columns=_TABLE_COLUMNS)
    money = "{:,.0f}"
    st.dataframe(
        df.style.format(
            {
                "Production (L)": "{:,.0f}",
                "Revenue": money,
                "COGS": money,
                "Gross margin (%)": "{:,.1f}%",
                "Overhead": money,
                "EBITDA": money,
                "EBITDA margin (%)": "{:,.1f}%",
                "Net income": money,
                "Cumulative cash": money,
                "Cost / L": "{:,.2f}",
                "Cost / 75cl": "{:,.2f}",
            }
        ),
        width="stretch",
        hide_index=True,
    )


def _render_downloads(result: SimulationResult, key_prefix: str) -> None:
    col_csv, col_json = st.columns(2)
    with col_csv:
        st.download_button(
            "Export CSV",
            data=export_simulation_csv(result),
            file_name="cost_simulation.csv",
            mime="text/csv",
            key=f"{key_prefix}_csv",
        )
    with col_json:
        st.download_button(
            "Export JSON",
            data=export_simulation_json(result),
            file_name="cost_simulation.json",
            mime="application/json",
            key=f"{key_prefix}_json",
        )


def render_simulation_panel(result: SimulationResult, key_prefix: str = "sim") -> None:
    """
    Main renderer for a single simulation result.
    """

    _render_headline_metrics(result)

    st.markdown("---")

    st.markdown("#### Recommendations")
    _render_recommendations(result)

    st.markdown("---")

    render_pnl_chart(simulation_to_dataframe(result))
    render_cumulative_cash_chart(result)
    _render_channel_chart(result)

    # Annual breakdown expander CLOSED by default
    with st.expander("Annual P&L breakdown", expanded=False):
        _render_yearly_table(result)

    _render_downloads(result, key_prefix)
