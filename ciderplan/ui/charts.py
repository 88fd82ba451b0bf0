from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ciderplan.config import settings
from ciderplan.core.cost_models import SimulationResult
from ciderplan.ui import style


def render_pnl_chart(
    df: pd.DataFrame,
    title: str = "Revenue, EBITDA and net income by year",
) -> None:
    """
    Render the yearly P&L lines.

    Expected df columns (see simulation_to_dataframe):
    - year, total_revenue, ebitda, net_income
    """

    required = {"year", "total_revenue", "ebitda", "net_income"}
    if not required.issubset(df.columns):
        raise ValueError(f"DataFrame must contain columns {sorted(required)}")

    fig = go.Figure()

    fig.add_trace(
        go.Bar(
            x=df["year"],
            y=df["total_revenue"],
            name="Revenue",
            marker_color=settings.CHART_REVENUE_COLOR,
            opacity=0.35,
            hovertemplate="Year %{x}<br>Revenue: %{y:,.0f} kr.<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["year"],
            y=df["ebitda"],
            mode="lines+markers",
            name="EBITDA",
            line=dict(
                color=settings.CHART_EBITDA_COLOR,
                width=style.LINE_WIDTH_SECONDARY,
                dash="dash",
            ),
            hovertemplate="Year %{x}<br>EBITDA: %{y:,.0f} kr.<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=df["year"],
            y=df["net_income"],
            mode="lines+markers",
            name="Net income",
            line=dict(
                color=settings.CHART_NET_INCOME_COLOR,
                width=style.LINE_WIDTH_SECONDARY,
            ),
            hovertemplate="Year %{x}<br>Net income: %{y:,.0f} kr.<extra></extra>",
        )
    )

    fig.add_hline(y=0, line_width=0.75, line_dash="dash", line_color=style.ZERO_LINE_COLOR)

    fig.update_layout(
        title=title,
        xaxis=dict(title="Year", dtick=1),
        yaxis=dict(title=f"{settings.CURRENCY_CODE}"),
        hovermode="x unified",
        legend=style.CHART_LEGEND,
        margin=style.CHART_MARGIN,
    )

    st.plotly_chart(fig, width="stretch")


def render_cumulative_cash_chart(
    result: SimulationResult,
    title: str = "Cumulative cash flow & breakeven",
) -> None:
    """
    Bars of cash generated per year, line of cumulative cash flow, and a
    marker on the breakeven year when there is one.
    """

    projections = result.yearly_projections
    if not projections:
        st.info("No projection years to chart.")
        return

    years = [p.year for p in projections]
    cumulative = [p.cumulative_cash_flow for p in projections]
    generated = [p.cash_balance for p in projections]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=years,
            y=generated,
            name="Cash generated",
            marker_color=[
                settings.CHART_CASH_POSITIVE_COLOR
                if v >= 0
                else settings.CHART_CASH_NEGATIVE_COLOR
                for v in generated
            ],
            opacity=0.4,
            hovertemplate="Year %{x}<br>Cash generated: %{y:,.0f} kr.<extra></extra>",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=years,
            y=cumulative,
            mode="lines",
            name="Cumulative cash flow",
            line=dict(
                color=settings.CHART_CASH_POSITIVE_COLOR,
                width=style.LINE_WIDTH_PRIMARY,
            ),
            hovertemplate="Year %{x}<br>Cumulative: %{y:,.0f} kr.<extra></extra>",
        )
    )

    fig.add_hline(y=0, line_width=0.75, line_dash="dash", line_color=style.ZERO_LINE_COLOR)

    breakeven: Optional[int] = result.breakeven_year
    if breakeven is not None:
        point = projections[breakeven]
        fig.add_trace(
            go.Scatter(
                x=[point.year],
                y=[point.cumulative_cash_flow],
                mode="markers",
                name="Breakeven",
                marker=dict(
                    color=style.BREAKEVEN_MARKER_COLOR,
                    size=style.BREAKEVEN_MARKER_SIZE,
                ),
                hovertemplate=(
                    "<b>Breakeven</b><br>Year %{x}<br>"
                    "Cumulative: %{y:,.0f} kr.<extra></extra>"
                ),
            )
        )

    fig.update_layout(
        title=title,
        xaxis=dict(title="Year", dtick=1),
        yaxis=dict(title=f"Cash ({settings.CURRENCY_CODE})"),
        hovermode="x unified",
        legend=style.CHART_LEGEND,
        margin=style.CHART_MARGIN,
    )

    st.plotly_chart(fig, width="stretch")


def render_preset_comparison_chart(results: Dict[str, SimulationResult]) -> None:
    """Cumulative cash flow of each preset on one chart."""

    fig = go.Figure()
    for label, result in results.items():
        fig.add_trace(
            go.Scatter(
                x=[p.year for p in result.yearly_projections],
                y=[p.cumulative_cash_flow for p in result.yearly_projections],
                mode="lines",
                name=label,
                line=dict(width=style.LINE_WIDTH_PRIMARY),
            )
        )

    fig.add_hline(y=0, line_width=0.75, line_dash="dash", line_color=style.ZERO_LINE_COLOR)
    fig.update_layout(
        title="Cumulative cash flow by scenario preset",
        xaxis=dict(title="Year", dtick=1),
        yaxis=dict(title=f"Cash ({settings.CURRENCY_CODE})"),
        hovermode="x unified",
        legend=style.CHART_LEGEND,
        margin=style.CHART_MARGIN,
    )
    st.plotly_chart(fig, width="stretch")
