# ciderplan/ui/layout.py
from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from ciderplan.core.cost_models import SimulationResult
from ciderplan.core.input_checks import (
    check_run_parameters,
    check_scenario,
    check_template,
)
from ciderplan.core.result_repository import InMemoryResultRepository
from ciderplan.core.scenario_presets import PRESET_LABELS
from ciderplan.ui.assumptions import render_assumptions_and_methodology
from ciderplan.ui.charts import render_preset_comparison_chart
from ciderplan.ui.cost_inputs import SimulationInputs, render_simulation_inputs
from ciderplan.ui.formatting import (
    format_breakeven_year,
    format_currency,
    format_percent,
    format_years,
)
from ciderplan.ui.simulation_cache import (
    InputsKey,
    inputs_key,
    run_cached_preset_comparison,
    run_cached_simulation,
    save_result_once,
)
from ciderplan.ui.simulation_panel import render_simulation_panel

logger = logging.getLogger("ciderplan.ui")

_REPOSITORY_KEY = "result_repository"
_SAVED_IDS_KEY = "saved_result_ids"


def _get_session_repository() -> InMemoryResultRepository:
    if _REPOSITORY_KEY not in st.session_state:
        st.session_state[_REPOSITORY_KEY] = InMemoryResultRepository()
    return st.session_state[_REPOSITORY_KEY]


def _render_input_warnings(inputs: SimulationInputs) -> None:
    warnings = (
        check_template(inputs.template)
        + check_scenario(inputs.scenario)
        + check_run_parameters(inputs.years, inputs.base_volume_liters)
    )
    for message in warnings:
        st.warning(message)


def _render_save_controls(result: SimulationResult, key: InputsKey) -> None:
    repository = _get_session_repository()
    saved_ids = st.session_state.setdefault(_SAVED_IDS_KEY, {})
    if st.button("Save simulation"):
        result_id, newly_saved = save_result_once(repository, saved_ids, key, result)
        if newly_saved:
            st.success(f"Simulation saved ({result_id[:8]}).")
        else:
            logger.debug("Save skipped, inputs already stored as %s", result_id)
            st.info(f"These inputs are already saved ({result_id[:8]}).")

    saved = repository.list()
    if saved:
        with st.expander(f"Saved simulations ({len(saved)})", expanded=False):
            st.dataframe(
                pd.DataFrame(
                    [
                        {
                            "Saved at": r.simulation_date.strftime("%d/%m/%Y %H:%M"),
                            "Years": r.years_projected,
                            "Revenue": format_currency(r.total_revenue),
                            "Net income": format_currency(r.total_net_income),
                            "Breakeven": format_breakeven_year(r.breakeven_year),
                        }
                        for r in saved
                    ]
                ),
                width="stretch",
                hide_index=True,
            )


def _render_preset_comparison(inputs: SimulationInputs) -> None:
    results = run_cached_preset_comparison(
        inputs.template,
        inputs.scenario,
        inputs.years,
        inputs.base_volume_liters,
    )
    labelled = {PRESET_LABELS[name]: result for name, result in results.items()}

    st.dataframe(
        pd.DataFrame(
            [
                {
                    "Scenario": label,
                    "Total revenue": format_currency(r.total_revenue),
                    "Total EBITDA": format_currency(r.total_ebitda),
                    "Avg EBITDA margin": format_percent(r.avg_ebitda_margin_percent),
                    "Breakeven": format_breakeven_year(r.breakeven_year),
                    "Payback": format_years(r.payback_period_years),
                    "ROI": format_percent(r.roi_percent),
                }
                for label, r in labelled.items()
            ]
        ),
        width="stretch",
        hide_index=True,
    )
    render_preset_comparison_chart(labelled)


def render_dashboard() -> None:
    st.title("Cidery cost & financial planner")

    with st.sidebar:
        inputs = render_simulation_inputs()

    _render_input_warnings(inputs)

    result = run_cached_simulation(
        inputs.template,
        inputs.scenario,
        inputs.years,
        inputs.base_volume_liters,
    )
    key = inputs_key(
        inputs.template,
        inputs.scenario,
        inputs.years,
        inputs.base_volume_liters,
    )

    tab_projection, tab_compare, tab_method = st.tabs(
        ["Projection", "Scenario comparison", "Assumptions & methodology"]
    )

    with tab_projection:
        st.subheader(inputs.scenario.name or "Projection")
        render_simulation_panel(result)
        _render_save_controls(result, key)

    with tab_compare:
        st.markdown(
            "The current scenario under the best / base / worst multipliers; "
            "growth, channel mix and caps are kept."
        )
        _render_preset_comparison(inputs)

    with tab_method:
        render_assumptions_and_methodology()
