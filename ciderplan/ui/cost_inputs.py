# ciderplan/ui/cost_inputs.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

import streamlit as st

from ciderplan.config import settings
from ciderplan.core.cost_models import CostScenario, CostTemplate
from ciderplan.core.scenario_presets import (
    PRESET_LABELS,
    apply_preset,
    build_default_scenario,
    build_default_template,
)

_PRESET_STATE_KEY = "scenario_preset"


@dataclass
class SimulationInputs:
    """Everything the engine needs for one run, as edited in the sidebar."""

    template: CostTemplate
    scenario: CostScenario
    years: int
    base_volume_liters: float


def _money(label: str, value: float, step: float = 1.0, help: Optional[str] = None):
    return st.number_input(
        label,
        min_value=0.0,
        value=float(value),
        step=step,
        help=help,
    )


def _percent(label: str, value: float, help: Optional[str] = None):
    return st.number_input(
        label,
        min_value=0.0,
        max_value=100.0,
        value=float(value),
        step=1.0,
        help=help,
    )


def render_template_inputs() -> CostTemplate:
    """Render the cost template form and return the edited template."""

    defaults = build_default_template()

    with st.expander("Ingredients", expanded=False):
        juice = _money("Juice (kr. per L)", defaults.juice_per_liter, 0.5)
        yeast = _money("Yeast (kr. per 1000 L)", defaults.yeast_per_1000l, 10.0)
        sugar = _money("Sugar (kr. per kg)", defaults.sugar_per_kg, 0.1)
        other = _money("Other ingredients (kr. per bottle)", defaults.other_per_bottle, 0.1)

    with st.expander("Packaging", expanded=False):
        bottle_75 = _money("75cl bottle", defaults.bottle_75cl, 0.1)
        bottle_150 = _money("150cl bottle", defaults.bottle_150cl, 0.1)
        label = _money("Label", defaults.label, 0.1)
        cap = _money("Cap", defaults.cap, 0.05)
        box = _money("Box (per bottle)", defaults.box_cost, 0.1)

    with st.expander("Labour & overhead", expanded=False):
        hourly_rate = _money("Hourly rate", defaults.hourly_rate, 10.0)
        hours_per_batch = _money(
            "Hours per batch",
            defaults.hours_per_batch,
            0.5,
            help=f"One batch per {settings.BATCH_SIZE_LITERS:,.0f} L produced.",
        )
        fixed_labor = _money("Fixed labour (per month)", defaults.monthly_fixed_labor, 1000.0)
        fixed_overhead = _money(
            "Fixed overhead (per month)", defaults.monthly_fixed_overhead, 1000.0
        )
        overhead_per_liter = _money("Overhead per L", defaults.overhead_per_liter, 0.1)
        overhead_pct = _percent("Overhead (% of COGS)", defaults.overhead_percent_of_cogs)

    with st.expander("Production & pricing", expanded=True):
        wastage = _percent("Wastage (%)", defaults.wastage_percent)
        yield_efficiency = _percent(
            "Yield efficiency (%)",
            defaults.yield_efficiency,
            help="Share of pressed volume that ends up as sellable cider.",
        )
        price_75 = _money("75cl price (excl. VAT)", defaults.bottle_75cl_price, 5.0)
        price_150 = _money("150cl price (excl. VAT)", defaults.bottle_150cl_price, 5.0)
        price_inflation = st.number_input(
            "Price inflation (% per year)",
            value=float(defaults.price_inflation_yearly),
            step=0.5,
        )

    with st.expander("Depreciation, interest & tax", expanded=False):
        depreciation = _money(
            "Depreciation (per year)",
            defaults.depreciation_yearly,
            5000.0,
            help="Also used as the initial investment for cash flow and ROI.",
        )
        interest = _money("Interest expense (per year)", defaults.interest_expense_yearly, 1000.0)
        tax_rate = _percent("Tax rate (%)", defaults.tax_rate)

    return replace(
        defaults,
        juice_per_liter=juice,
        yeast_per_1000l=yeast,
        sugar_per_kg=sugar,
        other_per_bottle=other,
        bottle_75cl=bottle_75,
        bottle_150cl=bottle_150,
        label=label,
        cap=cap,
        box_cost=box,
        hourly_rate=hourly_rate,
        hours_per_batch=hours_per_batch,
        monthly_fixed_labor=fixed_labor,
        monthly_fixed_overhead=fixed_overhead,
        overhead_per_liter=overhead_per_liter,
        overhead_percent_of_cogs=overhead_pct,
        wastage_percent=wastage,
        yield_efficiency=yield_efficiency,
        bottle_75cl_price=price_75,
        bottle_150cl_price=price_150,
        price_inflation_yearly=price_inflation,
        depreciation_yearly=depreciation,
        interest_expense_yearly=interest,
        tax_rate=tax_rate,
    )


def _render_preset_buttons() -> None:
    cols = st.columns(len(PRESET_LABELS))
    for col, (name, label) in zip(cols, PRESET_LABELS.items()):
        with col:
            if st.button(label, key=f"preset_{name}"):
                st.session_state[_PRESET_STATE_KEY] = name


def render_scenario_inputs() -> CostScenario:
    """Render the scenario form, starting from the selected preset."""

    st.caption("Scenario preset")
    _render_preset_buttons()
    preset = st.session_state.get(_PRESET_STATE_KEY, "realistic")
    base = apply_preset(build_default_scenario(), preset)

    name = st.text_input("Scenario name", value=PRESET_LABELS[preset])

    st.markdown("**Multipliers**")
    volume = st.slider("Volume", 0.1, 5.0, float(base.volume_multiplier), 0.1)
    price = st.slider("Price", 0.5, 2.0, float(base.price_multiplier), 0.05)
    cost = st.slider("Cost", 0.5, 2.0, float(base.cost_multiplier), 0.05)
    labor = st.slider("Labour", 0.5, 2.0, float(base.labor_multiplier), 0.05)
    growth = st.number_input(
        "Demand growth (% per year)",
        value=float(base.demand_growth_yearly),
        step=5.0,
    )

    st.markdown("**Sales channel mix**")
    direct = _percent("Direct sales (%)", base.direct_sales_percent)
    wholesale = _percent("Wholesale (%)", base.wholesale_percent)
    retail = _percent("Retail (%)", base.retail_percent)
    wholesale_discount = _percent("Wholesale discount (%)", base.wholesale_discount_percent)
    retail_discount = _percent("Retail discount (%)", base.retail_discount_percent)

    holding = _money(
        "Holding cost (per bottle per month)",
        base.holding_cost_per_bottle_monthly,
        0.1,
    )

    max_liters: Optional[float] = None
    max_bottles: Optional[int] = None
    if st.checkbox("Capacity constraints", value=False):
        max_liters = st.number_input(
            "Max production (L per year)", min_value=0.0, value=50_000.0, step=1000.0
        )
        max_bottles = int(
            st.number_input(
                "Max storage (bottles)", min_value=0, value=60_000, step=1000
            )
        )

    return replace(
        base,
        name=name,
        volume_multiplier=volume,
        price_multiplier=price,
        cost_multiplier=cost,
        labor_multiplier=labor,
        demand_growth_yearly=growth,
        direct_sales_percent=direct,
        wholesale_percent=wholesale,
        retail_percent=retail,
        wholesale_discount_percent=wholesale_discount,
        retail_discount_percent=retail_discount,
        holding_cost_per_bottle_monthly=holding,
        max_production_liters_yearly=max_liters,
        max_storage_bottles=max_bottles,
        scenario_type="custom" if name != PRESET_LABELS[preset] else preset,
    )


def render_simulation_inputs() -> SimulationInputs:
    """
    Render all sidebar inputs.

    Returns
    -------
    SimulationInputs
        Template, scenario, horizon and starting volume for the engine.
    """

    st.markdown(
        "Set the cost template and scenario. The projection updates on "
        "every change."
    )

    years = int(
        st.number_input(
            "Projection horizon (years)",
            min_value=1,
            max_value=settings.MAX_PROJECTION_YEARS,
            value=settings.DEFAULT_PROJECTION_YEARS,
            step=1,
        )
    )
    base_volume = st.number_input(
        "Year-one production (L)",
        min_value=0.0,
        value=settings.DEFAULT_BASE_VOLUME_LITERS,
        step=500.0,
    )

    st.subheader("Cost template")
    template = render_template_inputs()

    st.subheader("Scenario")
    scenario = render_scenario_inputs()

    return SimulationInputs(
        template=template,
        scenario=scenario,
        years=years,
        base_volume_liters=base_volume,
    )
