# ciderplan/core/cost_models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional

TemplateType = Literal["standard", "actual", "budgeted"]
ScenarioType = Literal["best", "worst", "realistic", "custom"]


@dataclass(frozen=True)
class CostTemplate:
    """
    Static per-unit cost and pricing assumptions for the cidery.

    Money is in currency major units (DKK). All percentage fields are plain
    numbers, e.g. 95.0 = 95%. Templates are authored in the input forms and
    treated as immutable values for the duration of a simulation run.
    """

    # Ingredients
    juice_per_liter: float
    yeast_per_1000l: float
    sugar_per_kg: float
    other_per_bottle: float

    # Packaging (per bottle)
    bottle_75cl: float
    bottle_150cl: float
    label: float
    cap: float
    box_cost: float

    # Labour
    hourly_rate: float
    hours_per_batch: float
    monthly_fixed_labor: float

    # Overhead
    monthly_fixed_overhead: float
    overhead_per_liter: float
    overhead_percent_of_cogs: float

    # Production
    wastage_percent: float  # informational; losses are modelled by yield
    yield_efficiency: float  # 0–100

    # Pricing
    bottle_75cl_price: float
    bottle_150cl_price: float
    price_inflation_yearly: float

    # Below EBITDA
    depreciation_yearly: float
    interest_expense_yearly: float
    tax_rate: float

    # Record metadata
    id: Optional[str] = None
    name: str = ""
    description: str = ""
    template_type: TemplateType = "standard"


@dataclass(frozen=True)
class CostScenario:
    """
    Growth, multiplier, channel-mix and capacity assumptions layered on top
    of a CostTemplate.

    Multipliers are positive reals where 1.0 is the baseline. The channel
    percentages are expected to add up to 100; that is checked by the input
    forms, not by the engine.
    """

    volume_multiplier: float = 1.0
    price_multiplier: float = 1.0
    cost_multiplier: float = 1.0
    labor_multiplier: float = 1.0
    demand_growth_yearly: float = 0.0  # % per year, compounding

    # Sales channel mix (% of bottles)
    direct_sales_percent: float = 100.0
    wholesale_percent: float = 0.0
    retail_percent: float = 0.0

    # Channel pricing adjustments
    wholesale_discount_percent: float = 0.0
    retail_discount_percent: float = 0.0

    # Inventory costs
    holding_cost_per_bottle_monthly: float = 0.0

    # Capacity constraints (None or 0 = unconstrained)
    max_production_liters_yearly: Optional[float] = None
    max_storage_bottles: Optional[int] = None

    # Record metadata
    id: Optional[str] = None
    template_id: Optional[str] = None
    name: str = ""
    scenario_type: ScenarioType = "custom"
    notes: str = ""


@dataclass(frozen=True)
class YearlyProjection:
    """
    One projection year: volumes, P&L, cash flow and unit economics.

    Field names double as export column headers, so keep them stable.
    """

    year: int  # 1-based

    # Volumes
    production_liters: float
    effective_liters: float
    bottles_75cl: int
    bottles_150cl: int

    # Prices after inflation and price multiplier
    price_75cl: float
    price_150cl: float

    # Revenue
    revenue_direct: float
    revenue_wholesale: float
    revenue_retail: float
    total_revenue: float

    # Cost of goods sold
    cogs_ingredients: float
    cogs_packaging: float
    cogs_labor: float
    total_cogs: float

    # Operating expenses
    fixed_labor: float
    fixed_overhead: float
    overhead: float
    inventory_holding_cost: float
    total_operating_expenses: float

    # Profitability
    gross_profit: float
    gross_margin_percent: float
    ebitda: float
    ebitda_margin_percent: float
    depreciation: float
    ebit: float
    interest_expense: float
    ebt: float
    tax: float
    net_income: float
    net_margin_percent: float

    # Cash flow
    cash_balance: float  # cash generated this year (net income + depreciation)
    cumulative_cash_flow: float

    # Unit economics
    cost_per_liter: float
    cost_per_bottle_75cl: float
    cost_per_bottle_150cl: float

    # Breakeven at this year's 75cl price point
    breakeven_bottles: float
    breakeven_revenue: float


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SimulationResult:
    """
    Aggregate results for a single scenario across all projection years.
    """

    yearly_projections: List[YearlyProjection]
    years_projected: int

    # Aggregates
    total_revenue: float
    total_cogs: float
    total_gross_profit: float
    total_ebitda: float
    total_ebit: float
    total_net_income: float

    # Revenue-weighted averages, in %
    avg_gross_margin_percent: float
    avg_ebitda_margin_percent: float

    # Investment metrics
    breakeven_year: Optional[int]  # 0-based index, None if never cash-positive
    payback_period_years: Optional[float]
    roi_percent: float

    scenario_id: Optional[str] = None
    id: Optional[str] = None
    simulation_date: datetime = field(default_factory=_utc_now, compare=False)
