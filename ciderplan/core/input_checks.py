"""Form-level sanity checks for cost templates and scenarios.

The projection engine accepts anything finite; these helpers only produce
human-readable warnings for the input forms to display.
"""

from __future__ import annotations

from dataclasses import fields
from typing import List

from ciderplan.config import settings
from ciderplan.core.cost_models import CostScenario, CostTemplate

# Template fields that may legitimately be negative (price deflation)
_TEMPLATE_SIGNED_FIELDS = frozenset({"price_inflation_yearly"})

_PERCENT_FIELDS = ("yield_efficiency", "wastage_percent", "tax_rate")

_MULTIPLIER_FIELDS = (
    "volume_multiplier",
    "price_multiplier",
    "cost_multiplier",
    "labor_multiplier",
)

_CHANNEL_TOLERANCE_PCT = 0.01


def check_template(template: CostTemplate) -> List[str]:
    """Return warnings for negative amounts and out-of-range percentages."""

    warnings: List[str] = []
    for f in fields(template):
        value = getattr(template, f.name)
        if not isinstance(value, (int, float)) or f.name in _TEMPLATE_SIGNED_FIELDS:
            continue
        if value < 0:
            warnings.append(f"{f.name} is negative ({value:g}).")

    for name in _PERCENT_FIELDS:
        value = getattr(template, name)
        if value > 100:
            warnings.append(f"{name} should be between 0 and 100 ({value:g}).")

    return warnings


def check_scenario(scenario: CostScenario) -> List[str]:
    """Return warnings for the channel mix, multipliers, discounts and caps."""

    warnings: List[str] = []

    channel_total = (
        scenario.direct_sales_percent
        + scenario.wholesale_percent
        + scenario.retail_percent
    )
    if abs(channel_total - 100.0) > _CHANNEL_TOLERANCE_PCT:
        warnings.append(
            f"Channel mix adds up to {channel_total:g}%, expected 100%."
        )

    for name in _MULTIPLIER_FIELDS:
        value = getattr(scenario, name)
        if value <= 0:
            warnings.append(f"{name} should be positive ({value:g}).")

    for name in ("wholesale_discount_percent", "retail_discount_percent"):
        value = getattr(scenario, name)
        if not 0 <= value <= 100:
            warnings.append(f"{name} should be between 0 and 100 ({value:g}).")

    if scenario.holding_cost_per_bottle_monthly < 0:
        warnings.append("holding_cost_per_bottle_monthly is negative.")

    for name in ("max_production_liters_yearly", "max_storage_bottles"):
        value = getattr(scenario, name)
        if value is not None and value < 0:
            warnings.append(f"{name} is negative ({value:g}).")

    return warnings


def check_run_parameters(years: int, base_volume_liters: float) -> List[str]:
    warnings: List[str] = []
    if years <= 0:
        warnings.append("Projection horizon must be at least one year.")
    elif years > settings.MAX_PROJECTION_YEARS:
        warnings.append(
            f"Projection horizon above {settings.MAX_PROJECTION_YEARS} years."
        )
    if base_volume_liters < 0:
        warnings.append("Base production volume is negative.")
    return warnings
