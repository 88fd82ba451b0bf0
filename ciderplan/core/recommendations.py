# ciderplan/core/recommendations.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from ciderplan.config import settings
from ciderplan.core.cost_models import SimulationResult

RecommendationKind = Literal["warning", "positive"]


@dataclass(frozen=True)
class Recommendation:
    kind: RecommendationKind
    code: str
    message: str


def _late_revenue_growth_percent(result: SimulationResult) -> Optional[float]:
    """
    Revenue growth from the mid-horizon year to the final year, in %.

    None when there is nothing to compare against (no years, or no revenue
    in the mid-horizon year).
    """
    projections = result.yearly_projections
    if not projections:
        return None
    mid_revenue = projections[len(projections) // 2].total_revenue
    if mid_revenue <= 0:
        return None
    last_revenue = projections[-1].total_revenue
    return (last_revenue - mid_revenue) / mid_revenue * 100.0


def evaluate_recommendations(result: SimulationResult) -> List[Recommendation]:
    """
    Run each threshold check against a simulation result.

    Checks are independent: several warnings and positive signals can fire
    together, and they are emitted in a fixed order.
    """
    recommendations: List[Recommendation] = []
    breakeven = result.breakeven_year

    if breakeven is None or breakeven > settings.RECO_SLOW_BREAKEVEN_YEAR:
        recommendations.append(
            Recommendation(
                "warning",
                "slow_breakeven",
                f"Breakeven takes more than {settings.RECO_SLOW_BREAKEVEN_YEAR} "
                "years. Consider reducing costs or increasing prices.",
            )
        )

    if result.avg_gross_margin_percent < settings.RECO_MIN_GROSS_MARGIN_PCT:
        recommendations.append(
            Recommendation(
                "warning",
                "thin_gross_margin",
                f"Gross margin below {settings.RECO_MIN_GROSS_MARGIN_PCT:g}%. "
                "Review pricing strategy or cost structure.",
            )
        )

    if result.avg_ebitda_margin_percent < settings.RECO_MIN_EBITDA_MARGIN_PCT:
        recommendations.append(
            Recommendation(
                "warning",
                "overhead_inefficiency",
                f"EBITDA margin below {settings.RECO_MIN_EBITDA_MARGIN_PCT:g}%. "
                "Optimize overhead costs and operational efficiency.",
            )
        )

    growth = _late_revenue_growth_percent(result)
    if growth is not None and growth < settings.RECO_MIN_LATE_REVENUE_GROWTH_PCT:
        recommendations.append(
            Recommendation(
                "warning",
                "stalling_growth",
                "Revenue growth is slowing. Consider market expansion or "
                "product diversification.",
            )
        )

    roi = result.roi_percent
    # ROI 0 means no investment figure to compare against
    if roi and roi < settings.RECO_MIN_ROI_PCT:
        recommendations.append(
            Recommendation(
                "warning",
                "low_roi",
                f"ROI below {settings.RECO_MIN_ROI_PCT:g}%. Evaluate if this "
                "investment meets your return requirements.",
            )
        )

    if result.avg_ebitda_margin_percent > settings.RECO_STRONG_EBITDA_MARGIN_PCT:
        recommendations.append(
            Recommendation(
                "positive",
                "strong_ebitda_margin",
                "Strong EBITDA margin indicates healthy operational efficiency.",
            )
        )

    if breakeven is not None and breakeven <= settings.RECO_FAST_BREAKEVEN_YEAR:
        recommendations.append(
            Recommendation(
                "positive",
                "fast_breakeven",
                "Fast breakeven demonstrates strong business model viability.",
            )
        )

    return recommendations


def generate_recommendations(result: SimulationResult) -> List[str]:
    """Return the recommendation messages only, in emission order."""
    return [r.message for r in evaluate_recommendations(result)]
