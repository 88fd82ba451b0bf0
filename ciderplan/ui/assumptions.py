from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd
import streamlit as st

from ciderplan.config import settings


@dataclass
class BulletItem:
    text: str
    subitems: List[str] = field(default_factory=list)


@dataclass
class AssumptionSection:
    title: str
    paragraphs: List[str]
    bullets: List[BulletItem] = field(default_factory=list)
    table: Optional[List[List[str]]] = None


def get_assumptions_sections() -> list[AssumptionSection]:
    """Return the model's fixed assumptions and methodology text."""
    share_75 = settings.BOTTLE_75CL_VOLUME_SHARE * 100
    share_150 = settings.BOTTLE_150CL_VOLUME_SHARE * 100

    return [
        AssumptionSection(
            title="Volumes and bottling",
            paragraphs=[
                "Production grows each year by the scenario's demand growth and "
                "is scaled by the volume multiplier, then capped by the maximum "
                "yearly production if one is set.",
                "Yield efficiency converts pressed volume into sellable cider. "
                "Wastage is recorded on the template but losses are modelled "
                "through yield only.",
            ],
            bullets=[
                BulletItem(
                    text="**Bottle split (fixed)**",
                    subitems=[
                        f"{share_75:.0f}% of sellable volume in 75cl bottles, "
                        f"{share_150:.0f}% in 150cl bottles.",
                        "Bottle counts are rounded down to whole bottles.",
                        "A storage cap scales both sizes down by the same ratio.",
                    ],
                ),
            ],
        ),
        AssumptionSection(
            title="Costs",
            paragraphs=[
                "Ingredients and packaging carry a flat "
                f"{settings.COST_INFLATION_YEARLY_PCT:g}% yearly cost inflation "
                "and the scenario cost multiplier. Labour uses the labour "
                "multiplier only; overhead is not inflated.",
            ],
            table=[
                ["Assumption", "Value"],
                ["Batch size", f"{settings.BATCH_SIZE_LITERS:,.0f} L"],
                ["Sugar per litre", f"{settings.SUGAR_KG_PER_LITER:g} kg"],
                ["Cost inflation", f"{settings.COST_INFLATION_YEARLY_PCT:g}% / year"],
                [
                    "Average inventory",
                    f"{settings.AVERAGE_INVENTORY_FRACTION:.0%} of yearly bottles",
                ],
            ],
        ),
        AssumptionSection(
            title="Cash flow and returns",
            paragraphs=[
                "Cumulative cash flow starts at minus one year's depreciation, "
                "used as a stand-in for the initial investment. Each year adds "
                "net income plus depreciation.",
                "Breakeven is the first year with positive cumulative cash flow. "
                "Payback interpolates between the last negative and first positive "
                "year, and is not shown when the first year is already positive.",
                "ROI is total net income over the initial investment stand-in.",
                "Breakeven bottles use the 75cl bottle as the reference product.",
            ],
        ),
    ]


def render_assumptions_and_methodology() -> None:
    for section in get_assumptions_sections():
        st.markdown(f"#### {section.title}")
        for paragraph in section.paragraphs:
            st.markdown(paragraph)
        for bullet in section.bullets:
            st.markdown(f"- {bullet.text}")
            for sub in bullet.subitems:
                st.markdown(f"    - {sub}")
        if section.table:
            header, *rows = section.table
            st.dataframe(
                pd.DataFrame(rows, columns=header),
                width="stretch",
                hide_index=True,
            )
