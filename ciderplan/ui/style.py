# ciderplan/ui/style.py

from __future__ import annotations

"""
UI / visual style constants for the dashboard.

Keep anything purely presentational in here (line widths, marker sizes,
chart margins), and keep modelling constants in ciderplan/config/settings.py.
"""

# ---------------------------------------------------------------------------
# Chart line widths
# ---------------------------------------------------------------------------

LINE_WIDTH_PRIMARY = 2.0  # revenue / cash lines
LINE_WIDTH_SECONDARY = 1.25  # EBITDA / net income

BREAKEVEN_MARKER_SIZE = 10
BREAKEVEN_MARKER_COLOR = "#e6a23c"  # amber

ZERO_LINE_COLOR = "rgba(0,0,0,0.2)"

CHART_MARGIN = dict(l=40, r=20, t=60, b=60)
CHART_LEGEND = dict(orientation="h", yanchor="bottom", y=-0.25, xanchor="center", x=0.5)
