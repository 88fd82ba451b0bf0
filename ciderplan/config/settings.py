# ciderplan/config/settings.py

from ciderplan.config.env import APP_ENV

# Cost & financial planning settings for the cidery dashboard

# --- Projection defaults ---

DEFAULT_PROJECTION_YEARS = 11
DEFAULT_BASE_VOLUME_LITERS = 1000.0
MAX_PROJECTION_YEARS = 30

# --- Fixed model policy ---
# These are modelling assumptions, not template/scenario inputs.

# Share of effective volume bottled in each size
BOTTLE_75CL_VOLUME_SHARE = 0.7
BOTTLE_150CL_VOLUME_SHARE = 0.3
BOTTLE_75CL_LITERS = 0.75
BOTTLE_150CL_LITERS = 1.5

BATCH_SIZE_LITERS = 1000.0  # one labour batch per 1000 L started
SUGAR_KG_PER_LITER = 0.05
COST_INFLATION_YEARLY_PCT = 2.5  # compounding, applied to materials only
MONTHS_PER_YEAR = 12

# Average stock on hand as a fraction of the year's bottled output
AVERAGE_INVENTORY_FRACTION = 0.5

# --- Recommendation thresholds ---
# Percentages are plain numbers (40.0 = 40%), years are 0-based indices.

RECO_SLOW_BREAKEVEN_YEAR = 5
RECO_MIN_GROSS_MARGIN_PCT = 40.0
RECO_MIN_EBITDA_MARGIN_PCT = 20.0
RECO_MIN_LATE_REVENUE_GROWTH_PCT = 20.0
RECO_MIN_ROI_PCT = 50.0
RECO_STRONG_EBITDA_MARGIN_PCT = 30.0
RECO_FAST_BREAKEVEN_YEAR = 2

# --- Default cost template (form defaults) ---

DEFAULT_TEMPLATE_NAME = "Standard cost template"

# Ingredients
DEFAULT_JUICE_PER_LITER = 8.0
DEFAULT_YEAST_PER_1000L = 741.0
DEFAULT_SUGAR_PER_KG = 0.1
DEFAULT_OTHER_PER_BOTTLE = 10.96

# Packaging (per unit)
DEFAULT_BOTTLE_75CL_COST = 3.0
DEFAULT_BOTTLE_150CL_COST = 5.0
DEFAULT_LABEL_COST = 4.0
DEFAULT_CAP_COST = 0.1
DEFAULT_BOX_COST = 2.0

# Labour
DEFAULT_HOURLY_RATE = 350.0
DEFAULT_HOURS_PER_BATCH = 8.0
DEFAULT_MONTHLY_FIXED_LABOR = 0.0

# Overhead
DEFAULT_MONTHLY_FIXED_OVERHEAD = 10_000.0
DEFAULT_OVERHEAD_PER_LITER = 0.5
DEFAULT_OVERHEAD_PERCENT_OF_COGS = 15.0

# Production
DEFAULT_WASTAGE_PCT = 5.0
DEFAULT_YIELD_EFFICIENCY_PCT = 95.0

# Pricing (excl. VAT)
DEFAULT_BOTTLE_75CL_PRICE = 110.0
DEFAULT_BOTTLE_150CL_PRICE = 200.0
DEFAULT_PRICE_INFLATION_YEARLY_PCT = 3.0

# Below EBITDA
DEFAULT_DEPRECIATION_YEARLY = 50_000.0
DEFAULT_INTEREST_EXPENSE_YEARLY = 0.0
DEFAULT_TAX_RATE_PCT = 22.0  # Danish corporation tax

# --- Default scenario ---

DEFAULT_SCENARIO_NAME = "Base case"
DEFAULT_DEMAND_GROWTH_YEARLY_PCT = 50.0
DEFAULT_DIRECT_SALES_PCT = 40.0
DEFAULT_WHOLESALE_PCT = 40.0
DEFAULT_RETAIL_PCT = 20.0
DEFAULT_WHOLESALE_DISCOUNT_PCT = 15.0
DEFAULT_RETAIL_DISCOUNT_PCT = 10.0
DEFAULT_HOLDING_COST_PER_BOTTLE_MONTHLY = 0.5

# --- Scenario presets (multipliers, 1.0 = baseline) ---

PRESET_BEST_VOLUME_MULTIPLIER = 1.5
PRESET_BEST_PRICE_MULTIPLIER = 1.2
PRESET_BEST_COST_MULTIPLIER = 0.9

PRESET_REALISTIC_VOLUME_MULTIPLIER = 1.0
PRESET_REALISTIC_PRICE_MULTIPLIER = 1.0
PRESET_REALISTIC_COST_MULTIPLIER = 1.0

PRESET_WORST_VOLUME_MULTIPLIER = 0.7
PRESET_WORST_PRICE_MULTIPLIER = 0.9
PRESET_WORST_COST_MULTIPLIER = 1.2

# --- Presentation ---

CURRENCY_CODE = "DKK"
CURRENCY_SYMBOL = "kr."
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","
MISSING_VALUE_TEXT = "—"

# st.cache_data entries for memoised simulation runs
SIMULATION_CACHE_MAX_ENTRIES = 64 if APP_ENV == "dev" else 32

# --- Chart styling ---

CHART_REVENUE_COLOR = "#1f77b4"
CHART_EBITDA_COLOR = "#2ca02c"
CHART_NET_INCOME_COLOR = "#9467bd"
CHART_CASH_POSITIVE_COLOR = "#2ca02c"
CHART_CASH_NEGATIVE_COLOR = "#d62728"
CHART_EBITDA_LINE_DASH = [4, 2]
CHANNEL_COLORS = {
    "Direct": "#8c564b",
    "Wholesale": "#e6a23c",
    "Retail": "#17becf",
}
