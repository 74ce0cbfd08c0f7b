"""
Display settings for the payment default dashboard.

Page metadata, colour palette, chart sizes and the shared dark layout used by
every figure in src/charts.py.
"""

import os

# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
PAGE_TITLE = "Payment Default Prediction Analysis"
PAGE_ICON = "📊"
PAGE_LAYOUT = "wide"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("PAYMENT_DEFAULT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(levelname)s | %(message)s"

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8"]
PRIMARY_COLOR = "#4C51BF"
REFERENCE_LINE_COLOR = "#dddddd"

METRIC_COLORS = {
    "precision": "#0088FE",
    "recall": "#00C49F",
    "f1": "#FF8042",
}

BACKGROUND_COLOR = "#0f172a"
FONT_COLOR = "#e2e8f0"
GRID_COLOR = "rgba(255,255,255,0.05)"

# ---------------------------------------------------------------------------
# Chart sizes (px)
# ---------------------------------------------------------------------------
CARD_CHART_HEIGHT = 300
WIDE_CHART_HEIGHT = 400

# Model Performance tab AUC axis window
AUC_AXIS_RANGE = [0.7, 0.9]
