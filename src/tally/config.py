"""
Central configuration for the Tally application.

Path resolution lives in tally.workspace.Workspace; the category palette is
loaded from config/categories.yml by tally.model.category_io. What remains here
are the fixed defaults shared by the store, the chart layout and the formatter.
"""

DEFAULT_CURRENCY = "INR"

# Display symbols by ISO currency code. Codes missing here format as bare numbers.
CURRENCY_SYMBOLS: dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

TREND_WINDOW_MONTHS = 6

# Pie chart geometry (renderer units)
PIE_CENTER = (100.0, 100.0)
PIE_RADIUS = 80.0
PIE_LABEL_MARGIN = 18.0

# Bar chart geometry (renderer units)
BAR_CHART_WIDTH = 300.0
BAR_CHART_HEIGHT = 120.0
BAR_CHART_PADDING = 20.0
BAR_WIDTH_RATIO = 0.6
BAR_SCALE_FLOOR = 10.0
BAR_LABEL_OFFSET = 6.0
