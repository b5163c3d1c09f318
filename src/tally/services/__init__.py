"""
Service layer for the Tally application.

Pure business logic separated from the imperative shell (CLI). Services take
entries and settings as arguments and return data structures.

Principles:
- No UI framework imports (Rich, Typer)
- No file I/O
- Fully testable with simple unit tests
"""

from tally.services.aggregation_service import (
    CategorySlice,
    TimeBucket,
    by_category,
    by_trailing_month,
    period_total,
    total,
)
from tally.services.chart_layout_service import (
    BarShape,
    NoDataPlaceholder,
    PieLayout,
    PieWedge,
    bar_layout,
    pie_layout,
)
from tally.services.dashboard_service import Dashboard, build_dashboard
from tally.services.filter_service import FilterSpec, apply_filter, sort_for_display
from tally.services.formatting import format_amount

__all__ = [
    "CategorySlice",
    "TimeBucket",
    "by_category",
    "by_trailing_month",
    "period_total",
    "total",
    "BarShape",
    "NoDataPlaceholder",
    "PieLayout",
    "PieWedge",
    "bar_layout",
    "pie_layout",
    "Dashboard",
    "build_dashboard",
    "FilterSpec",
    "apply_filter",
    "sort_for_display",
    "format_amount",
]
