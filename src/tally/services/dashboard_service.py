"""
Dashboard service - the full derivation pass behind the ledger screen.

Composes the filter, aggregation, layout and formatting functions into one
pure call. The list view honours the filter; totals and both charts always
describe the whole ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from tally.config import TREND_WINDOW_MONTHS
from tally.model.category import CategoryPalette
from tally.model.entry import Entry, LedgerState
from tally.services.aggregation_service import (
    CategorySlice,
    TimeBucket,
    by_category,
    by_trailing_month,
    period_total,
    total,
)
from tally.services.chart_layout_service import BarShape, PieLayout, bar_layout, pie_layout
from tally.services.filter_service import FilterSpec, apply_filter, sort_for_display
from tally.services.formatting import format_amount


@dataclass
class Dashboard:
    currency: str
    entries: list[Entry]  # all entries, newest first
    visible: list[Entry]  # entries passing the filter, newest first
    total: float
    month_total: float
    total_display: str
    month_total_display: str
    slices: list[CategorySlice]
    buckets: list[TimeBucket]
    pie: PieLayout
    bars: list[BarShape]


def build_dashboard(
    state: LedgerState,
    spec: FilterSpec | None = None,
    today: date | None = None,
    palette: CategoryPalette | None = None,
    window_size: int = TREND_WINDOW_MONTHS,
) -> Dashboard:
    """Derive every view of the ledger for one render.

    Pie slices follow first appearance in the newest-first list, the same
    order the list view shows.
    """
    today = today or date.today()
    ordered = sort_for_display(state.entries)
    visible = list(apply_filter(ordered, spec))

    grand_total = total(ordered)
    month_total = period_total(ordered, today)
    slices = by_category(ordered)
    buckets = by_trailing_month(ordered, today, window_size)

    return Dashboard(
        currency=state.currency,
        entries=ordered,
        visible=visible,
        total=grand_total,
        month_total=month_total,
        total_display=format_amount(grand_total, state.currency),
        month_total_display=format_amount(month_total, state.currency),
        slices=slices,
        buckets=buckets,
        pie=pie_layout(slices, palette=palette),
        bars=bar_layout(buckets),
    )


__all__ = ["Dashboard", "build_dashboard"]
