from __future__ import annotations

"""
Totals and chart data for the whole ledger.

Renders the pie wedges as a share table and the monthly trend as horizontal
bars scaled from the bar layout heights.
"""

import math
from datetime import date
from typing import Optional

from rich.table import Table
from rich.text import Text

from tally.config import BAR_CHART_HEIGHT, BAR_CHART_PADDING
from tally.services.dashboard_service import build_dashboard
from tally.services.formatting import format_amount
from tally.workspace import Workspace

from .util import console, open_store

BAR_CELLS = 30


def run(*, workspace: Workspace, today: Optional[date] = None) -> int:
    """Print totals, the category breakdown and the trailing six-month trend."""
    store = open_store(workspace)
    view = build_dashboard(store.state, None, today=today, palette=store.palette)

    console.print(f"Total: [bold]{view.total_display}[/]")
    console.print(f"This month: [bold]{view.month_total_display}[/]\n")

    if view.pie.is_empty:
        console.print(f"[dim]{view.pie.placeholder.label}[/dim]")
    else:
        pie = Table(title="By category")
        pie.add_column("Category")
        pie.add_column("Amount", justify="right")
        pie.add_column("Share", justify="right")
        pie.add_column("Degrees", justify="right")
        for w in view.pie.wedges:
            share = w.sweep / (2 * math.pi) * 100
            pie.add_row(
                Text(f"● {w.category}", style=w.color),
                format_amount(w.amount, view.currency),
                f"{share:.1f}%",
                f"{math.degrees(w.sweep):.1f}",
            )
        console.print(pie)

    plot_height = BAR_CHART_HEIGHT - 2 * BAR_CHART_PADDING
    trend = Table(title=f"Last {len(view.bars)} months")
    trend.add_column("Month", no_wrap=True)
    trend.add_column("Amount", justify="right")
    trend.add_column("", no_wrap=True)
    for bar in view.bars:
        cells = round(bar.height / plot_height * BAR_CELLS) if plot_height > 0 else 0
        trend.add_row(
            f"{bar.label} {bar.key[:4]}",
            format_amount(bar.amount, view.currency),
            Text("█" * cells, style=bar.color),
        )
    console.print(trend)
    return 0
