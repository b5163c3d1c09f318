"""List expenses, newest first, optionally filtered."""

from __future__ import annotations

from datetime import date
from typing import Optional

from rich.table import Table

from tally.services.dashboard_service import build_dashboard
from tally.services.filter_service import FilterSpec
from tally.services.formatting import format_amount
from tally.workspace import Workspace

from .util import console, fmt_date, open_store, short_id


def run(
    *,
    workspace: Workspace,
    category: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> int:
    """Show the filtered entry list as a Rich table.

    With no filter options the full ledger is listed.
    """
    store = open_store(workspace)

    spec = None
    if category or date_from or date_to:
        spec = FilterSpec(category=category or None, date_from=date_from, date_to=date_to)

    view = build_dashboard(store.state, spec, palette=store.palette)

    if not view.visible:
        console.print("[dim]No expenses yet.[/dim]")
        return 0

    table = Table(title=f"Expenses ({view.currency})", show_lines=False)
    table.add_column("", no_wrap=True)
    table.add_column("Category", style="bold")
    table.add_column("Note", style="dim")
    table.add_column("Amount", justify="right")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("ID", style="dim", no_wrap=True)

    shown_total = 0.0
    for e in view.visible:
        shown_total += e.amount_value
        table.add_row(
            store.palette.icon_for(e.category),
            e.category,
            e.note or "",
            format_amount(e.amount, view.currency),
            fmt_date(e),
            short_id(e.id),
        )

    console.print(table)
    if spec is not None:
        console.print(
            f"Showing {len(view.visible)} of {len(view.entries)} entries, "
            f"{format_amount(shown_total, view.currency)}"
        )
    console.print(f"Total: [bold]{view.total_display}[/]  This month: [bold]{view.month_total_display}[/]")
    return 0
