"""Seed a handful of sample expenses into an empty ledger."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from tally.workspace import Workspace

from .util import console, open_store

DEMO_ENTRIES = [
    # (amount, category, days ago, note)
    (200, "Food", 2, "Lunch"),
    (1200, "Bills", 5, "Electricity"),
    (450, "Travel", 12, "Taxi"),
    (999, "Shopping", 25, "Shoes"),
    (150, "Food", 40, "Snacks"),
]


def run(*, workspace: Workspace, today: Optional[date] = None) -> int:
    """Add the demo entries, dated relative to today, unless entries exist."""
    store = open_store(workspace)
    if store.list():
        console.print("[yellow]Ledger already has entries; demo data not added.[/]")
        return 0

    today = today or date.today()
    skipped = []
    for amount, category, days_ago, note in DEMO_ENTRIES:
        if not store.palette.contains(category):
            skipped.append(category)
            continue
        store.add(amount, category, today - timedelta(days=days_ago), note)

    added = len(DEMO_ENTRIES) - len(skipped)
    console.print(f"[green]Added {added} demo entries.[/]")
    if skipped:
        console.print(f"[dim]Skipped categories missing from the palette: {', '.join(skipped)}[/dim]")
    return 0
