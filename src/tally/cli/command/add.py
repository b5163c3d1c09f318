"""Record a new expense."""

from __future__ import annotations

from datetime import date

from tally.model.entry import ValidationError
from tally.workspace import Workspace

from .util import console, fmt_money, open_store, print_error, short_id


def run(
    *,
    workspace: Workspace,
    amount: str,
    category: str,
    entry_date: str | date | None = None,
    note: str = "",
) -> int:
    """Validate and append one entry; the ledger is saved immediately.

    Returns:
        0 on success, 1 when any field is rejected (nothing is saved)
    """
    store = open_store(workspace)
    when = entry_date if entry_date is not None else date.today()

    try:
        entry = store.add(amount, category, when, note)
    except ValidationError as e:
        print_error(f"Please fill {', '.join(e.fields)} correctly.")
        return 1

    console.print(
        f"[green]Added[/] {short_id(entry.id)}: {entry.category} ",
        fmt_money(entry.amount, store.currency),
        f" on {entry.date.isoformat()}",
        sep="",
    )
    return 0
