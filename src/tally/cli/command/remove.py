"""Delete an expense."""

from __future__ import annotations

import typer

from tally.workspace import Workspace

from .util import AmbiguousIdError, console, open_store, print_error, resolve_entry_id, short_id


def run(*, workspace: Workspace, entry_id: str, assume_yes: bool = False) -> int:
    """Delete one entry after confirmation.

    Deleting an id that does not exist is not an error; it is reported and the
    ledger is left as it was.

    Returns:
        0 unless the id prefix is ambiguous
    """
    store = open_store(workspace)

    try:
        full_id = resolve_entry_id(store, entry_id)
    except AmbiguousIdError as e:
        print_error(f"{e}. Use more characters of the id.")
        return 1

    if not assume_yes and not typer.confirm("Delete this entry?", default=False):
        console.print("[yellow]Cancelled.[/]")
        return 0

    if store.remove(full_id):
        console.print(f"[green]Deleted[/] {short_id(full_id)}")
    else:
        console.print(f"[yellow]No entry[/] {entry_id}[yellow]; nothing deleted.[/]")
    return 0
