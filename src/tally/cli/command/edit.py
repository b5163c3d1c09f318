"""Replace an existing expense."""

from __future__ import annotations

from datetime import date

from tally.model.entry import NotFoundError, ValidationError
from tally.workspace import Workspace

from .util import (
    AmbiguousIdError,
    console,
    open_store,
    print_error,
    resolve_entry_id,
    short_id,
)


def run(
    *,
    workspace: Workspace,
    entry_id: str,
    amount: str | None = None,
    category: str | None = None,
    entry_date: str | date | None = None,
    note: str | None = None,
) -> int:
    """Replace every field of an entry.

    Options left out keep the entry's current value, the way an edit form is
    pre-filled; the store still replaces the entry as a whole.

    Returns:
        0 on success, 1 for an unknown or ambiguous id or rejected fields
    """
    store = open_store(workspace)

    try:
        full_id = resolve_entry_id(store, entry_id)
        current = store.get(full_id)
        store.update(
            full_id,
            amount if amount is not None else current.amount,
            category if category is not None else current.category,
            entry_date if entry_date is not None else current.date,
            note if note is not None else current.note,
        )
    except (NotFoundError, AmbiguousIdError) as e:
        print_error(str(e))
        return 1
    except ValidationError as e:
        print_error(f"Please fill {', '.join(e.fields)} correctly.")
        return 1

    console.print(f"[green]Saved changes to[/] {short_id(full_id)}")
    return 0