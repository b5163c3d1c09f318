"""Show or change the display currency."""

from __future__ import annotations

from typing import Optional

from tally.config import CURRENCY_SYMBOLS
from tally.model.entry import ValidationError
from tally.workspace import Workspace

from .util import console, open_store, print_error


def run(*, workspace: Workspace, code: Optional[str] = None) -> int:
    """Print the current currency, or select a new one when `code` is given.

    Amounts are never converted; unknown codes are accepted and shown without
    a symbol.
    """
    store = open_store(workspace)

    if code is None:
        console.print(f"Currency: [bold]{store.currency}[/]")
        return 0

    try:
        store.set_currency(code)
    except ValidationError:
        print_error("Currency code must not be empty.")
        return 1

    if store.currency not in CURRENCY_SYMBOLS:
        console.print(
            f"[yellow]Note:[/] {store.currency} has no known symbol; amounts show as plain numbers."
        )
    console.print(f"[green]Currency set to[/] [bold]{store.currency}[/]")
    return 0
