from __future__ import annotations

from rich.console import Console
from rich.text import Text

from tally.model.category_io import load_category_palette
from tally.model.entry import Entry
from tally.storage.entry_store import EntryStore
from tally.storage.ledger_repository import JsonLedgerRepository
from tally.services.formatting import format_amount
from tally.workspace import Workspace

console = Console()


def open_store(workspace: Workspace) -> EntryStore:
    """Entry store backed by the workspace's ledger snapshot and palette."""
    palette = load_category_palette(workspace.categories_config)
    return EntryStore.open(JsonLedgerRepository(workspace.ledger_path), palette=palette)


def fmt_money(amount: float, currency: str) -> Text:
    return Text(format_amount(amount, currency), style="bold")


def fmt_date(entry: Entry) -> str:
    d = entry.calendar_date
    if d is None:
        return str(entry.date or "")
    return d.isoformat()


def short_id(entry_id: str) -> str:
    return entry_id[:8]


def print_error(message: str) -> None:
    console.print(f"[red]Error:[/] {message}")


class AmbiguousIdError(LookupError):
    def __init__(self, prefix: str, matches: list[str]):
        self.prefix = prefix
        self.matches = matches
        super().__init__(f"Id prefix {prefix!r} matches {len(matches)} entries")


def resolve_entry_id(store: EntryStore, id_or_prefix: str, min_length: int = 8) -> str:
    """Full id for an exact id or a unique prefix of at least `min_length` characters.

    Unknown ids are returned unchanged so the store decides how to treat them.
    """
    raw = (id_or_prefix or "").strip()
    ids = [e.id for e in store.list()]
    if raw in ids:
        return raw
    wanted = raw.lower()
    if len(wanted) < min_length:
        return raw
    matches = [i for i in ids if i.lower().startswith(wanted)]
    if len(matches) > 1:
        raise AmbiguousIdError(wanted, matches)
    return matches[0] if matches else raw
