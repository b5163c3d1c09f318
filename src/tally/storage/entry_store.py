"""
Entry store - the single owner of the in-memory ledger.

The store turns raw form values into validated entries, keeps the collection,
and flushes a full snapshot to its repository after every successful
mutation. Create and update are all-or-nothing: a rejected call leaves both the
collection and the persisted snapshot untouched.

The store does no locking. It expects a single caller performing one operation
at a time; embedding it in a multi-threaded host needs external
synchronization around the mutating methods.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from tally.config import DEFAULT_CURRENCY
from tally.model.category import CategoryPalette
from tally.model.entry import (
    Entry,
    LedgerState,
    NotFoundError,
    ValidationError,
    new_entry_id,
)
from tally.storage.ledger_repository import LedgerRepository

logger = logging.getLogger(__name__)


def _clean(value):
    if isinstance(value, str):
        return value.strip()
    return value


class EntryStore:
    """In-memory ledger with create/update/delete/list operations.

    Usage:
        store = EntryStore.open(JsonLedgerRepository(workspace.ledger_path))
        entry = store.add("200", "Food", "2024-01-02", "Lunch")
        store.update(entry.id, 50, "Travel", "2024-02-01", "Taxi")
        store.remove(entry.id)
    """

    def __init__(
        self,
        state: LedgerState | None = None,
        repository: LedgerRepository | None = None,
        palette: CategoryPalette | None = None,
    ):
        self._state = state if state is not None else LedgerState()
        self.repository = repository
        self.palette = palette or CategoryPalette.default()

    @classmethod
    def open(
        cls,
        repository: LedgerRepository,
        palette: CategoryPalette | None = None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> EntryStore:
        """Build a store from the repository's last snapshot, or an empty ledger."""
        state = repository.load()
        if state is None:
            state = LedgerState(entries=[], currency=default_currency)
        return cls(state=state, repository=repository, palette=palette)

    # ---------- Read ----------

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def currency(self) -> str:
        return self._state.currency

    def list(self) -> list[Entry]:
        """All entries, in no particular order. Sort before displaying."""
        return list(self._state.entries)

    def get(self, entry_id: str) -> Entry:
        for entry in self._state.entries:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(entry_id)

    # ---------- Mutations ----------

    def add(
        self,
        amount: object,
        category: object,
        date: object,
        note: object = "",
    ) -> Entry:
        """Validate raw values and append a new entry with a fresh id.

        Raises:
            ValidationError: naming every invalid field; nothing is stored
        """
        existing = {e.id for e in self._state.entries}
        entry_id = new_entry_id()
        while entry_id in existing:
            entry_id = new_entry_id()

        entry = self._build_entry(entry_id, amount, category, date, note)
        self._commit(self._state.entries + [entry])
        logger.info("Added entry %s", entry.id)
        return entry

    def update(
        self,
        entry_id: str,
        amount: object,
        category: object,
        date: object,
        note: object = "",
    ) -> None:
        """Replace every field of an existing entry, keeping its id.

        Raises:
            NotFoundError: when no entry has this id
            ValidationError: naming every invalid field; the old entry stays
        """
        index = self._index_of(entry_id)
        if index is None:
            raise NotFoundError(entry_id)

        replacement = self._build_entry(entry_id, amount, category, date, note)
        entries = list(self._state.entries)
        entries[index] = replacement
        self._commit(entries)
        logger.info("Updated entry %s", entry_id)

    def remove(self, entry_id: str) -> bool:
        """Delete an entry by id. Deleting an absent id is a no-op.

        Returns:
            True if an entry was removed
        """
        entries = [e for e in self._state.entries if e.id != entry_id]
        if len(entries) == len(self._state.entries):
            logger.debug("Remove ignored, no entry %s", entry_id)
            return False
        self._commit(entries)
        logger.info("Removed entry %s", entry_id)
        return True

    def set_currency(self, code: str) -> None:
        """Select the display currency label. No amounts are converted."""
        cleaned = (code or "").strip().upper() if isinstance(code, str) else ""
        if not cleaned:
            raise ValidationError(["currency"])
        self._commit(self._state.entries, currency=cleaned)

    # ---------- Internals ----------

    def _index_of(self, entry_id: str) -> int | None:
        for i, entry in enumerate(self._state.entries):
            if entry.id == entry_id:
                return i
        return None

    def _build_entry(
        self,
        entry_id: str,
        amount: object,
        category: object,
        date_value: object,
        note: object,
    ) -> Entry:
        invalid: list[str] = []

        amount = _clean(amount)
        if isinstance(amount, bool):
            invalid.append("amount")
        category = _clean(category)
        if not isinstance(category, str) or not self.palette.contains(category):
            invalid.append("category")
        date_value = _clean(date_value)
        note = _clean(note)

        raw = {
            "id": entry_id,
            "amount": amount,
            "category": category,
            "date": date_value,
            "note": "" if note is None else str(note),
        }
        entry: Entry | None = None
        try:
            entry = Entry.model_validate(raw)
        except PydanticValidationError as e:
            invalid.extend(str(err["loc"][0]) for err in e.errors() if err.get("loc"))

        if invalid or entry is None:
            logger.debug("Rejected entry fields: %s", ", ".join(sorted(set(invalid))))
            raise ValidationError(invalid)
        return entry

    def _commit(self, entries: list[Entry], currency: str | None = None) -> None:
        """Swap in the new collection and flush it; roll back if the flush fails."""
        previous = self._state
        self._state = LedgerState(
            entries=entries,
            currency=currency if currency is not None else previous.currency,
        )
        if self.repository is None:
            return
        try:
            self.repository.save(self._state)
        except Exception:
            self._state = previous
            raise


__all__ = ["EntryStore"]
