from __future__ import annotations

"""
Ledger JSON <-> LedgerState conversion (pure text, no disk I/O).

The snapshot is a single JSON object:

    {"entries": [{"id": ..., "amount": ..., "category": ..., "date": "YYYY-MM-DD",
                  "note": ...}, ...],
     "currency": "INR"}

Loading is deliberately forgiving so that older or hand-edited snapshots never
fail to open:
- a missing `note` becomes "", a missing `currency` becomes the default
- unknown keys are ignored
- records without an id get a fresh one
- records that no longer validate are kept with their raw values
- records that are not JSON objects are skipped

Privacy:
- Only counts are logged here, never amounts or notes.
"""

import json
import logging
from collections.abc import Iterable
from datetime import date

from pydantic import ValidationError as PydanticValidationError

from tally.config import DEFAULT_CURRENCY
from tally.model.entry import Entry, LedgerState, new_entry_id

logger = logging.getLogger(__name__)


class LedgerFormatError(ValueError):
    """The snapshot text is not a JSON object."""


def _json_value(v):
    if isinstance(v, date):
        return v.isoformat()
    return v


def entry_to_record(entry: Entry) -> dict:
    return {
        "id": entry.id,
        "amount": _json_value(entry.amount),
        "category": entry.category,
        "date": _json_value(entry.date),
        "note": entry.note or "",
    }


def _record_to_entry(record: dict) -> tuple[Entry, bool]:
    """Build an Entry from a persisted record. Returns (entry, was_valid)."""
    record = dict(record)
    if not str(record.get("id") or "").strip():
        record["id"] = new_entry_id()
    note = record.get("note")
    record["note"] = "" if note is None else str(note)
    try:
        entry = Entry.model_validate(
            {k: record.get(k) for k in ("id", "amount", "category", "date", "note")}
        )
        return entry, True
    except PydanticValidationError:
        return Entry.from_legacy(record), False


def dump_ledger_json(state: LedgerState) -> str:
    """Serialize a LedgerState into the snapshot JSON text."""
    payload = {
        "entries": [entry_to_record(e) for e in state.entries],
        "currency": state.currency,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def entries_from_records(records: Iterable[object]) -> list[Entry]:
    entries: list[Entry] = []
    skipped = 0
    legacy = 0
    for record in records:
        if not isinstance(record, dict):
            skipped += 1
            continue
        entry, valid = _record_to_entry(record)
        if not valid:
            legacy += 1
        entries.append(entry)
    if skipped:
        logger.warning("Skipped %d ledger record(s) that are not objects", skipped)
    if legacy:
        logger.warning("Loaded %d ledger record(s) with malformed fields as-is", legacy)
    return entries


def load_ledger_json(text: str, *, default_currency: str = DEFAULT_CURRENCY) -> LedgerState:
    """Parse snapshot JSON text into a LedgerState.

    Raises:
        LedgerFormatError: when the text is not valid JSON or not an object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LedgerFormatError(f"Ledger snapshot is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise LedgerFormatError("Ledger snapshot must be a JSON object")

    raw_entries = data.get("entries")
    if not isinstance(raw_entries, list):
        raw_entries = []
    currency = data.get("currency")
    if not isinstance(currency, str) or not currency.strip():
        currency = default_currency

    return LedgerState(entries=entries_from_records(raw_entries), currency=currency.strip())


__all__ = [
    "LedgerFormatError",
    "dump_ledger_json",
    "entries_from_records",
    "entry_to_record",
    "load_ledger_json",
]
