from __future__ import annotations

"""
Canonical data models for the expense ledger.

Scope
- Pure Pydantic v2 model for a single ledger entry, the ledger state that owns
  the entry collection, and the two domain errors raised by the entry store.
- No I/O (handled by ledger_io.py and tally.storage).

Legacy tolerance
- Entries created through the store are always validated. Entries loaded from
  an older or hand-edited snapshot may hold raw, unvalidated values; readers use
  `Entry.amount_value` and `Entry.calendar_date`, which never raise.
"""

import math
import re
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tally.config import DEFAULT_CURRENCY

# Form values: plain decimal text and calendar dates written as YYYY-MM-DD
DECIMAL_TEXT = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
ISO_DATE_TEXT = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ValidationError(ValueError):
    """Raised when entry fields are malformed on create or update.

    `fields` lists every offending field so the caller can name them all in a
    single rejection message.
    """

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = sorted(set(fields))
        super().__init__(message or f"Invalid or missing field(s): {', '.join(self.fields)}")


class NotFoundError(LookupError):
    """Raised when an entry id does not exist in the ledger."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"No entry with id {entry_id!r}")


def new_entry_id() -> str:
    """Fresh opaque entry identity."""
    return uuid.uuid4().hex


def coerce_amount(value: object) -> float:
    """Numeric value of a raw amount; anything non-numeric or non-finite is 0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_date(value: object) -> date | None:
    """Calendar date of a raw value, or None when it cannot be parsed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


class Entry(BaseModel):
    """One dated, categorized expense.

    The id is assigned by the store and never changes; an edit replaces every
    other field at once.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False)
    category: str = Field(min_length=1)
    date: date
    note: str = ""

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_decimal_text(cls, value):
        """Numbers pass through; text must be a plain decimal like "12" or "12.50"."""
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        if isinstance(value, str):
            text = value.strip()
            if not DECIMAL_TEXT.match(text):
                raise ValueError(f"amount must be a decimal number, got {value!r}")
            return text
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_as_calendar_day(cls, value):
        """Accept date/datetime objects and YYYY-MM-DD text only.

        Numbers are refused outright; pydantic would otherwise read them as Unix
        timestamps.
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            text = value.strip()
            if ISO_DATE_TEXT.match(text):
                return date.fromisoformat(text)
        raise ValueError(f"date must be a calendar date (YYYY-MM-DD), got {value!r}")

    @property
    def amount_value(self) -> float:
        return coerce_amount(self.amount)

    @property
    def calendar_date(self) -> date | None:
        return coerce_date(self.date)

    @classmethod
    def from_legacy(cls, record: dict) -> Entry:
        """Keep a persisted record that no longer validates, values untouched."""
        return cls.model_construct(
            id=str(record["id"]),
            amount=record.get("amount"),
            category=str(record.get("category") or ""),
            date=record.get("date"),
            note=str(record.get("note") or ""),
        )


@dataclass
class LedgerState:
    """The entry collection plus the selected display currency.

    Entry order carries no meaning; display order is always derived by sorting.
    """

    entries: list[Entry] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY


__all__ = [
    "Entry",
    "LedgerState",
    "NotFoundError",
    "ValidationError",
    "coerce_amount",
    "coerce_date",
    "new_entry_id",
]
