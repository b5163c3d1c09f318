"""
Filter service - narrowing and ordering the entry list for display.

Pure functions over entry sequences. No I/O, no UI imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import TypeVar

from tally.model.entry import Entry

TEntries = TypeVar("TEntries", bound=Sequence[Entry])


@dataclass(frozen=True)
class FilterSpec:
    """Optional category equality plus an optional inclusive date range.

    `date_to` includes the whole of that day. Empty or missing parts do not
    constrain anything.
    """

    category: str | None = None
    date_from: date | None = None
    date_to: date | None = None

    @property
    def has_date_bounds(self) -> bool:
        return self.date_from is not None or self.date_to is not None

    def matches(self, entry: Entry) -> bool:
        if self.category and entry.category != self.category:
            return False
        if not self.has_date_bounds:
            return True

        entry_date = entry.calendar_date
        if entry_date is None:
            return False
        if self.date_from is not None and entry_date < self.date_from:
            return False
        # Entries carry no time of day, so "through end of day" is a date comparison
        if self.date_to is not None and entry_date > self.date_to:
            return False
        return True


def apply_filter(entries: TEntries, spec: FilterSpec | None) -> TEntries | list[Entry]:
    """Return the entries matching `spec`, keeping their order.

    With no spec at all the input is handed back unchanged, same object.
    """
    if spec is None:
        return entries
    return [e for e in entries if spec.matches(e)]


def sort_for_display(entries: Sequence[Entry]) -> list[Entry]:
    """Newest first. Same-day entries keep their relative order; undated ones go last."""
    dated = [e for e in entries if e.calendar_date is not None]
    undated = [e for e in entries if e.calendar_date is None]
    dated.sort(key=lambda e: e.calendar_date, reverse=True)
    return dated + undated


__all__ = ["FilterSpec", "apply_filter", "sort_for_display"]
