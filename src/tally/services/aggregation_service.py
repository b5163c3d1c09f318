"""
Aggregation service - totals, category breakdown and the monthly trend.

Every function is a pure reduction over entries and never raises on malformed
stored data: amounts that are not finite numbers count as 0, and entries whose
date cannot be parsed are left out of anything that depends on the date.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from tally.config import TREND_WINDOW_MONTHS
from tally.model.entry import Entry


@dataclass(frozen=True)
class CategorySlice:
    """Summed amount of one category that has at least one entry."""

    category: str
    amount: float


@dataclass(frozen=True)
class TimeBucket:
    """Summed amount of one calendar month in the trend window."""

    label: str  # short month name, e.g. "Jan"
    key: str  # "YYYY-MM"
    amount: float


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """(year, month) moved by `delta` months, negative for the past."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def total(entries: Iterable[Entry]) -> float:
    return sum((e.amount_value for e in entries), 0.0)


def period_total(entries: Iterable[Entry], reference_date: date) -> float:
    """Sum of entries in the same calendar month as `reference_date`."""
    result = 0.0
    for e in entries:
        d = e.calendar_date
        if d is not None and d.year == reference_date.year and d.month == reference_date.month:
            result += e.amount_value
    return result


def by_category(entries: Iterable[Entry]) -> list[CategorySlice]:
    """Per-category sums, in order of each category's first appearance."""
    sums: dict[str, float] = {}
    for e in entries:
        sums[e.category] = sums.get(e.category, 0.0) + e.amount_value
    return [CategorySlice(category=k, amount=v) for k, v in sums.items()]


def by_trailing_month(
    entries: Iterable[Entry],
    reference_date: date,
    window_size: int = TREND_WINDOW_MONTHS,
) -> list[TimeBucket]:
    """Monthly sums for the `window_size` months ending with the reference month.

    Always returns `window_size` buckets, oldest first, including empty months.
    Entries outside the window are ignored.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be at least 1, got {window_size}")

    months = [
        shift_month(reference_date.year, reference_date.month, -offset)
        for offset in range(window_size - 1, -1, -1)
    ]
    sums = {month_key(y, m): 0.0 for y, m in months}

    for e in entries:
        d = e.calendar_date
        if d is None:
            continue
        key = month_key(d.year, d.month)
        if key in sums:
            sums[key] += e.amount_value

    return [
        TimeBucket(label=calendar.month_abbr[m], key=month_key(y, m), amount=sums[month_key(y, m)])
        for y, m in months
    ]


__all__ = [
    "CategorySlice",
    "TimeBucket",
    "by_category",
    "by_trailing_month",
    "month_key",
    "period_total",
    "shift_month",
    "total",
]
