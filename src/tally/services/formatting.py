"""Currency display formatting. The currency code is a label, nothing is converted."""

from __future__ import annotations

from tally.config import CURRENCY_SYMBOLS
from tally.model.entry import coerce_amount


def currency_symbol(currency_code: str | None) -> str:
    return CURRENCY_SYMBOLS.get((currency_code or "").strip().upper(), "")


def format_amount(amount: object, currency_code: str | None) -> str:
    """Two decimals, no grouping, prefixed with the currency symbol when known.

    Anything that is not a finite number formats as 0, and so does anything
    that rounds to zero, sign included.
    """
    value = round(coerce_amount(amount), 2) or 0.0
    return f"{currency_symbol(currency_code)}{value:.2f}"


__all__ = ["currency_symbol", "format_amount"]
