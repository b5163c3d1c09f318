from .category import CategoryPalette, CategoryStyle, DefaultCategory
from .entry import (
    Entry,
    LedgerState,
    NotFoundError,
    ValidationError,
    coerce_amount,
    coerce_date,
)
from .ledger_io import LedgerFormatError, dump_ledger_json, load_ledger_json

__all__ = [
    # models
    "CategoryPalette",
    "CategoryStyle",
    "DefaultCategory",
    "Entry",
    "LedgerState",
    # errors
    "LedgerFormatError",
    "NotFoundError",
    "ValidationError",
    # helpers
    "coerce_amount",
    "coerce_date",
    "dump_ledger_json",
    "load_ledger_json",
]
