"""Tally: a local-only personal expense ledger with derived analytics."""

__version__ = "0.1.0"
