"""
Storage layer for the Tally application.

The entry store owns the in-memory ledger; repositories persist full snapshots
of it.
"""

__all__ = ["entry_store", "ledger_repository"]
