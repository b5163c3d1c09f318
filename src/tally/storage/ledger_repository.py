"""
Ledger snapshot persistence.

The entry store hands a repository the full LedgerState after every mutation
and asks it for the last snapshot at startup. The snapshot is treated as an
opaque, round-trippable value.

Privacy: snapshots are local files only.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from tally.config import DEFAULT_CURRENCY
from tally.model.entry import LedgerState
from tally.model.ledger_io import LedgerFormatError, dump_ledger_json, load_ledger_json

logger = logging.getLogger(__name__)


class LedgerRepository(Protocol):
    """Persistence collaborator for the entry store."""

    def load(self) -> LedgerState | None:
        """Return the saved snapshot, or None when nothing has been saved."""
        ...

    def save(self, state: LedgerState) -> None:
        """Persist a full snapshot."""
        ...


class JsonLedgerRepository:
    """Stores the ledger snapshot as a JSON file.

    Usage:
        repo = JsonLedgerRepository(workspace.ledger_path)
        state = repo.load()
        repo.save(state)
    """

    def __init__(self, path: Path, default_currency: str = DEFAULT_CURRENCY):
        self.path = Path(path)
        self.default_currency = default_currency

    def load(self) -> LedgerState | None:
        if not self.path.exists():
            logger.debug("No ledger snapshot at %s", self.path)
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
            state = load_ledger_json(text, default_currency=self.default_currency)
        except (OSError, UnicodeDecodeError, LedgerFormatError) as e:
            logger.error("Invalid ledger snapshot %s, starting empty: %s", self.path, e)
            return None
        logger.debug("Loaded %d entries from %s", len(state.entries), self.path)
        return state

    def save(self, state: LedgerState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = dump_ledger_json(state)
        # Write next to the target and swap in, so a crash never leaves half a file
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d entries to %s", len(state.entries), self.path)


__all__ = ["JsonLedgerRepository", "LedgerRepository"]
