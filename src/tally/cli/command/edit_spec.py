from __future__ import annotations

"""Tests for the edit command."""

from datetime import date
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from tally.cli.command.edit import run
from tally.storage.entry_store import EntryStore
from tally.storage.ledger_repository import JsonLedgerRepository


def _run_captured(**kwargs) -> tuple[int, str]:
    buf = StringIO()
    test_console = Console(file=buf, width=200)
    with (
        patch("tally.cli.command.edit.console", test_console),
        patch("tally.cli.command.util.console", test_console),
    ):
        rc = run(**kwargs)
    return rc, buf.getvalue()


def _seed(workspace):
    store = EntryStore.open(JsonLedgerRepository(workspace.ledger_path))
    return store.add(100, "Food", "2024-01-01", "a")


class DescribeEditCommand:
    def it_should_replace_the_given_fields(self, workspace):
        entry = _seed(workspace)

        rc, output = _run_captured(
            workspace=workspace,
            entry_id=entry.id,
            amount="50",
            category="Travel",
            entry_date=date(2024, 2, 1),
            note="b",
        )

        assert rc == 0
        assert "Saved changes" in output
        (updated,) = JsonLedgerRepository(workspace.ledger_path).load().entries
        assert updated.id == entry.id
        assert (updated.amount, updated.category, updated.date, updated.note) == (
            50.0,
            "Travel",
            date(2024, 2, 1),
            "b",
        )

    def it_should_keep_values_for_omitted_options(self, workspace):
        entry = _seed(workspace)

        rc, _ = _run_captured(workspace=workspace, entry_id=entry.id[:8], note="changed")

        assert rc == 0
        (updated,) = JsonLedgerRepository(workspace.ledger_path).load().entries
        assert updated.amount == 100.0
        assert updated.category == "Food"
        assert updated.note == "changed"

    def it_should_report_unknown_ids(self, workspace):
        _seed(workspace)
        rc, output = _run_captured(workspace=workspace, entry_id="nope", amount="1")
        assert rc == 1
        assert "No entry" in output

    def it_should_reject_invalid_values(self, workspace):
        entry = _seed(workspace)
        rc, output = _run_captured(workspace=workspace, entry_id=entry.id, amount="zero")
        assert rc == 1
        assert "amount" in output
        (unchanged,) = JsonLedgerRepository(workspace.ledger_path).load().entries
        assert unchanged.amount == 100.0
