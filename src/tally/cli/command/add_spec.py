from __future__ import annotations

"""Tests for the add command."""

from datetime import date
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from tally.cli.command.add import run
from tally.storage.ledger_repository import JsonLedgerRepository


def _run_captured(**kwargs) -> tuple[int, str]:
    buf = StringIO()
    test_console = Console(file=buf, width=200)
    with (
        patch("tally.cli.command.add.console", test_console),
        patch("tally.cli.command.util.console", test_console),
    ):
        rc = run(**kwargs)
    return rc, buf.getvalue()


class DescribeAddCommand:
    def it_should_save_a_new_entry(self, workspace):
        rc, output = _run_captured(
            workspace=workspace, amount="200", category="Food", entry_date="2024-01-02", note="Lunch"
        )

        assert rc == 0
        assert "Added" in output
        assert "₹200.00" in output
        state = JsonLedgerRepository(workspace.ledger_path).load()
        assert state is not None
        assert len(state.entries) == 1
        assert state.entries[0].note == "Lunch"

    def it_should_default_the_date_to_today(self, workspace):
        rc, _ = _run_captured(workspace=workspace, amount="5", category="Other")
        assert rc == 0
        state = JsonLedgerRepository(workspace.ledger_path).load()
        assert state.entries[0].date == date.today()

    def it_should_reject_invalid_fields_without_saving(self, workspace):
        rc, output = _run_captured(workspace=workspace, amount="-3", category="Pets", entry_date="2024-01-02")

        assert rc == 1
        assert "amount, category" in output
        assert not workspace.ledger_path.exists()
