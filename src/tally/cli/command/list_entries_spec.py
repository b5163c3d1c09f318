from __future__ import annotations

"""Tests for the list command."""

from datetime import date
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from tally.cli.command.list_entries import run
from tally.storage.entry_store import EntryStore
from tally.storage.ledger_repository import JsonLedgerRepository


def _run_captured(**kwargs) -> tuple[int, str]:
    buf = StringIO()
    test_console = Console(file=buf, width=200)
    with patch("tally.cli.command.list_entries.console", test_console):
        rc = run(**kwargs)
    return rc, buf.getvalue()


class DescribeListCommand:
    def it_should_report_an_empty_ledger(self, workspace):
        rc, output = _run_captured(workspace=workspace)
        assert rc == 0
        assert "No expenses yet." in output

    class DescribeWithEntries:
        def _seed(self, workspace):
            store = EntryStore.open(JsonLedgerRepository(workspace.ledger_path))
            store.add(100, "Food", "2024-01-01", "Breakfast")
            store.add(50, "Travel", "2024-01-03", "Bus")
            store.add(25, "Food", "2024-01-05", "Coffee")

        def it_should_list_newest_first(self, workspace):
            self._seed(workspace)

            rc, output = _run_captured(workspace=workspace)

            assert rc == 0
            assert output.index("Coffee") < output.index("Bus") < output.index("Breakfast")
            assert "₹175.00" in output
            assert "Showing" not in output

        def it_should_filter_by_category(self, workspace):
            self._seed(workspace)

            rc, output = _run_captured(workspace=workspace, category="Food")

            assert rc == 0
            assert "Bus" not in output
            assert "Showing 2 of 3 entries" in output
            # totals still cover the whole ledger
            assert "Total: ₹175.00" in output

        def it_should_filter_by_date_range(self, workspace):
            self._seed(workspace)

            rc, output = _run_captured(
                workspace=workspace, date_from=date(2024, 1, 2), date_to=date(2024, 1, 4)
            )

            assert rc == 0
            assert "Bus" in output
            assert "Coffee" not in output
            assert "Breakfast" not in output

        def it_should_say_so_when_nothing_matches(self, workspace):
            self._seed(workspace)
            rc, output = _run_captured(workspace=workspace, category="Bills")
            assert rc == 0
            assert "No expenses yet." in output
