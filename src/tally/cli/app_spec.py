from __future__ import annotations

"""Tests for the Typer wiring: options reach the commands and exit codes come back."""

from typer.testing import CliRunner

from tally.cli.app import app
from tally.storage.ledger_repository import JsonLedgerRepository

runner = CliRunner()


class DescribeTallyApp:
    def it_should_add_and_list_through_the_data_dir_option(self, tmp_path):
        result = runner.invoke(
            app,
            ["--data-dir", str(tmp_path), "add", "-a", "200", "-c", "Food", "-d", "2024-01-02", "-n", "Lunch"],
        )
        assert result.exit_code == 0

        state = JsonLedgerRepository(tmp_path / "data" / "ledger.json").load()
        assert [(e.amount, e.category, e.note) for e in state.entries] == [(200.0, "Food", "Lunch")]

        result = runner.invoke(app, ["--data-dir", str(tmp_path), "list"])
        assert result.exit_code == 0
        assert "Lunch" in result.output

    def it_should_resolve_the_workspace_from_the_environment(self, tmp_path):
        result = runner.invoke(app, ["currency", "EUR"], env={"TALLY_DATA": str(tmp_path)})
        assert result.exit_code == 0
        assert JsonLedgerRepository(tmp_path / "data" / "ledger.json").load().currency == "EUR"

    def it_should_exit_non_zero_for_rejected_input(self, tmp_path):
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "add", "-a", "abc", "-c", "Food"])
        assert result.exit_code == 1

    def it_should_reject_malformed_dates_before_running(self, tmp_path):
        result = runner.invoke(
            app, ["--data-dir", str(tmp_path), "add", "-a", "5", "-c", "Food", "-d", "02/01/2024"]
        )
        assert result.exit_code == 2
        assert not (tmp_path / "data" / "ledger.json").exists()

    def it_should_remove_with_yes(self, tmp_path):
        runner.invoke(app, ["--data-dir", str(tmp_path), "add", "-a", "5", "-c", "Food"])
        (entry,) = JsonLedgerRepository(tmp_path / "data" / "ledger.json").load().entries

        result = runner.invoke(app, ["--data-dir", str(tmp_path), "remove", entry.id[:8], "--yes"])

        assert result.exit_code == 0
        assert JsonLedgerRepository(tmp_path / "data" / "ledger.json").load().entries == []
