"""Tests for the JSON file ledger repository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from tally.model.entry import Entry, LedgerState
from tally.storage.ledger_repository import JsonLedgerRepository


class DescribeJsonLedgerRepository:
    def it_should_report_no_saved_state_when_file_missing(self, tmp_path: Path):
        repo = JsonLedgerRepository(tmp_path / "data" / "ledger.json")
        assert repo.load() is None

    def it_should_save_and_load_a_snapshot(self, tmp_path: Path):
        path = tmp_path / "data" / "ledger.json"
        repo = JsonLedgerRepository(path)
        state = LedgerState(
            entries=[Entry(id="a", amount=200, category="Food", date="2024-01-02", note="Lunch")],
            currency="USD",
        )

        repo.save(state)

        assert path.exists()
        assert repo.load() == state

    def it_should_not_leave_temporary_files_behind(self, tmp_path: Path):
        path = tmp_path / "ledger.json"
        JsonLedgerRepository(path).save(LedgerState())
        assert [p.name for p in tmp_path.iterdir()] == ["ledger.json"]

    def it_should_overwrite_the_previous_snapshot(self, tmp_path: Path):
        path = tmp_path / "ledger.json"
        repo = JsonLedgerRepository(path)
        repo.save(LedgerState(currency="USD"))
        repo.save(LedgerState(currency="EUR"))
        assert json.loads(path.read_text(encoding="utf-8"))["currency"] == "EUR"

    def it_should_treat_corrupt_file_as_no_saved_state(self, tmp_path: Path, caplog):
        path = tmp_path / "ledger.json"
        path.write_text("{broken", encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="tally.storage.ledger_repository"):
            assert JsonLedgerRepository(path).load() is None

        assert "Invalid ledger snapshot" in caplog.text

    def it_should_apply_its_default_currency(self, tmp_path: Path):
        path = tmp_path / "ledger.json"
        path.write_text('{"entries": []}', encoding="utf-8")
        state = JsonLedgerRepository(path, default_currency="EUR").load()
        assert state is not None
        assert state.currency == "EUR"
