"""
Workspace - centralized data path resolution for the Tally application.

A Workspace represents the root directory containing the ledger snapshot and
its configuration. All paths are computed relative to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. TALLY_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Workspace:
    """Root directory for all ledger data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            return cls(root=explicit)
        env = os.environ.get("TALLY_DATA")
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def ledger_path(self) -> Path:
        return self.data_dir / "ledger.json"

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def categories_config(self) -> Path:
        return self.config_dir / "categories.yml"


__all__ = ["Workspace"]
