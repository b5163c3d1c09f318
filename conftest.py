# Ensure the package under src/ is importable during tests without installing the package.
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from tally.workspace import Workspace  # noqa: E402


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Empty workspace rooted in a per-test temporary directory."""
    return Workspace(root=tmp_path)
