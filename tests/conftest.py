from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repo root (containing `smart_quotes/`) is importable when pytest
# picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def _no_file_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # Tests never write log files into the repo.
    monkeypatch.setenv("SMART_QUOTES_DISABLE_FILE_LOG", "1")
