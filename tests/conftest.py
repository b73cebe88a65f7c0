"""Mini README: Shared fixtures keeping tests away from real ledgers and settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from expense_ledger.configuration import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test from a temporary directory with fresh settings."""

    monkeypatch.chdir(tmp_path)
    for variable in ("DATA_DIRECTORY", "LEDGER_FILENAME", "LOG_LEVEL"):
        monkeypatch.delenv(f"EXPENSE_LEDGER_{variable}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
