"""Shared pytest fixtures for ledgerloop tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from ledgerloop.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LEDGERLOOP_* variables from the developer's shell out of tests."""
    for name in LedgerSettings.model_fields:
        monkeypatch.delenv(f"LEDGERLOOP_{name.upper()}", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()
