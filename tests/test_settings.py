"""Tests for LedgerSettings priority: CLI flags > environment > defaults."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledgerloop.settings import LedgerSettings


def test_defaults() -> None:
    settings = LedgerSettings()
    assert settings.prompt == "> "
    assert settings.on_parse_error == "unrecognised"
    assert settings.verbose is False
    assert settings.log_json is False


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGERLOOP_ON_PARSE_ERROR", "fail")
    monkeypatch.setenv("LEDGERLOOP_VERBOSE", "true")
    settings = LedgerSettings()
    assert settings.on_parse_error == "fail"
    assert settings.verbose is True


def test_from_cli_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGERLOOP_PROMPT", "$ ")
    assert LedgerSettings.from_cli(prompt="# ").prompt == "# "


def test_from_cli_skips_unset_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGERLOOP_LOG_JSON", "1")
    settings = LedgerSettings.from_cli(log_json=None, verbose=None)
    assert settings.log_json is True
    assert settings.verbose is False


def test_invalid_policy() -> None:
    with pytest.raises(ValidationError):
        LedgerSettings(on_parse_error="ignore")  # type: ignore[arg-type]


def test_frozen() -> None:
    settings = LedgerSettings()
    with pytest.raises(ValidationError):
        settings.prompt = "$ "  # type: ignore[misc]
