"""Settings for ledgerloop programs.

Priority chain (highest to lowest):
  1. Init kwargs  -- CLI flags passed by click
  2. Env vars     -- ``LEDGERLOOP_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ParseErrorPolicy = Literal["unrecognised", "fail"]


class LedgerSettings(BaseSettings):
    """Settings for the ledger session and logging, frozen after construction.

    Attributes:
        prompt: Prompt shown before each line of input.
        on_parse_error: ``"unrecognised"`` reports a malformed amount as
            unrecognised input and keeps the session running, ``"fail"``
            ends the session with ``ParseError``.
        verbose: Enable DEBUG-level logging.
        log_json: Render logs as JSON lines.
    """

    model_config = SettingsConfigDict(env_prefix="LEDGERLOOP_", frozen=True)

    prompt: str = "> "
    on_parse_error: ParseErrorPolicy = "unrecognised"
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **overrides: Any) -> LedgerSettings:
        """Build settings from CLI flags, letting unset flags fall through to the environment."""
        return cls(**{key: value for key, value in overrides.items() if value is not None})
