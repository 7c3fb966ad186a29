# ruff: noqa: D100, D103

import io

from ledgerloop.bank import run_session
from ledgerloop.console import StreamConsole
from ledgerloop.settings import LedgerSettings
from pytest_benchmark.fixture import BenchmarkFixture


def session_script(n_commands: int) -> str:
    lines = ["add 12.34" if i % 2 == 0 else "remove 0.01" for i in range(n_commands)]
    return "\n".join([*lines, "quit"]) + "\n"


def test_long_session(benchmark: BenchmarkFixture) -> None:
    """Benchmark a session of many balance updates."""
    script = session_script(1000)
    settings = LedgerSettings(prompt="")

    def go() -> None:
        run_session(StreamConsole(io.StringIO(script), io.StringIO()), settings)

    benchmark(go)
