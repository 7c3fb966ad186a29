"""Root CLI group for ledgerloop with global flags and the two programs."""

from __future__ import annotations

import click

from ledgerloop import __version__
from ledgerloop.bank import run_session
from ledgerloop.console import Console
from ledgerloop.errors import LedgerLoopError
from ledgerloop.greeter import run_greeter
from ledgerloop.log import configure_logging
from ledgerloop.settings import LedgerSettings


@click.group()
@click.version_option(version=__version__, prog_name="ledgerloop")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_json: bool) -> None:
    """ledgerloop: a greeter and a bank account REPL."""
    # unset flags fall through to LEDGERLOOP_* environment variables
    settings = LedgerSettings.from_cli(
        verbose=verbose or None,
        log_json=log_json or None,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    # only `bank` reads the settings; `greet` just needs the logging above
    ctx.obj = settings


@cli.command()
def greet() -> None:
    """Ask for your name and say hello."""
    try:
        run_greeter(Console())
    except LedgerLoopError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option(
    "--on-parse-error",
    type=click.Choice(["unrecognised", "fail"]),
    default=None,
    help="Report malformed amounts as unrecognised input, or end the session.",
)
@click.option("--prompt", default=None, help="Prompt shown before each command.")
@click.pass_obj
def bank(settings: LedgerSettings, on_parse_error: str | None, prompt: str | None) -> None:
    """Keep a running balance: add 12.34, remove 43.21, quit."""
    overrides = {"on_parse_error": on_parse_error, "prompt": prompt}
    settings = settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    try:
        run_session(Console(), settings)
    except LedgerLoopError as e:
        raise click.ClickException(str(e)) from e
