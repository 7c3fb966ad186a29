"""The interactive ledger: a bank account REPL."""

from dataclasses import dataclass
from decimal import Decimal

import structlog

from ledgerloop import account
from ledgerloop.account import Balance, format_amount
from ledgerloop.command import Add, Command, Quit, Remove, Unrecognized, parse_command
from ledgerloop.console import Console, print_line, read_line
from ledgerloop.effect import Depend, Effect, catch, run, throw
from ledgerloop.errors import InputStreamError, LedgerLoopError, ParseError
from ledgerloop.need import Need, need, supply
from ledgerloop.settings import LedgerSettings
from ledgerloop.state import Get, Set, State

logger = structlog.get_logger(__name__)

WELCOME = """Welcome to the bank
To add to your balance say "add 12.34"
To remove from your balance say "remove 43.21"
And to quit say "quit\""""

Abilities = Need[Console] | Need[LedgerSettings] | Get[Balance] | Set[Balance]


@dataclass(frozen=True)
class Session:
    """Outcome of a ledger session that ended with `quit`."""

    balance: Balance
    commands: int


def handle_command(
    command: Command,
) -> Depend[Need[Console] | Get[Balance] | Set[Balance], bool]:
    """
    Apply one command to the account and report the result.

    Returns:
    -------
        An effect returning whether the session should stop.

    """
    match command:
        case Quit():
            return True
        case Add(amount):
            yield from account.add(amount)
            verb = "added"
        case Remove(amount):
            yield from account.remove(amount)
            verb = "removed"
        case Unrecognized(text):
            logger.debug("command.unrecognised", line=text)
            yield from print_line(f"unrecognised input: {text}")
            return False
    new_balance = yield from account.balance()
    logger.debug("command.handled", command=verb, balance=str(new_balance))
    yield from print_line(
        f"{format_amount(amount)} has been {verb}, "
        f"your new balance is {format_amount(new_balance)}"
    )
    return False


def step() -> Effect[Abilities, InputStreamError | ParseError, bool]:
    """Read, parse and handle one line of input."""
    settings = yield from need(LedgerSettings)
    line = yield from read_line(settings.prompt)
    command = yield from catch(ParseError)(parse_command)(line)
    if isinstance(command, ParseError):
        logger.info("parse.failed", line=line, text=command.text)
        if settings.on_parse_error == "fail":
            return (yield from throw(command))
        command = Unrecognized(line)
    return (yield from handle_command(command))


def ledger() -> Effect[Abilities, InputStreamError | ParseError, int]:
    """
    Print the welcome banner and handle commands until `quit`.

    Returns:
    -------
        An effect returning the number of commands handled before `quit`.

    """
    yield from print_line(WELCOME)
    handled = 0
    while not (yield from step()):
        handled += 1
    return handled


def run_session(console: Console, settings: LedgerSettings) -> Session:
    """
    Run a ledger session starting from a zero balance.

    Raises:
    ------
        InputStreamError: If the input closes before `quit`.
        ParseError: If an amount is malformed and `settings.on_parse_error` is ``"fail"``.

    """
    state = State(Decimal(0))
    program = (state.handler | supply(console, settings))(ledger)
    logger.debug("session.started", on_parse_error=settings.on_parse_error)
    try:
        handled = run(program())
    except LedgerLoopError as e:
        logger.warning("session.failed", error=str(e), balance=str(state.value))
        raise
    session = Session(balance=state.value, commands=handled)
    logger.debug("session.stopped", balance=str(session.balance), commands=session.commands)
    return session
