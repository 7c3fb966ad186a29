"""Asks for a name and greets it."""

import structlog

from ledgerloop.console import Console, print_line, read_line
from ledgerloop.effect import Effect, run
from ledgerloop.errors import InputStreamError
from ledgerloop.need import Need, supply

logger = structlog.get_logger(__name__)


def greet() -> Effect[Need[Console], InputStreamError, str]:
    """Ask for a name and greet it verbatim.

    Returns:
    -------
        An effect returning the name that was read.

    """
    yield from print_line("hello, what is your name?")
    name = yield from read_line()
    yield from print_line(f"hello {name}")
    return name


def run_greeter(console: Console) -> str:
    """Run `greet` against `console`.

    Args:
    ----
        console: Where the prompt is printed and the name is read.

    Returns:
    -------
        The name that was read.

    Raises:
    ------
        InputStreamError: If the input closes before a line is read.

    """
    name = run(supply(console)(greet)())
    logger.debug("greeter.greeted", name=name)
    return name
