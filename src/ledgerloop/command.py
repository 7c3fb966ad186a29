"""Parsing of ledger input lines into commands."""

from dataclasses import dataclass
from decimal import Decimal

from ledgerloop.effect import throws
from ledgerloop.errors import ParseError


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Add:
    amount: Decimal


@dataclass(frozen=True)
class Remove:
    amount: Decimal


@dataclass(frozen=True)
class Unrecognized:
    text: str


Command = Quit | Add | Remove | Unrecognized

# Amounts must lie within 10**-MAX_EXPONENT .. 10**MAX_EXPONENT so that
# exact balance arithmetic stays small.
MAX_EXPONENT = 1000


def parse_amount(text: str) -> Decimal:
    """
    Parse a finite decimal amount such as ``12.34``, ``-3`` or ``1e2``.

    Raises:
    ------
        ParseError: If `text` is not a finite decimal number, or has a digit
            beyond `MAX_EXPONENT` places either side of the decimal point.

    """
    if "_" in text:
        raise ParseError(text)
    try:
        amount = Decimal(text)
    except ArithmeticError:
        raise ParseError(text) from None
    if not amount.is_finite():
        raise ParseError(text)
    exponent = amount.as_tuple().exponent
    if exponent < -MAX_EXPONENT or amount.adjusted() > MAX_EXPONENT:
        raise ParseError(text)
    return amount


@throws(ParseError)
def parse_command(line: str) -> Command:
    """
    Parse one line of input.

    Only the first two whitespace separated tokens are significant.
    `add` and `remove` without an amount are unrecognized, while an amount
    that isn't a decimal yields `ParseError`.
    """
    match line.split():
        case ["quit", *_]:
            return Quit()
        case ["add", amount, *_]:
            return Add(parse_amount(amount))
        case ["remove", amount, *_]:
            return Remove(parse_amount(amount))
        case _:
            return Unrecognized(line)
