"""Bank account operations expressed on top of the State abilities."""

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal

from ledgerloop.effect import Depend
from ledgerloop.state import Get, Set, get, modify

Balance = Decimal

# Arithmetic on balances is exact; the default context rounds to 28 digits.
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def add(amount: Decimal) -> Depend[Get[Balance] | Set[Balance], None]:
    """Add `amount` to the balance."""
    yield from modify(lambda balance: EXACT.add(balance, amount))


def remove(amount: Decimal) -> Depend[Get[Balance] | Set[Balance], None]:
    """Remove `amount` from the balance."""
    yield from modify(lambda balance: EXACT.subtract(balance, amount))


def balance() -> Depend[Get[Balance], Balance]:
    """Get the current balance."""
    value: Balance = yield from get()
    return value


def format_amount(amount: Decimal) -> str:
    """Format `amount` in plain notation without trailing fractional zeros.

    >>> format_amount(Decimal("15.50"))
    '15.5'
    >>> format_amount(Decimal("1E+2"))
    '100'
    """
    return format(amount.normalize(EXACT), "f")
