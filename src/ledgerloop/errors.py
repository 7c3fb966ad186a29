"""Custom errors for the ledgerloop package."""

from typing import Type


class LedgerLoopError(Exception):
    """Base class for errors raised by ledgerloop programs."""


class MissingAbilityError(LedgerLoopError):
    """Raised when an effect requests an ability that no handler supplies."""

    ability: Type[object]


class UnhandledAbilityError(LedgerLoopError):
    """Raised when a handler is unable to handle an ability."""

    pass


class ParseError(LedgerLoopError, ValueError):
    """Raised when an amount is not a finite decimal number."""

    def __init__(self, text: str):
        super().__init__(f"not a decimal amount: {text!r}")
        self.text = text


class InputStreamError(LedgerLoopError):
    """Raised when the input source is closed or fails while reading a line."""
