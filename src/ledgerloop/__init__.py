"""Console programs built on generator effects: a greeter and a bank ledger."""

# ruff: noqa: F401

from importlib.metadata import PackageNotFoundError, version

from ledgerloop.ability import Ability
from ledgerloop.effect import Depend, Effect, catch, run, throw, throws
from ledgerloop.handler import Handler
from ledgerloop.need import Need, need, supply
from ledgerloop.state import State

try:
    __version__ = version("ledgerloop")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
