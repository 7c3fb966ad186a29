"""Contains the State abilities, the State store and ability helpers."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from ledgerloop.ability import Ability
from ledgerloop.effect import Depend
from ledgerloop.errors import UnhandledAbilityError
from ledgerloop.handler import Handler

S = TypeVar("S")


@dataclass(frozen=True)
class Get(Ability[S]):
    """Request the current state."""


@dataclass(frozen=True)
class Set(Ability[None], Generic[S]):
    """Replace the current state with `value`."""

    value: S


class State(Generic[S]):
    """
    A mutable store answering `Get` and `Set` requests.

    The store outlives the effects it handles, so the final state
    can be read from `value` once the effect has been run.
    """

    def __init__(self, initial: S):
        self.value = initial

    def on(self, ability: Ability[Any]) -> Any:
        """Answer `ability` if it is a state request."""
        match ability:
            case Get():
                return self.value
            case Set(value):
                self.value = value
                return None
            case _:
                raise UnhandledAbilityError()

    @property
    def handler(self) -> Handler[Get[S] | Set[S]]:
        """`Handler` that answers state requests from this store."""
        return Handler(answer=self.on)

    def __repr__(self) -> str:
        return f"State({self.value!r})"


def get() -> Depend[Get[Any], Any]:
    """
    Get the current state.

    Returns:
    -------
        An effect returning the current state.

    """
    value = yield from Get()
    return value


def modify(f: Callable[[S], S]) -> Depend[Get[S] | Set[S], S]:
    """
    Apply `f` to the current state and store the result.

    Args:
    ----
        f: Function from the old state to the new state.

    Returns:
    -------
        An effect returning the new state.

    """
    old: S = yield from get()
    new = f(old)
    yield from Set(new)
    return new
