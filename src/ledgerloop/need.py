"""Passing plain objects, such as a console or settings, into effects."""

from dataclasses import dataclass
from typing import Any, Type, TypeVar

from ledgerloop.ability import Ability
from ledgerloop.effect import Depend
from ledgerloop.errors import UnhandledAbilityError
from ledgerloop.handler import Handler

T = TypeVar("T", covariant=True)


@dataclass(frozen=True)
class Need(Ability[T]):
    """Request for an instance of `t`."""

    t: Type[T]


def need(t: Type[T]) -> Depend[Need[T], T]:
    """Return the instance of `t` supplied by an enclosing handler."""
    return (yield from Need(t))


def supply(*instances: Any) -> Handler[Need[Any]]:
    """
    Answer `Need` requests from `instances`.

    The first instance of the requested type wins, so subclasses can stand
    in for their base class (a `StreamConsole` for a `Console`).
    """

    def answer(ability: Any) -> Any:
        if isinstance(ability, Need):
            for instance in instances:
                if isinstance(instance, ability.t):
                    return instance
        raise UnhandledAbilityError()

    return Handler(answer)
