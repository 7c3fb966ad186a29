"""Handlers answer the abilities effects request."""

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, ParamSpec, TypeVar, cast

from ledgerloop.ability import Ability
from ledgerloop.effect import Effect
from ledgerloop.errors import UnhandledAbilityError

A = TypeVar("A", covariant=True, bound=Ability[Any])
A2 = TypeVar("A2", bound=Ability[Any])
E = TypeVar("E", bound=Exception)
R = TypeVar("R")
P = ParamSpec("P")


@dataclass(frozen=True)
class Handler(Generic[A]):
    """
    Decorator answering abilities for a function that returns an effect.

    `answer` returns the value to send back for a request, or raises
    `UnhandledAbilityError` so the request goes on to the caller.
    """

    answer: Callable[[A], Any]

    def __or__(self, other: "Handler[A2]") -> "Handler[A | A2]":
        """Ask `self` first, then `other`."""

        def answer(ability: Any) -> Any:
            try:
                return self.answer(ability)
            except UnhandledAbilityError:
                return other.answer(ability)

        return Handler(answer)

    def __call__(
        self, f: Callable[P, Effect[A | A2, E, R]]
    ) -> Callable[P, Effect[A2, E, R]]:
        @wraps(f)
        def handled(*args: P.args, **kwargs: P.kwargs) -> Effect[A2, E, R]:
            effect = f(*args, **kwargs)
            try:
                request = next(effect)
                while True:
                    if not isinstance(request, Exception):
                        try:
                            answer = self.answer(request)  # type: ignore
                        except UnhandledAbilityError:
                            pass
                        else:
                            request = effect.send(answer)
                            continue
                    # errors and unanswered requests go to the caller,
                    # whatever comes back goes on to `effect`
                    try:
                        answer = yield request  # type: ignore
                    except Exception as error:
                        request = effect.throw(error)
                    else:
                        request = effect.send(answer)
            except StopIteration as stop:
                return cast(R, stop.value)

        return handled
