"""Effects are generators that yield abilities or errors and return a result."""

from __future__ import annotations

from collections.abc import Generator
from functools import wraps
from typing import Any, Callable, Type, TypeVar, cast

from typing_extensions import Never, ParamSpec, TypeAlias

from ledgerloop.ability import Ability
from ledgerloop.errors import MissingAbilityError

R = TypeVar("R")
# bound so type checkers can tell abilities from errors in Effect types
A = TypeVar("A", bound=Ability[Any])
E = TypeVar("E", bound=Exception)
P = ParamSpec("P")

Effect: TypeAlias = Generator[A | E, Any, R]
Depend: TypeAlias = Generator[A, Any, R]


def run(effect: Effect[Never, Exception, R]) -> R:
    """
    Drive `effect` to completion and return its result.

    Every ability must already be answered by a handler. A yielded error is
    thrown back in where it was yielded, so it can be caught there or escape
    as an ordinary exception.

    Raises:
    ------
        MissingAbilityError: If `effect` requests an ability no handler answered.

    """
    try:
        request = next(effect)
        while True:
            if isinstance(request, Exception):
                request = effect.throw(request)
            else:
                request = effect.throw(MissingAbilityError(request))
    except StopIteration as stop:
        return cast(R, stop.value)


def throw(error: E) -> Generator[E, Any, Never]:  # type: ignore
    """Yield `error` from the current effect."""
    yield error


def catch(
    *errors: Type[E],
) -> Callable[[Callable[P, Effect[A, Exception, R]]], Callable[P, Depend[A, R | E]]]:
    """
    Decorate a function returning an effect so the given errors become its result.

    Other errors pass through to the caller, and anything the caller throws
    back is thrown on into the effect.

    Args:
    ----
        errors: The error types to return instead of yield.

    """

    def decorator(
        f: Callable[P, Effect[A, Exception, R]],
    ) -> Callable[P, Depend[A, R | E]]:
        @wraps(f)
        def caught(*args: P.args, **kwargs: P.kwargs) -> Depend[A, R | E]:
            effect = f(*args, **kwargs)
            try:
                request = next(effect)
                while not isinstance(request, errors):
                    try:
                        answer = yield request  # type: ignore
                    except Exception as error:
                        request = effect.throw(error)
                    else:
                        request = effect.send(answer)
            except StopIteration as stop:
                return cast(R, stop.value)
            return request

        return caught

    return decorator


def throws(
    *errors: Type[E],
) -> Callable[[Callable[P, Any]], Callable[P, Effect[Any, E, Any]]]:
    """
    Decorate a function so that raising one of `errors` yields it instead.

    The function may return an effect, which is run in place, or a plain value.

    Args:
    ----
        errors: The error types to yield.

    """

    def decorator(f: Callable[P, Any]) -> Callable[P, Effect[Any, E, Any]]:
        @wraps(f)
        def thrown(*args: P.args, **kwargs: P.kwargs) -> Effect[Any, E, Any]:
            try:
                result = f(*args, **kwargs)
                if isinstance(result, Generator):
                    result = yield from result
                return result
            except errors as error:
                return (yield from throw(error))

        return thrown

    return decorator
