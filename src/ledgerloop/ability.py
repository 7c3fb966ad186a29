"""The request type effects yield to their handlers."""

from typing import Generator, Generic, TypeVar

from typing_extensions import Self

from ledgerloop.errors import MissingAbilityError

T = TypeVar("T", covariant=True)


class Ability(Generic[T]):
    """Something an effect asks for. Its handler sends back a `T`."""

    def __iter__(self: Self) -> Generator[Self, T, T]:
        try:
            answer = yield self
        except MissingAbilityError:
            # name this request, not whatever the runner saw
            raise MissingAbilityError(self) from None
        return answer
