"""
`Option[A]`: a value that is either present (`Some`) or absent (`Nothing`).

Examples
--------
>>> match(some(5), 0, lambda n: n * 2)
10
>>> match(none(), 0, lambda n: n * 2)
0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Callable
from typing import ClassVar
from typing import Final
from typing import Generic
from typing import Literal
from typing import NoReturn
from typing import TypeAlias
from typing import TypeVar
from typing import assert_never
from typing import final

from typing_extensions import TypeIs

from adtkit.errors import UnwrapError
from adtkit.matching import Matcher
from adtkit.matching import Variant

if TYPE_CHECKING:
    from adtkit.either import Either

A = TypeVar("A")
U = TypeVar("U")
L = TypeVar("L")
O = TypeVar("O")


@final
@dataclass(slots=True, frozen=True)
class Nothing(Variant):
    tag: ClassVar[Literal["none"]] = "none"

    def is_none(self) -> Literal[True]:
        return True

    def is_some(self) -> Literal[False]:
        return False

    @property
    def value_or_none(self) -> None:
        return None

    def map(self, f: Callable[[A], U]) -> Option[U]:
        return self

    def and_then(self, f: Callable[[A], Option[U]]) -> Option[U]:
        return self

    def filter(self, predicate: Callable[[A], object]) -> Option[A]:
        return self

    def with_default(self, default: U) -> U:
        return default

    def unwrap(self) -> NoReturn:
        raise UnwrapError("called unwrap() on Nothing")

    def to_either(self, error: L) -> Either[L, A]:
        from adtkit.either import Left

        return Left(error)

    def __repr__(self) -> str:
        return "Nothing"


@final
@dataclass(slots=True, frozen=True)
class Some(Variant, Generic[A]):
    tag: ClassVar[Literal["some"]] = "some"

    value: A

    def is_none(self) -> Literal[False]:
        return False

    def is_some(self) -> Literal[True]:
        return True

    @property
    def value_or_none(self) -> A:
        return self.value

    def map(self, f: Callable[[A], U]) -> Option[U]:
        return Some(f(self.value))

    def and_then(self, f: Callable[[A], Option[U]]) -> Option[U]:
        return f(self.value)

    def filter(self, predicate: Callable[[A], object]) -> Option[A]:
        return self if predicate(self.value) else NOTHING

    def with_default(self, default: object) -> A:
        return self.value

    def unwrap(self) -> A:
        return self.value

    def to_either(self, error: object) -> Either[L, A]:
        from adtkit.either import Right

        return Right(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


Option: TypeAlias = Nothing | Some[A]

VARIANTS: Final = (Nothing, Some)

NOTHING: Final = Nothing()
"""The only `Nothing` value `none()` returns."""


def none() -> Option[A]:
    return NOTHING


def some(value: A) -> Option[A]:
    """Wrap `value` as present. `value` is not inspected, `some(None)` is valid."""
    return Some(value)


def from_optional(value: A | None) -> Option[A]:
    """Treat `None` as absent and anything else as present."""
    return NOTHING if value is None else Some(value)


def match(fa: Option[A], when_none: O, when_some: Callable[[A], O]) -> O:
    """Return `when_some(value)` for `Some(value)`, otherwise `when_none`."""
    if isinstance(fa, Some):
        return when_some(fa.value)
    if isinstance(fa, Nothing):
        return when_none
    assert_never(fa)


def matcher(*, when_none: Callable[[], O], when_some: Callable[[A], O]) -> Matcher[O]:
    return Matcher(VARIANTS, {Nothing.tag: when_none, Some.tag: when_some})


def is_some(fa: Option[A]) -> TypeIs[Some[A]]:
    return isinstance(fa, Some)


def is_none(fa: Option[A]) -> TypeIs[Nothing]:
    return isinstance(fa, Nothing)
