"""
`RemoteData[E, D]`: the state of a requested resource.

A single `RemoteData` value replaces the usual combination of a loading flag,
a nullable error and a nullable result, which can represent contradictory
states such as "loading, but data already present".

Values never change variant by themselves. Callers conventionally move through

    NotAsked -> Loading -> (Failure | Success)

and on retry

    (Failure | Success) -> Loading -> (Failure | Success)

but nothing here validates the sequence; `adtkit.fetch` has helpers that
produce it for awaitables.

Examples
--------
>>> match(
...     success([1, 2, 3]),
...     lambda: "na",
...     lambda: "loading",
...     lambda e: "err",
...     lambda d: len(d),
... )
3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Callable
from typing import ClassVar
from typing import Final
from typing import Generic
from typing import Literal
from typing import TypeAlias
from typing import TypeVar
from typing import assert_never
from typing import final

from typing_extensions import TypeIs

from adtkit.matching import Matcher
from adtkit.matching import Variant

if TYPE_CHECKING:
    from adtkit.either import Either
    from adtkit.option import Option

E = TypeVar("E")
D = TypeVar("D")
U = TypeVar("U")
O = TypeVar("O")


@final
@dataclass(slots=True, frozen=True)
class NotAsked(Variant):
    tag: ClassVar[Literal["not_asked"]] = "not_asked"

    def is_not_asked(self) -> Literal[True]:
        return True

    def is_loading(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[False]:
        return False

    def is_success(self) -> Literal[False]:
        return False

    def map(self, f: Callable[[D], U]) -> RemoteData[E, U]:
        return self

    def map_error(self, f: Callable[[E], U]) -> RemoteData[U, D]:
        return self

    def and_then(self, f: Callable[[D], RemoteData[E, U]]) -> RemoteData[E, U]:
        return self

    def with_default(self, default: U) -> U:
        return default

    def to_option(self) -> Option[D]:
        from adtkit.option import NOTHING

        return NOTHING

    def __repr__(self) -> str:
        return "NotAsked"


@final
@dataclass(slots=True, frozen=True)
class Loading(Variant):
    tag: ClassVar[Literal["loading"]] = "loading"

    def is_not_asked(self) -> Literal[False]:
        return False

    def is_loading(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def is_success(self) -> Literal[False]:
        return False

    def map(self, f: Callable[[D], U]) -> RemoteData[E, U]:
        return self

    def map_error(self, f: Callable[[E], U]) -> RemoteData[U, D]:
        return self

    def and_then(self, f: Callable[[D], RemoteData[E, U]]) -> RemoteData[E, U]:
        return self

    def with_default(self, default: U) -> U:
        return default

    def to_option(self) -> Option[D]:
        from adtkit.option import NOTHING

        return NOTHING

    def __repr__(self) -> str:
        return "Loading"


@final
@dataclass(slots=True, frozen=True)
class Failure(Variant, Generic[E]):
    tag: ClassVar[Literal["failure"]] = "failure"

    error: E

    def is_not_asked(self) -> Literal[False]:
        return False

    def is_loading(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def is_success(self) -> Literal[False]:
        return False

    def map(self, f: Callable[[D], U]) -> RemoteData[E, U]:
        return self

    def map_error(self, f: Callable[[E], U]) -> RemoteData[U, D]:
        return Failure(f(self.error))

    def and_then(self, f: Callable[[D], RemoteData[E, U]]) -> RemoteData[E, U]:
        return self

    def with_default(self, default: U) -> U:
        return default

    def to_option(self) -> Option[D]:
        from adtkit.option import NOTHING

        return NOTHING

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


@final
@dataclass(slots=True, frozen=True)
class Success(Variant, Generic[D]):
    tag: ClassVar[Literal["success"]] = "success"

    data: D

    def is_not_asked(self) -> Literal[False]:
        return False

    def is_loading(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[False]:
        return False

    def is_success(self) -> Literal[True]:
        return True

    def map(self, f: Callable[[D], U]) -> RemoteData[E, U]:
        return Success(f(self.data))

    def map_error(self, f: Callable[[E], U]) -> RemoteData[U, D]:
        return self

    def and_then(self, f: Callable[[D], RemoteData[E, U]]) -> RemoteData[E, U]:
        return f(self.data)

    def with_default(self, default: object) -> D:
        return self.data

    def to_option(self) -> Option[D]:
        from adtkit.option import Some

        return Some(self.data)

    def __repr__(self) -> str:
        return f"Success({self.data!r})"


RemoteData: TypeAlias = NotAsked | Loading | Failure[E] | Success[D]

VARIANTS: Final = (NotAsked, Loading, Failure, Success)

NOT_ASKED: Final = NotAsked()
LOADING: Final = Loading()


def not_asked() -> RemoteData[E, D]:
    return NOT_ASKED


def loading() -> RemoteData[E, D]:
    return LOADING


def failure(error: E) -> RemoteData[E, D]:
    return Failure(error)


def success(data: D) -> RemoteData[E, D]:
    return Success(data)


def from_either(either: Either[E, D]) -> RemoteData[E, D]:
    """A finished request: `Left` becomes `Failure`, `Right` becomes `Success`."""
    from adtkit.either import Left
    from adtkit.either import Right

    if isinstance(either, Left):
        return Failure(either.value)
    if isinstance(either, Right):
        return Success(either.value)
    assert_never(either)


def match(
    rd: RemoteData[E, D],
    not_asked: Callable[[], O],
    loading: Callable[[], O],
    failure: Callable[[E], O],
    success: Callable[[D], O],
) -> O:
    """Call the handler of `rd`'s variant, passing its payload if it has one."""
    if isinstance(rd, NotAsked):
        return not_asked()
    if isinstance(rd, Loading):
        return loading()
    if isinstance(rd, Failure):
        return failure(rd.error)
    if isinstance(rd, Success):
        return success(rd.data)
    assert_never(rd)


def matcher(
    *,
    not_asked: Callable[[], O],
    loading: Callable[[], O],
    failure: Callable[[E], O],
    success: Callable[[D], O],
) -> Matcher[O]:
    return Matcher(
        VARIANTS,
        {
            NotAsked.tag: not_asked,
            Loading.tag: loading,
            Failure.tag: failure,
            Success.tag: success,
        },
    )


def is_not_asked(rd: RemoteData[E, D]) -> TypeIs[NotAsked]:
    return isinstance(rd, NotAsked)


def is_loading(rd: RemoteData[E, D]) -> TypeIs[Loading]:
    return isinstance(rd, Loading)


def is_failure(rd: RemoteData[E, D]) -> TypeIs[Failure[E]]:
    return isinstance(rd, Failure)


def is_success(rd: RemoteData[E, D]) -> TypeIs[Success[D]]:
    return isinstance(rd, Success)
