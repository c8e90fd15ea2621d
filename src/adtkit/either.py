"""
`Either[L, R]`: one of two mutually exclusive outcomes.

By convention `Left` holds failure information and `Right` holds a successful
result. Nothing enforces the convention, so pick it consistently at the
boundary where values are created, e.g. when adapting a callback that reports
an error and a result in two optional slots, use `from_callback()`.

Examples
--------
>>> match(left("E404"), lambda e: "error:" + e, lambda d: "ok:" + d)
'error:E404'
>>> from_callback(None, 42)
Right(42)
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
from typing import ParamSpec
from typing import TypeAlias
from typing import TypeVar
from typing import assert_never
from typing import final

from typing_extensions import TypeIs

from adtkit.errors import UnwrapError
from adtkit.matching import Matcher
from adtkit.matching import Variant

if TYPE_CHECKING:
    from adtkit.option import Option

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")
O = TypeVar("O")
P = ParamSpec("P")
ExcT = TypeVar("ExcT", bound=BaseException)


@final
@dataclass(slots=True, frozen=True)
class Left(Variant, Generic[L]):
    tag: ClassVar[Literal["left"]] = "left"

    value: L

    def is_left(self) -> Literal[True]:
        return True

    def is_right(self) -> Literal[False]:
        return False

    @property
    def left_or_none(self) -> L:
        return self.value

    @property
    def right_or_none(self) -> None:
        return None

    def map(self, f: Callable[[R], U]) -> Either[L, U]:
        return self

    def map_left(self, f: Callable[[L], U]) -> Either[U, R]:
        return Left(f(self.value))

    def and_then(self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        return self

    def swap(self) -> Either[R, L]:
        return Right(self.value)

    def with_default(self, default: U) -> U:
        return default

    def unwrap(self) -> NoReturn:
        error = UnwrapError(f"called unwrap() on {self!r}")
        if isinstance(self.value, BaseException):
            raise error from self.value
        raise error

    def to_option(self) -> Option[R]:
        from adtkit.option import NOTHING

        return NOTHING

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@final
@dataclass(slots=True, frozen=True)
class Right(Variant, Generic[R]):
    tag: ClassVar[Literal["right"]] = "right"

    value: R

    def is_left(self) -> Literal[False]:
        return False

    def is_right(self) -> Literal[True]:
        return True

    @property
    def left_or_none(self) -> None:
        return None

    @property
    def right_or_none(self) -> R:
        return self.value

    def map(self, f: Callable[[R], U]) -> Either[L, U]:
        return Right(f(self.value))

    def map_left(self, f: Callable[[L], U]) -> Either[U, R]:
        return self

    def and_then(self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        return f(self.value)

    def swap(self) -> Either[R, L]:
        return Left(self.value)

    def with_default(self, default: object) -> R:
        return self.value

    def unwrap(self) -> R:
        return self.value

    def to_option(self) -> Option[R]:
        from adtkit.option import Some

        return Some(self.value)

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


Either: TypeAlias = Left[L] | Right[R]

VARIANTS: Final = (Left, Right)


def left(value: L) -> Either[L, R]:
    return Left(value)


def right(value: R) -> Either[L, R]:
    return Right(value)


def match(
    fa: Either[L, R], when_left: Callable[[L], O], when_right: Callable[[R], O]
) -> O:
    if isinstance(fa, Left):
        return when_left(fa.value)
    if isinstance(fa, Right):
        return when_right(fa.value)
    assert_never(fa)


def matcher(
    *, when_left: Callable[[L], O], when_right: Callable[[R], O]
) -> Matcher[O]:
    return Matcher(VARIANTS, {Left.tag: when_left, Right.tag: when_right})


def from_callback(error: L | None, result: R | None) -> Either[L, R | None]:
    """
    Convert the error-first callback convention into an `Either`.

    The error slot takes precedence: a non-None `error` gives `Left(error)` even
    if a result is also present. Otherwise the result is `Right`, including
    `Right(None)` for a callback that succeeded without producing a value.
    """
    if error is not None:
        return Left(error)
    return Right(result)


def attempt(
    fn: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Either[Exception, R]:
    """
    Call `fn`, returning its result as `Right`, or a raised `Exception` as `Left`.

    Exceptions that are not `Exception` subclasses (`KeyboardInterrupt`,
    `SystemExit`, ...) propagate. Use `attempt_catching()` to narrow the types
    that are captured.
    """
    return attempt_catching(Exception, fn, *args, **kwargs)


def attempt_catching(
    catch: type[ExcT] | tuple[type[ExcT], ...],
    fn: Callable[P, R],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Either[ExcT, R]:
    try:
        return Right(fn(*args, **kwargs))
    except catch as e:
        return Left(e)


def is_left(fa: Either[L, R]) -> TypeIs[Left[L]]:
    return isinstance(fa, Left)


def is_right(fa: Either[L, R]) -> TypeIs[Right[R]]:
    return isinstance(fa, Right)
