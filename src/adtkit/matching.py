"""
Sealed variant classes and exhaustively-checked matchers.

Python has no closed sum types, so each union in this package is a fixed set of
frozen dataclasses that subclass `Variant`. Every variant declares an explicit
discriminant, `tag`, and the set of variants is closed: subclassing a concrete
variant is rejected when the subclass is created.

There are two ways to consume a union value exhaustively:

1. The union module's `match()` function takes one mandatory parameter per
   variant, so leaving one out is a type error (and a `TypeError` when called).
2. A `Matcher` is a reusable dispatch table. It checks that every variant has
   a handler when it is constructed, before it is ever applied to a value.

Examples
--------
>>> from adtkit import remote_data
>>> describe = remote_data.matcher(
...     not_asked=lambda: "idle",
...     loading=lambda: "spinner",
...     failure=lambda e: f"error: {e}",
...     success=lambda d: f"{len(d)} rows",
... )
>>> describe(remote_data.success([1, 2, 3]))
'3 rows'
>>> try:
...     Matcher(remote_data.VARIANTS, {"loading": lambda: "spinner"})
... except NonExhaustiveMatchError as e:
...     print(e.missing)
('not_asked', 'failure', 'success')
"""

from __future__ import annotations

from dataclasses import fields
from dataclasses import is_dataclass
from typing import Any
from typing import Callable
from typing import ClassVar
from typing import Generic
from typing import Mapping
from typing import Sequence
from typing import TypeVar

from adtkit.errors import NonExhaustiveMatchError
from adtkit.errors import SealedVariantError
from adtkit.errors import UnknownVariantError

O = TypeVar("O")


class Variant:
    """
    Base class of a single case of a tagged union.

    Subclasses must be dataclasses: their fields are the variant's payload.
    """

    __slots__ = ()

    tag: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if base is not Variant and "tag" in vars(base):
                raise SealedVariantError(
                    f"cannot subclass {base.__qualname__}: "
                    f"union variants are sealed"
                )
        if not isinstance(vars(cls).get("tag"), str):
            raise TypeError(f"{cls.__qualname__} must declare a str tag")

    @property
    def payload(self) -> tuple[Any, ...]:
        """The variant's field values, in declaration order."""
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]


def variant_tags(variants: Sequence[type[Variant]]) -> tuple[str, ...]:
    for v in variants:
        if not is_dataclass(v):
            raise TypeError(f"variant {v.__qualname__} is not a dataclass")
    tags = tuple(v.tag for v in variants)
    if len(set(tags)) != len(tags):
        raise ValueError(f"variant tags are not unique: {tags!r}")
    return tags


class Matcher(Generic[O]):
    """
    A dispatch table with one handler per variant of a union.

    Handlers receive the variant's payload fields as positional arguments, so
    payload-free variants are handled by zero-argument callables.
    """

    __slots__ = ("_variants", "_handlers")

    _variants: tuple[type[Variant], ...]
    _handlers: Mapping[str, Callable[..., O]]

    def __init__(
        self,
        variants: Sequence[type[Variant]],
        handlers: Mapping[str, Callable[..., O]],
    ) -> None:
        tags = variant_tags(variants)
        missing = [t for t in tags if t not in handlers]
        if missing:
            raise NonExhaustiveMatchError(
                f"handlers missing for variants: {', '.join(missing)}", missing
            )
        unknown = [t for t in handlers if t not in tags]
        if unknown:
            raise UnknownVariantError(
                f"handlers given for unknown variants: {', '.join(unknown)}", unknown
            )
        self._variants = tuple(variants)
        self._handlers = dict(handlers)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(v.tag for v in self._variants)

    def __call__(self, value: Variant) -> O:
        if type(value) not in self._variants:
            raise TypeError(
                f"value is not a variant of this union "
                f"({', '.join(v.__name__ for v in self._variants)}): {value!r}"
            )
        return self._handlers[value.tag](*value.payload)

    def __repr__(self) -> str:
        return f"Matcher({', '.join(self.tags)})"
