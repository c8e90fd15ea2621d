from __future__ import annotations

import re
from dataclasses import FrozenInstanceError
from dataclasses import dataclass
from typing import ClassVar

import pytest

from adtkit import either
from adtkit import option
from adtkit import remote_data
from adtkit.errors import NonExhaustiveMatchError
from adtkit.errors import SealedVariantError
from adtkit.errors import UnknownVariantError
from adtkit.matching import Matcher
from adtkit.matching import Variant
from adtkit.matching import variant_tags
from adtkit.option import Some
from adtkit.remote_data import Failure
from adtkit.remote_data import Success


@dataclass(slots=True, frozen=True)
class Circle(Variant):
    tag: ClassVar[str] = "circle"

    radius: float


@dataclass(slots=True, frozen=True)
class Rect(Variant):
    tag: ClassVar[str] = "rect"

    width: float
    height: float


SHAPES = (Circle, Rect)


def test_user_defined_union() -> None:
    area = Matcher[float](
        SHAPES,
        {"circle": lambda r: 3 * r * r, "rect": lambda w, h: w * h},
    )
    assert area(Circle(2)) == 12
    assert area(Rect(2, 5)) == 10
    assert area.tags == ("circle", "rect")
    assert repr(area) == "Matcher(circle, rect)"


def test_payload_preserves_identity() -> None:
    width, height = object(), object()
    assert Rect(width, height).payload == (width, height)  # type: ignore[arg-type]
    assert Rect(width, height).payload[0] is width  # type: ignore[arg-type]
    assert option.NOTHING.payload == ()


def test_variants_are_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        Circle(1).radius = 2  # type: ignore[misc]


def test_subclassing_a_variant_is_rejected() -> None:
    with pytest.raises(SealedVariantError, match=r"cannot subclass Some"):

        class Maybe(Some[int]):  # type: ignore[misc]
            pass

    with pytest.raises(SealedVariantError, match=r"cannot subclass Circle"):

        class Oval(Circle):  # type: ignore[misc]
            tag: ClassVar[str] = "oval"


def test_variant_requires_a_tag() -> None:
    with pytest.raises(TypeError, match=r"Untagged must declare a str tag"):

        class Untagged(Variant):
            pass


def test_variant_tags_must_be_unique() -> None:
    @dataclass(slots=True, frozen=True)
    class OtherCircle(Variant):
        tag: ClassVar[str] = "circle"

    with pytest.raises(ValueError, match=r"variant tags are not unique"):
        variant_tags((Circle, OtherCircle))


def test_matcher_rejects_missing_handlers_at_construction() -> None:
    with pytest.raises(
        NonExhaustiveMatchError,
        match=re.escape("handlers missing for variants: not_asked, failure, success"),
    ) as exc_info:
        Matcher(remote_data.VARIANTS, {"loading": lambda: "loading"})

    assert exc_info.value.missing == ("not_asked", "failure", "success")


def test_matcher_rejects_unknown_handlers() -> None:
    with pytest.raises(UnknownVariantError, match=r"unknown variants: maybe") as e:
        Matcher(
            option.VARIANTS,
            {"none": lambda: 0, "some": lambda a: a, "maybe": lambda: 1},
        )
    assert e.value.unknown == ("maybe",)


def test_matcher_rejects_values_of_other_unions() -> None:
    describe = option.matcher(when_none=lambda: "none", when_some=repr)
    with pytest.raises(TypeError, match=r"not a variant of this union"):
        describe(either.right(1))  # type: ignore[arg-type]


def test_matcher_handlers_receive_exact_payload() -> None:
    error, data = ValueError("boom"), [1, 2, 3]
    identity = remote_data.matcher(
        not_asked=lambda: None,
        loading=lambda: None,
        failure=lambda e: e,
        success=lambda d: d,
    )
    assert identity(Failure(error)) is error
    assert identity(Success(data)) is data
    assert identity(remote_data.loading()) is None


def test_matcher_is_reusable() -> None:
    double = option.matcher(when_none=lambda: 0, when_some=lambda n: n * 2)
    assert [double(o) for o in [option.some(1), option.none(), option.some(4)]] == [
        2,
        0,
        8,
    ]


def test_handler_errors_propagate() -> None:
    def fail(n: int) -> int:
        raise ZeroDivisionError(n)

    explode = option.matcher(when_none=lambda: 0, when_some=fail)
    with pytest.raises(ZeroDivisionError):
        explode(option.some(1))


def test_matcher_rejects_variants_that_are_not_dataclasses() -> None:
    class Plain(Variant):
        tag: ClassVar[str] = "plain"

    with pytest.raises(TypeError, match=r"variant .*Plain is not a dataclass"):
        Matcher((Circle, Plain), {"circle": lambda r: r, "plain": lambda: 0})
