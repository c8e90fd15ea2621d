from __future__ import annotations

from typing import Any
from typing import TypeVar

from hypothesis import strategies as st

from adtkit import either
from adtkit import option
from adtkit import remote_data
from adtkit.either import Either
from adtkit.option import Option
from adtkit.remote_data import RemoteData

T = TypeVar("T")
E = TypeVar("E")

payloads: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.integers(),
    st.text(),
    st.lists(st.integers()),
    st.builds(object),
)
"""Payloads of assorted types, including `None` and values without `__eq__`."""


def options(values: st.SearchStrategy[T]) -> st.SearchStrategy[Option[T]]:
    return st.one_of(st.just(option.none()), values.map(option.some))


def eithers(
    lefts: st.SearchStrategy[E], rights: st.SearchStrategy[T]
) -> st.SearchStrategy[Either[E, T]]:
    return st.one_of(lefts.map(either.left), rights.map(either.right))


def remote_datas(
    errors: st.SearchStrategy[E], data: st.SearchStrategy[T]
) -> st.SearchStrategy[RemoteData[E, T]]:
    return st.one_of(
        st.just(remote_data.not_asked()),
        st.just(remote_data.loading()),
        errors.map(remote_data.failure),
        data.map(remote_data.success),
    )


def describe_option(fa: Option[object]) -> str:
    return option.match(fa, "none", lambda a: f"some:{a!r}")


def describe_remote_data(rd: RemoteData[object, object]) -> str:
    return remote_data.match(
        rd,
        lambda: "not_asked",
        lambda: "loading",
        lambda e: f"failure:{e!r}",
        lambda d: f"success:{d!r}",
    )
