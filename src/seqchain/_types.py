from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple, Protocol


class SupportsRichComparison[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


type IndexedSelector[T, U] = Callable[[T, int], U]
"""Projection receiving an element and its position in the source."""


class Pair[T](NamedTuple):
    """Two elements selected together by a pair enumeration."""

    first: T
    second: T


class Count[T](NamedTuple):
    """A value with the length of the run it stands for."""

    value: T
    count: int
