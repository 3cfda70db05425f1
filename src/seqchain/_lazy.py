from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, Concatenate, overload

import cytoolz as cz

from ._errors import check_given
from ._iter import CommonMethods, convert_data, merge_all, unwrap_data
from ._results import NONE, Option, Some
from ._types import SupportsRichComparison

if TYPE_CHECKING:
    from ._eager import Seq, Vec

type Collector[T] = (
    Callable[[Iterable[T]], list[T]] | Callable[[Iterable[T]], tuple[T, ...]]
)
"""Represent a function that collects an Iterable into a specific collection type."""


class Iter[T](CommonMethods[T], Iterator[T]):
    """A lazy, single-pass wrapper around Python's `Iterator` Protocol.

    Every operator returning an `Iter` is lazy: nothing is pulled from the source until the result is consumed, and a consumer that stops pulling stops the whole chain.

    Since the length of an `Iter` is unknown without consuming it, operators needing it (or several passes) materialize the remaining elements once.

    Once exhausted, an `Iter` cannot be reused or reset. Collect it into a `Seq` with `.collect()` to reuse the data.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    _inner: Iterator[T]

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Returns:
            Option[T]: The next element in the iterator. `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import seqchain as sc
        >>> it = sc.Iter((1, None))
        >>> it.next(), it.next(), it.next()
        (Some(value=1), Some(value=None), NONE)

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    @staticmethod
    def merge_sorted_all[U](
        *sources: Iterable[U],
        key: Callable[[U], SupportsRichComparison[Any]] | None = None,
    ) -> Iter[U]:
        """Merge any number of sorted sequences into one sorted sequence.

        Sources are merged pairwise, left to right, starting from an empty sequence. When two elements compare equal, the one from the later source is yielded first.

        Args:
            *sources (Iterable[U]): Sorted sequences. May be empty.
            key (Callable[[U], SupportsRichComparison[Any]] | None): Sort key of the inputs.

        Returns:
            Iter[U]: The merged sequence.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter.merge_sorted_all((1, 3), (2,), sc.Seq((0, 4))).collect()
        Seq(0, 1, 2, 3, 4)
        >>> sc.Iter.merge_sorted_all().collect()
        Seq()

        ```
        """
        check_given(**{f"sources[{idx}]": source for idx, source in enumerate(sources)})
        return Iter(merge_all(tuple(unwrap_data(source) for source in sources), key))

    @overload
    def collect(self, collector: Callable[[Iterable[T]], list[T]]) -> Vec[T]: ...
    @overload
    def collect(
        self, collector: Callable[[Iterable[T]], tuple[T, ...]] = ...
    ) -> Seq[T]: ...
    def collect(self, collector: Collector[T] = tuple) -> Seq[T] | Vec[T]:
        """Transforms an `Iter` into a collection.

        Args:
            collector (Collector[T]): `tuple` (the default) produces a `Seq[T]`, `list` a `Vec[T]`.

        Returns:
            Seq[T] | Vec[T]: A materialized collection containing the collected elements.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter(range(3)).collect()
        Seq(0, 1, 2)
        >>> sc.Iter(range(3)).collect(list)
        Vec(0, 1, 2)

        ```
        """
        from ._eager import Seq, Vec

        data = collector(self._inner)

        match data:
            case tuple():
                return Seq(data)
            case list():
                return Vec(data)

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the Iterator by applying a function to each element.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 2)).iter().for_each(lambda x: print(x + 1))
        2
        3

        ```
        """

        def _for_each(data: Iterable[T]) -> None:
            for v in data:
                func(v, *args, **kwargs)

        return self.into(_for_each)

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element of the iterable.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(partial(map, func))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements for which **func** is true."""
        return self._iter(partial(filter, func))

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the iterator ends sooner."""
        return self._iter(partial(cz.itertoolz.take, n))

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 3)).skip(1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(partial(cz.itertoolz.drop, n))

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Yield the elements, then those of each of **others**."""
        return self._iter(lambda data: itertools.chain(data, *map(unwrap_data, others)))
