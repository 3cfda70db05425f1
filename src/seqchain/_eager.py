from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any, Self, overload

from ._inplace import partition_in_place, shift_in_place, swap
from ._iter import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._lazy import Iter

logger = logging.getLogger(__name__)


class Seq[T](CommonMethods[T], Sequence[T]):
    """`Seq` represent an in memory, immutable, countable Sequence.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    Operators needing the length or several passes run directly on the underlying tuple, without copying it.

    You can create a `Seq` from any `Iterable` or unpacked values using the `from_` class method. If you already have a tuple, simply pass it to the constructor, without runtime checks.

    Args:
            data (tuple[T, ...]): The data to initialize the Seq with.
    """

    _inner: tuple[T, ...]

    __slots__ = ("_inner",)

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data  # pyright: ignore[reportIncompatibleVariableOverride]

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if 'data' is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Examples:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> sc.Seq.from_("ab")
        Seq('a', 'b')

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))

    def iter(self) -> Iter[T]:
        """Get a lazy `Iter` over the elements, without copying them."""
        from ._lazy import Iter

        return Iter(self._inner)


class Vec[T](Seq[T], MutableSequence[T]):
    """A mutable sequence wrapper, carrying the in-place array transforms.

    Implement `MutableSequence` Protocol from `collections.abc` so it can be used as a standard mutable sequence.

    The in-place methods mutate the underlying list and return `None`. The lazy operators inherited from `Seq` never mutate it.

    Args:
        data (list[T]): The mutable sequence to wrap.
    """

    _inner: list[T]
    __slots__ = ("_inner",)

    def __init__(self, data: list[T]) -> None:
        self._inner = data  # type: ignore[override]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...
    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...
    def __setitem__(self, index: int | slice, value: T | Iterable[T]) -> None:
        return self._inner.__setitem__(index, value)  # type: ignore[arg-type]

    def __delitem__(self, index: int | slice) -> None:
        self._inner.__delitem__(index)

    def insert(self, index: int, value: T) -> None:
        """Inserts an element at position index, shifting all elements after it to the right."""
        self._inner.insert(index, value)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Vec[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Vec[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Vec[U]:
        """Create a `Vec` from an `Iterable` or unpacked values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Vec.from_(1, 2, 3)
        Vec(1, 2, 3)

        ```
        """
        converted = convert_data(data, *more_data)
        return Vec(converted if isinstance(converted, list) else list(converted))

    @classmethod
    def new(cls) -> Self:
        """Create an empty `Vec`.

        Make sure to specify the type when calling this method, e.g., `Vec[int].new()`.
        """
        return cls([])

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at **i** and **j**.

        ```python
        >>> import seqchain as sc
        >>> vec = sc.Vec([1, 2, 3])
        >>> vec.swap(0, 2)
        >>> vec
        Vec(3, 2, 1)

        ```
        """
        swap(self._inner, i, j)

    def shift_in_place(self, shifts: int = 1) -> None:
        """Rotate the elements in place, moving the element at `i` to `(i + shifts) % len`.

        Same result as `shift()`, without allocating a new sequence.

        Args:
            shifts (int): Number of positions to rotate by. Negative values rotate toward the front.

        Example:
        ```python
        >>> import seqchain as sc
        >>> vec = sc.Vec.from_("ABCDE")
        >>> vec.shift_in_place(1)
        >>> vec
        Vec('E', 'A', 'B', 'C', 'D')
        >>> vec.shift_in_place(-1)
        >>> vec
        Vec('A', 'B', 'C', 'D', 'E')

        ```
        """
        shift_in_place(self._inner, shifts)

    def partition_in_place(self, predicate: Callable[[T], bool]) -> None:
        """Move the elements failing **predicate** to the front and those passing it to the back, in place.

        Unlike `partition_by()`, the relative order inside each side is not kept.

        ```python
        >>> import seqchain as sc
        >>> vec = sc.Vec([1, 2, 3, 4])
        >>> vec.partition_in_place(lambda x: x < 3)
        >>> vec
        Vec(4, 3, 2, 1)

        ```
        """
        logger.debug("partition_in_place over %d elements", len(self._inner))
        partition_in_place(self._inner, predicate)
