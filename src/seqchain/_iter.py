from __future__ import annotations

import functools
import itertools
import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Concatenate, Never

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase, get_config
from ._cursor import Cursor, Segment, known_length
from ._equality import Equality, equality_of
from ._errors import (
    InvalidArgumentError,
    OutOfRangeError,
    UnsupportedOperationError,
    check_given,
    check_non_negative,
)
from ._results import NONE, Option, Some
from ._types import Count, IndexedSelector, Pair, SupportsRichComparison

if TYPE_CHECKING:
    from ._eager import Seq
    from ._group import Group
    from ._lazy import Iter

logger = logging.getLogger(__name__)


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


def unwrap_data[T](data: Iterable[T]) -> Iterable[T]:
    """Underlying data of a wrapper, or **data** itself."""
    return data._inner if isinstance(data, CommonMethods) else data


def as_store[T](data: Iterable[T], operation: str) -> Sequence[T]:
    """Return **data** if it is an indexable store, otherwise materialize it once into a tuple."""
    if isinstance(data, Sequence):
        return data
    logger.debug("%s: materializing input into a tuple", operation)
    return tuple(data)


def _out_of_range(index: int) -> OutOfRangeError:
    return OutOfRangeError(f"index {index} is past the end of the sequence")


def _check_in_range(data: Iterable[Any], index: int) -> None:
    match known_length(data):
        case Some(value=length) if index >= length:
            raise _out_of_range(index)
        case _:
            pass


def merge_two[T](
    left: Iterable[T],
    right: Iterable[T],
    key: Callable[[T], SupportsRichComparison[Any]],
) -> Iterator[T]:
    """Merge two sorted iterables. On equal keys, the element of **right** comes first."""
    lhs, rhs = Cursor(left), Cursor(right)
    has_left, has_right = lhs.advance(), rhs.advance()
    while has_left and has_right:
        if key(lhs.current) < key(rhs.current):
            yield lhs.current
            has_left = lhs.advance()
        else:
            yield rhs.current
            has_right = rhs.advance()
    if has_left:
        yield from lhs.from_current()
    if has_right:
        yield from rhs.from_current()


def merge_all[T](
    sources: Iterable[Iterable[T]],
    key: Callable[[T], SupportsRichComparison[Any]] | None = None,
) -> Iterator[T]:
    """Left fold of `merge_two` over **sources**, starting from an empty iterable."""
    by = key if key is not None else cz.functoolz.identity
    return functools.reduce(
        lambda acc, source: merge_two(acc, source, by), sources, iter(())
    )


class CommonMethods[T](CommonBase[Iterable[T]]):
    """Operators shared by `Iter`, `Seq` and `Vec`.

    Operators needing several passes or the length use the wrapped data directly when it is a countable store (`Seq`, `Vec`), and materialize it once when it is a single-pass iterator (`Iter`).
    """

    __slots__ = ()

    _inner: Iterable[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def eq(self, other: Iterable[T]) -> bool:
        """Check if two Iterables hold equal elements, in the same order.

        Note:
            This will consume any `Iter` instances involved in the comparison (**self** and/or **other**).

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 3)).eq(sc.Seq((1, 2, 3)))
        True
        >>> sc.Seq((1, 2, 3)).eq([1, 2])
        False

        ```
        """
        return tuple(self._inner) == tuple(unwrap_data(other))

    def length(self) -> int:
        """Return the length of the Iterable.

        Like the builtin len but works on lazy sequences.

        ```python
        >>> import seqchain as sc
        >>> sc.Iter(range(4)).length()
        4

        ```
        """
        return self.into(cz.itertoolz.count)

    def first(self) -> T:
        """Return the first element."""
        return self.into(cz.itertoolz.first)

    def appended(self, value: T) -> Iter[T]:
        """Yield the elements, then **value**."""
        return self._iter(lambda data: itertools.chain(data, (value,)))

    def prepended(self, value: T) -> Iter[T]:
        """Yield **value**, then the elements.

        ```python
        >>> import seqchain as sc
        >>> sc.Seq((2, 3)).prepended(1).appended(4).collect()
        Seq(1, 2, 3, 4)

        ```
        """
        return self._iter(lambda data: itertools.chain((value,), data))

    # combinatorics ---------------------------------------------------------

    def permutations(self) -> Iter[tuple[T, ...]]:
        """Yield every ordering of the elements.

        Each position is fixed in turn as the head, followed by every ordering of the remaining elements.

        Elements are told apart by position, not by value: repeated values produce repeated permutations, so there are always n! of them.

        An empty input has no permutation at all.

        Returns:
            Iter[tuple[T, ...]]: n! permutations.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_("abc").permutations().map("".join).collect()
        Seq('abc', 'acb', 'bac', 'bca', 'cab', 'cba')
        >>> sc.Seq.from_("aab").permutations().map("".join).collect()
        Seq('aab', 'aba', 'aab', 'aba', 'baa', 'baa')
        >>> sc.Seq(()).permutations().collect()
        Seq()

        ```
        """

        def _permutations(data: Iterable[T]) -> Iterator[tuple[T, ...]]:
            pool = tuple(data)
            if not pool:
                return
            yield from itertools.permutations(pool)

        return self._iter(_permutations)

    def distinct_permutations(self) -> Never:
        """Not supported: duplicate-aware permutations are out of scope, use `permutations()`.

        Raises:
            UnsupportedOperationError: Always.
        """
        raise UnsupportedOperationError("distinct permutations are not supported")

    def choose(self, k: int) -> Iter[tuple[T, ...]]:
        """Yield the selections of **k** elements.

        Only selections of zero or one element are supported. Use `unique_pairs()` for pairs.

        Args:
            k (int): Size of each selection.

        Returns:
            Iter[tuple[T, ...]]: Empty for k == 0, one 1-tuple per element for k == 1.

        Raises:
            InvalidArgumentError: If **k** is negative.
            UnsupportedOperationError: If **k** is greater than 1.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 2)).choose(1).collect()
        Seq((1,), (2,))
        >>> sc.Seq((1, 2)).choose(0).collect()
        Seq()

        ```
        """
        check_non_negative("k", k)
        match k:
            case 0:
                return self._iter(lambda _: iter(()))
            case 1:
                return self._iter(lambda data: ((item,) for item in data))
            case _:
                msg = f"choosing {k} elements is not supported, only 0 or 1"
                raise UnsupportedOperationError(msg)

    def unique_pairs(self) -> Iter[Pair[T]]:
        """Yield every pair of elements at positions i < j exactly once, ordered by index.

        Returns:
            Iter[Pair[T]]: n * (n - 1) / 2 pairs.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_("abc").unique_pairs().map(tuple).collect()
        Seq(('a', 'b'), ('a', 'c'), ('b', 'c'))

        ```
        """
        return self.select_unique_pairs(lambda value, _: value)

    def select_unique_pairs[U](self, selector: IndexedSelector[T, U]) -> Iter[Pair[U]]:
        """Same as `unique_pairs()`, projecting each element with **selector**.

        Args:
            selector (IndexedSelector[T, U]): Receives each element and its index.

        Returns:
            Iter[Pair[U]]: The projected pairs.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_("abc").select_unique_pairs(lambda _, idx: idx).map(tuple).collect()
        Seq((0, 1), (0, 2), (1, 2))

        ```
        """
        check_given(selector=selector)

        def _pairs(data: Iterable[T]) -> Iterator[Pair[U]]:
            for (i, a), (j, b) in itertools.combinations(enumerate(data), 2):
                yield Pair(selector(a, i), selector(b, j))

        return self._iter(_pairs)

    def target_pairs(self, target: T, group: Group[T]) -> Iter[Pair[T]]:
        """Yield the pairs of elements combining to **target** under **group**.

        See `select_target_pairs()`.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((5, 3, -1, 2, 0)).target_pairs(2, sc.INT32_ADDITION).map(tuple).collect()
        Seq((3, -1), (2, 0))

        ```
        """
        return self.select_target_pairs(target, group, lambda value, _: value)

    def select_target_pairs[U](
        self, target: T, group: Group[T], selector: IndexedSelector[T, U]
    ) -> Iter[Pair[U]]:
        """Generalized two-sum: pairs of positions whose elements combine to **target**.

        For each distinct value `e`, its complement is `group.operate(target, group.invert(e))`.

        - When the complement is `e` itself, every pair of positions holding `e` is yielded, which requires at least two occurrences.
        - Otherwise every position of `e` is paired with every position of the complement.

        Each value takes part in at most one of these groups, so a pair is never reported twice. No order is guaranteed between the yielded pairs.

        Elements must be hashable.

        Args:
            target (T): The value each pair must combine to.
            group (Group[T]): The algebraic structure defining the combination.
            selector (IndexedSelector[T, U]): Receives each element and its index.

        Returns:
            Iter[Pair[U]]: The matching pairs, projected by **selector**.

        Raises:
            InvalidArgumentError: If **group** or **selector** is missing.
            NoInverseError: When consumption reaches an element without inverse in **group**.

        Example:
        ```python
        >>> import seqchain as sc
        >>> data = sc.Seq((-1, 5, 3, -1, 2, 0))
        >>> data.select_target_pairs(2, sc.INT32_ADDITION, lambda _, idx: idx).map(tuple).collect()
        Seq((0, 2), (3, 2), (4, 5))
        >>> data.target_pairs(-2, sc.INT32_ADDITION).map(tuple).collect()
        Seq((-1, -1),)
        >>> data.target_pairs(6, sc.INT32_ADDITION).collect()
        Seq()

        ```
        """
        check_given(group=group, selector=selector)

        def _target_pairs(data: Iterable[T]) -> Iterator[Pair[U]]:
            store = as_store(data, "select_target_pairs")
            positions: dict[T, list[int]] = cz.itertoolz.groupby(
                store.__getitem__, range(len(store))
            )
            consumed: set[T] = set()
            for value, indices in positions.items():
                if value in consumed:
                    continue
                other = group.complement(target, value)
                if equality_of(value)(value, other):
                    consumed.add(value)
                    for i, j in itertools.combinations(indices, 2):
                        yield Pair(selector(value, i), selector(value, j))
                elif other in positions and other not in consumed:
                    consumed.update((value, other))
                    for i, j in itertools.product(indices, positions[other]):
                        yield Pair(selector(value, i), selector(other, j))

        return self._iter(_target_pairs)

    # ordering --------------------------------------------------------------

    def merge_sorted(
        self,
        *others: Iterable[T],
        key: Callable[[T], SupportsRichComparison[Any]] | None = None,
    ) -> Iter[T]:
        """Merge this sorted sequence with other sorted sequences into one sorted sequence.

        Sources are merged pairwise, left to right. When two elements compare equal, the one from the right-hand source is yielded first.

        Elements are pulled one at a time, and only as the result is consumed.

        Args:
            *others (Iterable[T]): Other sorted sequences.
            key (Callable[[T], SupportsRichComparison[Any]] | None): Sort key of the inputs. Defaults to the elements themselves.

        Returns:
            Iter[T]: The merged sequence.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 4, 7)).merge_sorted((2, 5), [0, 3, 9]).collect()
        Seq(0, 1, 2, 3, 4, 5, 7, 9)
        >>> sc.Seq(("a1", "b1")).merge_sorted(("a2",), key=lambda s: s[0]).collect()
        Seq('a2', 'a1', 'b1')

        ```
        """
        check_given(**{f"others[{idx}]": other for idx, other in enumerate(others)})
        sources = (unwrap_data(other) for other in others)
        return self._iter(lambda data: merge_all((data, *sources), key))

    def increasing_runs[U: SupportsRichComparison[Any]](
        self, key: Callable[[T], U] | None = None
    ) -> Iter[Seq[T]]:
        """Yield the maximal strictly increasing contiguous runs of at least two elements.

        Args:
            key (Callable[[T], U] | None): Comparison key. Defaults to the elements themselves.

        Returns:
            Iter[Seq[T]]: The runs, in order of appearance.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 0, 1, 5, 5, 3, 3, 6, -3, 1, 0)).increasing_runs().collect()
        Seq(Seq(0, 1, 5), Seq(3, 6), Seq(-3, 1))

        ```
        """
        from ._eager import Seq

        by = key if key is not None else cz.functoolz.identity

        def _runs(data: Iterable[T]) -> Iterator[Seq[T]]:
            cursor = Cursor(data)
            if not cursor.advance():
                return
            run = [cursor.current]
            for item in cursor.rest():
                if by(run[-1]) < by(item):
                    run.append(item)
                    continue
                if len(run) > 1:
                    yield Seq(tuple(run))
                run = [item]
            if len(run) > 1:
                yield Seq(tuple(run))

        return self._iter(_runs)

    # splitting -------------------------------------------------------------

    def chunk_by(self, size: int) -> Iter[Iter[T]]:
        """Split into consecutive chunks of **size** elements. The last chunk may be shorter.

        Elements are pulled one at a time. If a chunk is skipped before being read, its remaining elements are buffered when the next chunk is requested, so at most one chunk is held in memory.

        Args:
            size (int): Number of elements per chunk.

        Returns:
            Iter[Iter[T]]: The chunks.

        Raises:
            InvalidArgumentError: If **size** is lower than 1.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Iter(range(8)).chunk_by(3).map(lambda c: c.collect()).collect()
        Seq(Seq(0, 1, 2), Seq(3, 4, 5), Seq(6, 7))
        >>> chunks = sc.Iter.from_count().chunk_by(2)
        >>> first, second = chunks.next().unwrap(), chunks.next().unwrap()
        >>> second.collect(), first.collect()
        (Seq(2, 3), Seq(0, 1))

        ```
        """
        if size < 1:
            msg = f"`size` must be at least 1, got {size}"
            raise InvalidArgumentError(msg)
        from ._lazy import Iter

        def _chunks(data: Iterable[T]) -> Iterator[Iter[T]]:
            cursor = Cursor(data)
            while cursor.advance():
                chunk = Segment(cursor, limit=size)
                yield Iter(chunk)
                chunk.drain()

        return self._iter(_chunks)

    def split_by(
        self, predicate: Callable[[T], bool], *, remove_empty: bool = True
    ) -> Iter[Iter[T]]:
        """Split on every element matching **predicate**. Delimiters are not included in the runs.

        With `remove_empty=False`, each delimiter closes the current run even when it is empty (leading or back-to-back delimiters). A trailing delimiter does not open an empty final run.

        Args:
            predicate (Callable[[T], bool]): Tells delimiters apart.
            remove_empty (bool): Whether to skip empty runs. Defaults to True.

        Returns:
            Iter[Iter[T]]: The runs between delimiters.

        Example:
        ```python
        >>> import seqchain as sc
        >>> data = sc.Seq((4, 3, 1, 2, 1, 5, 3, 6, 2, 1, 9))
        >>> data.split_by(lambda x: x % 2 == 0).map(lambda r: r.collect()).collect()
        Seq(Seq(3, 1), Seq(1, 5, 3), Seq(1, 9))
        >>> data.split_by(lambda x: x % 2 == 0, remove_empty=False).map(lambda r: r.collect()).collect()
        Seq(Seq(), Seq(3, 1), Seq(1, 5, 3), Seq(), Seq(1, 9))

        ```
        """
        check_given(predicate=predicate)
        from ._lazy import Iter

        def _split(data: Iterable[T]) -> Iterator[Iter[T]]:
            cursor = Cursor(data)
            while cursor.advance():
                if predicate(cursor.current):
                    if not remove_empty:
                        yield Iter(())
                    continue
                run = Segment(cursor, stop=predicate)
                yield Iter(run)
                run.drain()

        return self._iter(_split)

    def split_on(
        self,
        value: T,
        *,
        remove_empty: bool = True,
        eq: Equality[T] | None = None,
    ) -> Iter[Iter[T]]:
        """Split on every element equal to **value**. See `split_by()`.

        Args:
            value (T): The delimiter.
            remove_empty (bool): Whether to skip empty runs. Defaults to True.
            eq (Equality[T] | None): Equality to use. Resolved from the type of **value** by default.

        Returns:
            Iter[Iter[T]]: The runs between delimiters.

        Example:
        ```python
        >>> import seqchain as sc
        >>> data = sc.Seq.from_("ABXAXXCAX")
        >>> data.split_on("X").map(lambda r: "".join(r)).collect()
        Seq('AB', 'A', 'CA')
        >>> data.split_on("X", remove_empty=False).map(lambda r: "".join(r)).collect()
        Seq('AB', 'A', '', 'CA')

        ```
        """
        same = eq if eq is not None else equality_of(value)
        return self.split_by(lambda item: same(item, value), remove_empty=remove_empty)

    def partition_by(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Yield the elements failing **predicate**, then those passing it, each group in original order.

        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 2, 3, 4, 5)).partition_by(lambda x: x % 2 == 0).collect()
        Seq(1, 3, 5, 2, 4)

        ```
        """
        check_given(predicate=predicate)

        def _partition(data: Iterable[T]) -> Iterator[T]:
            failing, passing = mit.partition(predicate, data)
            yield from failing
            yield from passing

        return self._iter(_partition)

    # rearranging -----------------------------------------------------------

    def shift(self, shifts: int = 1) -> Iter[T]:
        """Rotate the elements so that the last **shifts** ones come first.

        Negative values rotate toward the back. **shifts** is taken modulo the length.

        Args:
            shifts (int): Number of positions to rotate by. Defaults to 1.

        Returns:
            Iter[T]: The rotated sequence.

        Example:
        ```python
        >>> import seqchain as sc
        >>> data = sc.Seq.from_("ABCD")
        >>> data.shift(1).collect()
        Seq('D', 'A', 'B', 'C')
        >>> data.shift(2).collect()
        Seq('C', 'D', 'A', 'B')
        >>> data.shift(-1).collect()
        Seq('B', 'C', 'D', 'A')

        ```
        """

        def _shift(data: Iterable[T]) -> Iterator[T]:
            store = as_store(data, "shift")
            length = len(store)
            if length == 0:
                return
            pivot = length - shifts % length
            yield from itertools.islice(store, pivot, None)
            yield from itertools.islice(store, 0, pivot)

        return self._iter(_shift)

    def trim(self, *items: T) -> Iter[T]:
        """Drop the leading and trailing runs of elements equal to any of **items**.

        Inner occurrences are kept. Without **items**, the elements are yielded unchanged.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((0, 0, 1, 0, 2, None, 0)).trim(0, None).collect()
        Seq(1, 0, 2)

        ```
        """

        def _trim(data: Iterable[T]) -> Iterator[T]:
            if not items:
                yield from data
                return
            pending: list[T] = []
            for item in itertools.dropwhile(lambda x: x in items, data):
                if item in items:
                    pending.append(item)
                    continue
                yield from pending
                pending.clear()
                yield item

        return self._iter(_trim)

    def skip_at(self, index: int) -> Iter[T]:
        """Yield every element but the one at **index**.

        Args:
            index (int): Position of the element to leave out.

        Returns:
            Iter[T]: The remaining elements.

        Raises:
            InvalidArgumentError: If **index** is negative.
            OutOfRangeError: If **index** is past the end. Raised right away for countable data, and when consumption reaches the end otherwise.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 2, 3)).skip_at(1).collect()
        Seq(1, 3)
        >>> sc.Seq((1, 2, 3)).skip_at(3)
        Traceback (most recent call last):
            ...
        seqchain._errors.OutOfRangeError: index 3 is past the end of the sequence

        ```
        """
        check_non_negative("index", index)
        _check_in_range(self._inner, index)

        def _skip_at(data: Iterable[T]) -> Iterator[T]:
            cursor = Cursor(data)
            for _ in range(index):
                if not cursor.advance():
                    raise _out_of_range(index)
                yield cursor.current
            if not cursor.advance():
                raise _out_of_range(index)
            yield from cursor.rest()

        return self._iter(_skip_at)

    def replace_at(self, replacement: T, index: int) -> Iter[T]:
        """Yield the elements with the one at **index** replaced by **replacement**.

        Raises the same errors as `skip_at()`.

        ```python
        >>> import seqchain as sc
        >>> sc.Iter((1, 2, 3)).replace_at(9, 2).collect()
        Seq(1, 2, 9)

        ```
        """
        check_non_negative("index", index)
        _check_in_range(self._inner, index)

        def _replace_at(data: Iterable[T]) -> Iterator[T]:
            cursor = Cursor(data)
            for _ in range(index):
                if not cursor.advance():
                    raise _out_of_range(index)
                yield cursor.current
            if not cursor.advance():
                raise _out_of_range(index)
            yield replacement
            yield from cursor.rest()

        return self._iter(_replace_at)

    def find_and_replace(self, find: Iterable[T], replace: Iterable[T]) -> Never:
        """Not supported.

        Raises:
            InvalidArgumentError: If **find** or **replace** is missing.
            UnsupportedOperationError: Otherwise.
        """
        check_given(find=find, replace=replace)
        raise UnsupportedOperationError("find and replace is not supported")

    # counting --------------------------------------------------------------

    def counts(self) -> dict[T, int]:
        """Number of occurrences of each distinct element.

        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_("abca").counts()
        {'a': 2, 'b': 1, 'c': 1}

        ```
        """
        return self.into(cz.itertoolz.frequencies)

    def adjacent_counts(self, eq: Equality[T] | None = None) -> Iter[Count[T]]:
        """Run-length encode the elements: each run of equal adjacent elements becomes one `Count`.

        Args:
            eq (Equality[T] | None): Equality to use. Resolved from the type of the first element by default.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_("aabccca").adjacent_counts().map(tuple).collect()
        Seq(('a', 2), ('b', 1), ('c', 3), ('a', 1))

        ```
        """

        def _adjacent(data: Iterable[T]) -> Iterator[Count[T]]:
            cursor = Cursor(data)
            if not cursor.advance():
                return
            same = eq if eq is not None else equality_of(cursor.current)
            while True:
                value = cursor.current
                count, at_end = cursor.count_while(functools.partial(same, value))
                yield Count(value, count)
                if at_end:
                    return

        return self._iter(_adjacent)

    def has_at_least(self, k: int) -> bool:
        """Whether there are at least **k** elements, pulling no more than **k** of them.

        ```python
        >>> import seqchain as sc
        >>> sc.Iter.from_count().has_at_least(1000)
        True
        >>> sc.Seq((1, 2)).has_at_least(3)
        False

        ```
        """
        check_non_negative("k", k)

        def _has_at_least(data: Iterable[T]) -> bool:
            match known_length(data):
                case Some(value=length):
                    return length >= k
                case _:
                    return mit.ilen(itertools.islice(data, k)) == k

        return self.into(_has_at_least)

    def has_single_element(self) -> Option[T]:
        """The only element, or `NONE` when there are zero or several.

        ```python
        >>> import seqchain as sc
        >>> sc.Seq((7,)).has_single_element()
        Some(value=7)
        >>> sc.Seq((7, 8)).has_single_element()
        NONE

        ```
        """

        def _single(data: Iterable[T]) -> Option[T]:
            cursor = Cursor(data)
            if not cursor.advance():
                return NONE
            value = cursor.current
            if cursor.advance():
                return NONE
            return Some(value)

        return self.into(_single)

    def is_unique(self) -> bool:
        """Whether all elements are distinct. Elements must be hashable."""
        return cz.itertoolz.isdistinct(self._inner)

    def is_permutation_of(self, other: Iterable[T]) -> bool:
        """Whether **other** holds the same elements with the same multiplicities, in any order.

        ```python
        >>> import seqchain as sc
        >>> sc.Seq((1, 2, 2)).is_permutation_of([2, 1, 2])
        True
        >>> sc.Seq((1, 2, 2)).is_permutation_of([2, 1, 1])
        False

        ```
        """
        check_given(other=other)
        other_data = unwrap_data(other)
        match (known_length(self._inner), known_length(other_data)):
            case (Some(value=left), Some(value=right)) if left != right:
                return False
            case _:
                return cz.itertoolz.frequencies(self._inner) == cz.itertoolz.frequencies(
                    other_data
                )

    def majority_element(self, eq: Equality[T] | None = None) -> Option[T]:
        """The element occurring strictly more than half of the time, if any.

        A candidate is elected in one pass (Boyer-Moore vote), then confirmed by counting in a second pass.

        Args:
            eq (Equality[T] | None): Equality to use. Resolved from the type of the first element by default.

        Returns:
            Option[T]: The majority element, or `NONE` if there is none (including for empty data).

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.from_("ABACA").majority_element()
        Some(value='A')
        >>> sc.Seq.from_("ABAC").majority_element()
        NONE
        >>> sc.Iter("ABBB").majority_element()
        Some(value='B')

        ```
        """

        def _majority(data: Iterable[T]) -> Option[T]:
            store = as_store(data, "majority_element")
            cursor = Cursor(store)
            if not cursor.advance():
                return NONE
            same = eq if eq is not None else equality_of(cursor.current)
            candidate, votes = cursor.current, 1
            for item in cursor.rest():
                if votes == 0:
                    candidate, votes = item, 1
                elif same(item, candidate):
                    votes += 1
                else:
                    votes -= 1
            occurrences = mit.quantify(store, lambda item: same(item, candidate))
            if occurrences * 2 > len(store):
                return Some(candidate)
            return NONE

        return self.into(_majority)

    def is_rotation_of(
        self,
        other: Iterable[T],
        *,
        eq: Equality[T] | None = None,
        parallel: bool = False,
    ) -> bool:
        """Whether **other** is a cyclic shift of this sequence.

        Both must have the same length, and some shift in `[0, length)` must make them element-wise equal. Sequences are always rotations of themselves, and two empty sequences are rotations of each other.

        Args:
            other (Iterable[T]): The sequence to compare against.
            eq (Equality[T] | None): Equality to use. Resolved from the type of the first element by default.
            parallel (bool): Try the shifts concurrently on a thread pool. Defaults to False.

        Returns:
            bool: True if **other** is a rotation.

        Example:
        ```python
        >>> import seqchain as sc
        >>> data = sc.Seq.from_("ABCD")
        >>> data.is_rotation_of("CDAB"), data.is_rotation_of("DCBA"), data.is_rotation_of("ABC")
        (True, False, False)
        >>> data.is_rotation_of(data), sc.Seq(()).is_rotation_of([])
        (True, True)

        ```
        """
        check_given(other=other)
        other_data = unwrap_data(other)
        if other_data is self._inner:
            return True
        left = as_store(self._inner, "is_rotation_of")
        right = as_store(other_data, "is_rotation_of")
        length = len(left)
        if length != len(right):
            return False
        if length == 0:
            return True
        same = eq if eq is not None else equality_of(left[0])

        def _aligned(shift: int) -> bool:
            return all(
                same(left[idx], right[(idx - shift) % length]) for idx in range(length)
            )

        if not parallel:
            return any(map(_aligned, range(length)))
        workers = get_config().max_workers
        logger.debug("is_rotation_of: trying %d shifts on a thread pool", length)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return any(pool.map(_aligned, range(length)))
