"""Forward-only pull primitive shared by the lazy operators."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sized
from enum import Enum, auto
from typing import Any

from ._errors import CursorStateError
from ._results import NONE, Option, Some


class CursorState(Enum):
    NOT_STARTED = auto()
    POSITIONED = auto()
    EXHAUSTED = auto()


def known_length(data: Iterable[Any]) -> Option[int]:
    """Length of **data** when it is a countable, re-iterable store.

    Single-pass iterators report `NONE`, since their length is unknown without consuming them.

    ```python
    >>> from seqchain._cursor import known_length
    >>> known_length((1, 2, 3))
    Some(value=3)
    >>> known_length(iter((1, 2, 3)))
    NONE

    ```
    """
    if isinstance(data, Sized) and not isinstance(data, Iterator):
        return Some(len(data))
    return NONE


class Cursor[T]:
    """A forward-only position over an iterable.

    The cursor starts before the first element. Each successful `advance()` moves it onto the next element, exposed as `current`.

    Once `advance()` has returned `False` it keeps returning `False`, and `current` is no longer readable.

    Example:
    ```python
    >>> from seqchain._cursor import Cursor
    >>> cursor = Cursor("ab")
    >>> cursor.advance(), cursor.current
    (True, 'a')
    >>> cursor.advance(), cursor.current
    (True, 'b')
    >>> cursor.advance(), cursor.advance()
    (False, False)
    >>> cursor.current
    Traceback (most recent call last):
        ...
    seqchain._errors.CursorStateError: cursor is exhausted

    ```
    """

    __slots__ = ("_current", "_it", "_state")

    def __init__(self, data: Iterable[T]) -> None:
        self._it = iter(data)
        self._current: T | None = None
        self._state = CursorState.NOT_STARTED

    @property
    def state(self) -> CursorState:
        return self._state

    @property
    def current(self) -> T:
        match self._state:
            case CursorState.POSITIONED:
                return self._current  # type: ignore[return-value]
            case CursorState.NOT_STARTED:
                raise CursorStateError("cursor has not been advanced yet")
            case CursorState.EXHAUSTED:
                raise CursorStateError("cursor is exhausted")

    def advance(self) -> bool:
        if self._state is CursorState.EXHAUSTED:
            return False
        try:
            self._current = next(self._it)
        except StopIteration:
            self._current = None
            self._state = CursorState.EXHAUSTED
            return False
        self._state = CursorState.POSITIONED
        return True

    def rest(self) -> Iterator[T]:
        """Elements after the current one."""
        while self.advance():
            yield self.current

    def from_current(self) -> Iterator[T]:
        """The current element, then the rest. The current element is captured at call time."""
        head = self.current

        def _from_current() -> Iterator[T]:
            yield head
            yield from self.rest()

        return _from_current()

    def count_while(self, predicate: Callable[[T], bool]) -> tuple[int, bool]:
        """Count the current element and the following ones while **predicate** holds.

        Stops on the first failing element, which becomes current.

        Returns:
            tuple[int, bool]: The count, and whether the end was reached.
        """
        count = 0
        while predicate(self.current):
            count += 1
            if not self.advance():
                return count, True
        return count, False


class Segment[T]:
    """Contiguous run of a shared cursor, starting at its current element.

    The run ends after **limit** elements, before the first element matching **stop**, or at the end of the cursor.

    Elements are pulled from the cursor only on demand. `drain()` buffers whatever the consumer did not read yet, so the owner can move the cursor past the segment while the segment stays readable.
    """

    __slots__ = ("_cache", "_cursor", "_left", "_open", "_stop")

    def __init__(
        self,
        cursor: Cursor[T],
        *,
        limit: int | None = None,
        stop: Callable[[T], bool] | None = None,
    ) -> None:
        self._cursor = cursor
        self._cache: deque[T] = deque((cursor.current,))
        self._left = limit - 1 if limit is not None else None
        self._stop = stop
        self._open = True

    def _pull(self) -> bool:
        if not self._open:
            return False
        if self._left is not None:
            if self._left <= 0:
                self._open = False
                return False
            self._left -= 1
        if not self._cursor.advance():
            self._open = False
            return False
        item = self._cursor.current
        if self._stop is not None and self._stop(item):
            self._open = False
            return False
        self._cache.append(item)
        return True

    def __iter__(self) -> Iterator[T]:
        while self._cache or self._pull():
            yield self._cache.popleft()

    def drain(self) -> None:
        while self._pull():
            pass
