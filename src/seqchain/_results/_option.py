from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeIs

if TYPE_CHECKING:
    from ._result import Result


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`.

    Returned by every operator whose answer may legitimately be absent (majority vote, single element lookup...), so absence is never confused with a default value of `T`.
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Wrap a possibly `None` value.

        ```python
        >>> import seqchain as sc
        >>> sc.Option.from_(2)
        Some(value=2)
        >>> sc.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some(2).is_some()
            True
            >>> sc.NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("car").unwrap()
            'car'
            >>> sc.NONE.unwrap()
            Traceback (most recent call last):
                ...
            seqchain._results._option.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, raising with a provided message if the value is `NONE`.

        Args:
            msg: The message to include in the exception if the result is `NONE`.

        Raises:
            OptionUnwrapError: If the result is `NONE`.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.NONE.expect("no majority")
            Traceback (most recent call last):
                ...
            seqchain._results._option.OptionUnwrapError: no majority (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("car").unwrap_or("bike")
            'car'
            >>> sc.NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value, leaving `NONE` untouched.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some("Hello, World!").map(len)
            Some(value=13)
            >>> sc.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function if the option is `Some`, otherwise returns `NONE`."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def ok_or[E](self, err: E) -> Result[T, E]:
        """
        Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `NONE` to `Err(err)`.

        Example:
            ```python
            >>> import seqchain as sc
            >>> sc.Some(1).ok_or("empty")
            Ok(value=1)
            >>> sc.NONE.ok_or("empty")
            Err(error='empty')

            ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err)


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        """
        Raises `OptionUnwrapError` because there is no value.

        Raises:
            OptionUnwrapError: Always, since `NONE` contains no value.
        """
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
