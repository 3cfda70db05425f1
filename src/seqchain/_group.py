"""Algebraic groups used by the target-pair search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from ._errors import InvalidArgumentError, NoInverseError
from ._results import Err, Ok, Result


class Group[T](ABC):
    """A set of values with an associative operation, an identity and inverses.

    Implementations only need `identity`, `operate` and `invert`.

    `invert` raises `NoInverseError` for elements whose inverse cannot be represented, e.g. the most negative value of a bounded integer type.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def identity(self) -> T: ...

    @abstractmethod
    def operate(self, a: T, b: T) -> T: ...

    @abstractmethod
    def invert(self, a: T) -> T: ...

    def try_invert(self, a: T) -> Result[T, NoInverseError]:
        """Invert **a**, returning the failure as an `Err` instead of raising.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.INT32_ADDITION.try_invert(7)
        Ok(value=-7)
        >>> sc.INT32_ADDITION.try_invert(-(2**31)).is_err()
        True

        ```
        """
        try:
            return Ok(self.invert(a))
        except NoInverseError as e:
            return Err(e)

    def complement(self, target: T, a: T) -> T:
        """The element `b` such that `operate(a, b) == target`, computed as `operate(target, invert(a))`.

        ```python
        >>> import seqchain as sc
        >>> sc.INT32_ADDITION.complement(2, 5)
        -3

        ```
        """
        return self.operate(target, self.invert(a))


@dataclass(frozen=True, slots=True)
class IntegerAddition(Group[int]):
    """Addition over two's complement integers of a fixed bit width.

    `operate` wraps around like fixed-width hardware addition. The most negative value has no representable negation, so `invert` raises `NoInverseError` for it.

    Args:
        bits (int): Width of the integers. Defaults to 32.

    Example:
    ```python
    >>> import seqchain as sc
    >>> group = sc.IntegerAddition(bits=8)
    >>> group.operate(100, 100)
    -56
    >>> group.invert(-127)
    127
    >>> group.invert(-128)
    Traceback (most recent call last):
        ...
    seqchain._errors.NoInverseError: -128 has no inverse in 8-bit integer addition

    ```
    """

    bits: int = 32

    def __post_init__(self) -> None:
        if self.bits < 1:
            msg = f"`bits` must be at least 1, got {self.bits}"
            raise InvalidArgumentError(msg)

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def identity(self) -> int:
        return 0

    def _check(self, a: int) -> int:
        if not self.min_value <= a <= self.max_value:
            msg = f"{a} does not fit in a {self.bits}-bit integer"
            raise InvalidArgumentError(msg)
        return a

    def _wrap(self, value: int) -> int:
        span = 1 << self.bits
        return (value - self.min_value) % span + self.min_value

    def operate(self, a: int, b: int) -> int:
        return self._wrap(self._check(a) + self._check(b))

    def invert(self, a: int) -> int:
        if self._check(a) == self.min_value:
            msg = f"{a} has no inverse in {self.bits}-bit integer addition"
            raise NoInverseError(msg)
        return -a


@dataclass(frozen=True, slots=True)
class ModularAddition(Group[int]):
    """The cyclic group of integers modulo **modulus**. Every element is invertible.

    ```python
    >>> import seqchain as sc
    >>> z7 = sc.ModularAddition(7)
    >>> z7.operate(5, 4), z7.invert(3)
    (2, 4)

    ```
    """

    modulus: int

    def __post_init__(self) -> None:
        if self.modulus < 1:
            msg = f"`modulus` must be at least 1, got {self.modulus}"
            raise InvalidArgumentError(msg)

    @property
    def identity(self) -> int:
        return 0

    def operate(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def invert(self, a: int) -> int:
        return -a % self.modulus


@dataclass(frozen=True, slots=True)
class FnGroup[T](Group[T]):
    """A group assembled from plain callables.

    Args:
        unit (T): The identity element.
        op (Callable[[T, T], T]): The group operation.
        inv (Callable[[T], T]): Inverse of an element. May raise `NoInverseError`.

    Example:
    ```python
    >>> import seqchain as sc
    >>> from fractions import Fraction
    >>> product = sc.FnGroup(Fraction(1), lambda a, b: a * b, lambda a: 1 / a)
    >>> product.complement(Fraction(6), Fraction(3))
    Fraction(2, 1)

    ```
    """

    unit: T
    op: Callable[[T, T], T]
    inv: Callable[[T], T]

    @property
    def identity(self) -> T:
        return self.unit

    def operate(self, a: T, b: T) -> T:
        return self.op(a, b)

    def invert(self, a: T) -> T:
        return self.inv(a)


INT32_ADDITION: Final = IntegerAddition(32)
"""Addition over 32-bit signed integers."""
INT64_ADDITION: Final = IntegerAddition(64)
"""Addition over 64-bit signed integers."""
