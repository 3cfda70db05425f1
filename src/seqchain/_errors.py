"""Exceptions raised by seqchain operators.

Every class also derives from the closest builtin exception, so callers can keep catching `ValueError`, `IndexError`, etc.
"""

from __future__ import annotations


class SeqChainError(Exception):
    """Base class of every error raised by seqchain."""


class InvalidArgumentError(SeqChainError, ValueError):
    """A required argument is missing, or a numeric argument is outside its legal domain."""


class OutOfRangeError(SeqChainError, IndexError):
    """An index lies beyond the end of the sequence."""


class ShapeError(SeqChainError, ValueError):
    """A matrix does not have the shape the operation requires."""


class NoInverseError(SeqChainError, ArithmeticError):
    """A group element has no representable inverse."""


class UnsupportedOperationError(SeqChainError, NotImplementedError): ...


class EqualityResolutionError(SeqChainError, TypeError): ...


class CursorStateError(SeqChainError, RuntimeError): ...


def check_given(**arguments: object) -> None:
    """Raise `InvalidArgumentError` naming the first argument that is `None`.

    ```python
    >>> from seqchain._errors import check_given
    >>> check_given(data=(1, 2), predicate=None)
    Traceback (most recent call last):
        ...
    seqchain._errors.InvalidArgumentError: `predicate` is required, got None

    ```
    """
    for name, value in arguments.items():
        if value is None:
            msg = f"`{name}` is required, got None"
            raise InvalidArgumentError(msg)


def check_non_negative(name: str, value: int) -> None:
    if value < 0:
        msg = f"`{name}` must be non-negative, got {value}"
        raise InvalidArgumentError(msg)
