"""Pick the equality function used to compare elements of a given type."""

from __future__ import annotations

import functools
import logging
import operator
import types
from collections.abc import Callable
from typing import Any, Union, get_args, get_origin

from ._errors import EqualityResolutionError

logger = logging.getLogger(__name__)

type Equality[T] = Callable[[T, T], bool]
"""Binary predicate telling whether two elements are equal."""


def _null_safe(x: object, y: object) -> bool:
    if x is None or y is None:
        return x is y
    return bool(x == y)


def _is_nullable(tp: Any) -> bool:  # noqa: ANN401
    if tp is None or tp is types.NoneType:
        return True
    if get_origin(tp) in (Union, types.UnionType):
        return types.NoneType in get_args(tp)
    return False


def _bind_direct[T](tp: type[T]) -> Equality[T]:
    method = tp.__eq__

    def _direct(x: T, y: T) -> bool:
        if isinstance(x, tp):
            outcome = method(x, y)
            if outcome is not NotImplemented:
                return bool(outcome)
        return bool(x == y)

    return _direct


@functools.cache
def resolve_equality(tp: Any) -> Equality[Any]:  # noqa: ANN401
    """Return the equality function to use for elements of type **tp**.

    The decision is made once per type and cached:

    1. Nullable types (`None`, `X | None`, `Optional[X]`) get a null-safe comparison: `None` only equals `None`.
    2. Types defining their own `__eq__` get that method bound directly.
    3. Anything else gets the universal `operator.eq`.

    Args:
        tp (Any): A class, `None`, or a union type expression.

    Returns:
        Equality[Any]: A binary predicate.

    Raises:
        EqualityResolutionError: If **tp** is not a type, or explicitly disables equality by setting `__eq__ = None`.

    Example:
    ```python
    >>> import seqchain as sc
    >>> eq = sc.resolve_equality(int | None)
    >>> eq(None, None), eq(None, 0), eq(3, 3)
    (True, False, True)
    >>> sc.resolve_equality(str)("a", "a")
    True
    >>> sc.resolve_equality(object) is sc.resolve_equality(object)
    True

    ```
    """
    if _is_nullable(tp):
        logger.debug("null-safe equality selected for %r", tp)
        return _null_safe
    if not isinstance(tp, type):
        msg = f"cannot resolve an equality for {tp!r}, expected a type"
        raise EqualityResolutionError(msg)
    method = getattr(tp, "__eq__", None)
    if method is None:
        msg = f"{tp.__qualname__} disables equality (__eq__ is None)"
        raise EqualityResolutionError(msg)
    if method is object.__eq__:
        logger.debug("universal equality selected for %s", tp.__qualname__)
        return operator.eq
    logger.debug("direct equality bound for %s", tp.__qualname__)
    return _bind_direct(tp)


def equality_of(value: object) -> Equality[Any]:
    """Resolve the equality for the runtime type of a representative element."""
    return resolve_equality(type(value))
