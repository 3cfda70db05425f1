"""Lazy, chainable sequence algorithms, with in-place array and matrix transforms."""

from ._core import Config, get_config
from ._cursor import Cursor, CursorState, Segment, known_length
from ._eager import Seq, Vec
from ._equality import Equality, equality_of, resolve_equality
from ._errors import (
    CursorStateError,
    EqualityResolutionError,
    InvalidArgumentError,
    NoInverseError,
    OutOfRangeError,
    SeqChainError,
    ShapeError,
    UnsupportedOperationError,
)
from ._group import (
    INT32_ADDITION,
    INT64_ADDITION,
    FnGroup,
    Group,
    IntegerAddition,
    ModularAddition,
)
from ._inplace import partition_in_place, rotate_square, shift_in_place, swap
from ._lazy import Iter
from ._matrix import Matrix
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._types import Count, Pair

__all__ = [
    "INT32_ADDITION",
    "INT64_ADDITION",
    "NONE",
    "Config",
    "Count",
    "Cursor",
    "CursorState",
    "CursorStateError",
    "Equality",
    "EqualityResolutionError",
    "Err",
    "FnGroup",
    "Group",
    "IntegerAddition",
    "InvalidArgumentError",
    "Iter",
    "Matrix",
    "ModularAddition",
    "NoInverseError",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "OutOfRangeError",
    "Pair",
    "Result",
    "ResultUnwrapError",
    "Segment",
    "Seq",
    "SeqChainError",
    "ShapeError",
    "Some",
    "UnsupportedOperationError",
    "Vec",
    "equality_of",
    "get_config",
    "known_length",
    "partition_in_place",
    "resolve_equality",
    "rotate_square",
    "shift_in_place",
    "swap",
]
