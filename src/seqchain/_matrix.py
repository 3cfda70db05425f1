from __future__ import annotations

import logging
from collections.abc import Iterable

from ._core import CommonBase, get_config
from ._errors import ShapeError, check_given
from ._inplace import rotate_square

logger = logging.getLogger(__name__)


class Matrix[T](CommonBase[list[list[T]]]):
    """A fixed-size, two-dimensional grid of elements, mutated in place.

    The rows are kept as a list of equally long lists. A ragged list of rows is rejected at construction.

    Use `from_` to build a `Matrix` from any iterable of rows (a copy is made), or pass a list of lists to the constructor to wrap it without copying.

    Args:
        rows (list[list[T]]): The rows of the matrix.

    Raises:
        ShapeError: If the rows do not all have the same length.

    Example:
    ```python
    >>> import seqchain as sc
    >>> grid = sc.Matrix.from_(range(r * 3, r * 3 + 3) for r in range(3))
    >>> grid
    Matrix([0, 1, 2], [3, 4, 5], [6, 7, 8])
    >>> grid.rotate()
    >>> grid
    Matrix([6, 3, 0], [7, 4, 1], [8, 5, 2])
    >>> grid[0, 2]
    0

    ```
    """

    _inner: list[list[T]]

    __slots__ = ("_inner",)

    def __init__(self, rows: list[list[T]]) -> None:
        check_given(rows=rows)
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            msg = f"rows must all have the same length, got lengths {sorted(widths)}"
            raise ShapeError(msg)
        self._inner = rows

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __getitem__(self, position: tuple[int, int]) -> T:
        row, col = position
        return self._inner[row][col]

    def __setitem__(self, position: tuple[int, int], value: T) -> None:
        row, col = position
        self._inner[row][col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._inner == other._inner

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def from_[U](rows: Iterable[Iterable[U]]) -> Matrix[U]:
        """Create a `Matrix` from any iterable of rows, copying them."""
        return Matrix([list(row) for row in rows])

    @property
    def shape(self) -> tuple[int, int]:
        """Number of rows and columns."""
        if not self._inner:
            return (0, 0)
        return (len(self._inner), len(self._inner[0]))

    def is_square(self) -> bool:
        rows, cols = self.shape
        return rows == cols

    def to_rows(self) -> list[list[T]]:
        """A copy of the rows."""
        return [list(row) for row in self._inner]

    def rotate(self, rotations: int = 1, *, parallel: bool = False) -> None:
        """Rotate the matrix clockwise in place, by quarter turns.

        **rotations** is taken modulo 4: negative values rotate counter-clockwise and multiples of 4 leave the matrix untouched.

        Args:
            rotations (int): Number of clockwise quarter turns. Defaults to 1.
            parallel (bool): Rotate the concentric rings concurrently on a thread pool. Defaults to False.

        Raises:
            ShapeError: If the matrix is not square.

        Example:
        ```python
        >>> import seqchain as sc
        >>> grid = sc.Matrix([[1, 2, 3], [4, 5, 6]])
        >>> grid.rotate()
        Traceback (most recent call last):
            ...
        seqchain._errors.ShapeError: cannot rotate a 2x3 matrix, it must be square

        ```
        """
        if not self.is_square():
            rows, cols = self.shape
            msg = f"cannot rotate a {rows}x{cols} matrix, it must be square"
            raise ShapeError(msg)
        logger.debug("rotating a %dx%d matrix by %d", *self.shape, rotations)
        rotate_square(self._inner, rotations, parallel=parallel)
