"""In-place transforms of mutable arrays and square matrices."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor

from ._core import get_config
from ._errors import ShapeError, check_given

logger = logging.getLogger(__name__)

type Rows[T] = Sequence[MutableSequence[T]]
"""A matrix given as a sequence of equally long mutable rows."""


def swap[T](arr: MutableSequence[T], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def shift_in_place[T](arr: MutableSequence[T], shifts: int = 1) -> None:
    """Rotate **arr** in place so that the element at `i` moves to `(i + shifts) % len(arr)`.

    Negative values rotate toward the front. Works by following the cycles of the permutation, carrying a single displaced value, so each element moves exactly once and no extra array is allocated.

    Args:
        arr (MutableSequence[T]): The array to rotate.
        shifts (int): Number of positions to rotate by. Defaults to 1.

    Example:
    ```python
    >>> from seqchain import shift_in_place
    >>> arr = list("ABCDE")
    >>> shift_in_place(arr, 1)
    >>> "".join(arr)
    'EABCD'
    >>> shift_in_place(arr, -1)
    >>> "".join(arr)
    'ABCDE'
    >>> shift_in_place(arr, 8)
    >>> "".join(arr)
    'CDEAB'

    ```
    """
    check_given(arr=arr)
    length = len(arr)
    if length <= 1:
        return
    offset = shifts % length
    if offset == 0:
        return
    cycles = math.gcd(offset, length)
    logger.debug("shift_in_place: offset %d over %d cycles", offset, cycles)
    for start in range(cycles):
        carried = arr[start]
        idx = start
        while True:
            idx = (idx + offset) % length
            arr[idx], carried = carried, arr[idx]
            if idx == start:
                break


def partition_in_place[T](
    arr: MutableSequence[T], predicate: Callable[[T], bool]
) -> None:
    """Reorder **arr** so elements failing **predicate** come first and elements passing it come last.

    Two indices walk toward each other and elements are swapped only when both sit on the wrong side. The relative order inside each side is not preserved.

    ```python
    >>> from seqchain import partition_in_place
    >>> arr = [2, 1, 4, 3, 6, 5]
    >>> partition_in_place(arr, lambda x: x % 2 == 0)
    >>> arr
    [5, 1, 3, 4, 6, 2]

    ```
    """
    check_given(arr=arr, predicate=predicate)
    front, back = 0, len(arr) - 1
    while front < back:
        if not predicate(arr[front]):
            front += 1
        elif predicate(arr[back]):
            back -= 1
        else:
            swap(arr, front, back)
            front += 1
            back -= 1


def check_square[T](rows: Rows[T]) -> int:
    """Side length of **rows**, raising `ShapeError` unless it is square."""
    check_given(rows=rows)
    side = len(rows)
    for idx, row in enumerate(rows):
        if len(row) != side:
            msg = f"expected a square matrix of side {side}, row {idx} has {len(row)} columns"
            raise ShapeError(msg)
    return side


def _rotate_ring[T](rows: Rows[T], ring: int, side: int) -> None:
    last = side - ring - 1
    for k in range(ring, last):
        mirror = last - k + ring
        top = rows[ring][k]
        rows[ring][k] = rows[mirror][ring]
        rows[mirror][ring] = rows[last][mirror]
        rows[last][mirror] = rows[k][last]
        rows[k][last] = top


def rotate_square[T](rows: Rows[T], rotations: int = 1, *, parallel: bool = False) -> None:
    """Rotate a square matrix clockwise in place, by quarter turns.

    **rotations** is taken modulo 4, so negative values rotate counter-clockwise. The matrix is processed ring by ring from the outside in, each ring cycling groups of four cells. Rings never overlap, so with `parallel=True` they are rotated concurrently on a thread pool.

    Args:
        rows (Rows[T]): The matrix, as a sequence of mutable rows.
        rotations (int): Number of clockwise quarter turns. Defaults to 1.
        parallel (bool): Rotate rings concurrently. Defaults to False.

    Raises:
        ShapeError: If the matrix is not square.

    Example:
    ```python
    >>> from seqchain import rotate_square
    >>> rows = [[1, 2], [3, 4]]
    >>> rotate_square(rows)
    >>> rows
    [[3, 1], [4, 2]]
    >>> rotate_square(rows, -1)
    >>> rows
    [[1, 2], [3, 4]]

    ```
    """
    side = check_square(rows)
    turns = rotations % 4
    rings = side // 2
    if turns == 0 or rings == 0:
        return
    logger.debug("rotate_square: %d quarter turns over %d rings", turns, rings)

    def _turn_ring(ring: int) -> None:
        for _ in range(turns):
            _rotate_ring(rows, ring, side)

    if not parallel:
        for ring in range(rings):
            _turn_ring(ring)
        return
    with ThreadPoolExecutor(max_workers=get_config().max_workers) as pool:
        for _ in pool.map(_turn_ring, range(rings)):
            pass
