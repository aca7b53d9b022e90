"""Shape resolution and overflow-checked element counts."""

from __future__ import annotations

import operator
from collections.abc import Sequence

import numpy as np

from jax_ndrand.errors import InvalidShapeError, ShapeOverflowError

MAX_INDEX = int(np.iinfo(np.intp).max)
ORDERS = ("C", "F")


def resolve_shape(shape: int | Sequence[int]) -> tuple[int, ...]:
    """Normalize an int or a sequence of extents to a tuple.

    Args:
        shape: A single extent or a sequence of non-negative extents.

    Returns:
        Tuple of extents.

    Raises:
        InvalidShapeError: If an extent is negative or not an integer.

    Examples:
        >>> resolve_shape(5)
        (5,)
        >>> resolve_shape([2, 3])
        (2, 3)

    """
    try:
        dims = (operator.index(shape),)
    except TypeError:
        try:
            dims = tuple(operator.index(d) for d in shape)
        except TypeError as exc:
            raise InvalidShapeError(f"shape must be an int or a sequence of ints, got {shape!r}") from exc
    for d in dims:
        if d < 0:
            raise InvalidShapeError(f"negative extent in shape {dims}")
    return dims


def checked_size(dims: Sequence[int]) -> int:
    """Multiply extents, failing if the product exceeds the index range.

    The product of the non-zero extents must fit MAX_INDEX even when
    another extent is zero, so a shape is either valid or not regardless
    of its emptiness.

    Raises:
        ShapeOverflowError: If the element count does not fit numpy.intp.

    Examples:
        >>> checked_size((2, 5))
        10
        >>> checked_size((3, 0))
        0
        >>> checked_size(())
        1

    """
    size = 1
    for d in dims:
        if d == 0:
            continue
        size *= d
        if size > MAX_INDEX:
            raise ShapeOverflowError(f"shape {tuple(dims)} has more elements than fit in intp ({MAX_INDEX})")
    return 0 if 0 in dims else size


def check_order(order: str) -> str:
    """Validate a memory order, returning it upper-cased."""
    if not isinstance(order, str) or order.upper() not in ORDERS:
        raise InvalidShapeError(f"order must be one of {ORDERS}, got {order!r}")
    return order.upper()
