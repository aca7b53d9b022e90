"""Random array constructors.

Both constructors allocate a fresh NumPy array and fill it with one draw
per element, in the array's memory order: row-major for order="C",
column-major for order="F". Draws are strictly sequential on a single
RNG, so a fixed seed, shape and order always give the same array.

References:
    - NumPy memory layout: https://numpy.org/doc/stable/reference/arrays.ndarray.html#internal-memory-layout-of-an-ndarray
    - NumPy fromiter: https://numpy.org/doc/stable/reference/generated/numpy.fromiter.html

"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from jax_ndrand.arrays.shape import check_order, checked_size, resolve_shape
from jax_ndrand.distributions.base import Distribution, is_independent
from jax_ndrand.rng.default import default_rng
from jax_ndrand.rng.streams import RngCore

logger = logging.getLogger(__name__)


def random_using(
    shape: int | Sequence[int],
    distribution: Distribution,
    rng: RngCore,
    *,
    order: str = "C",
) -> np.ndarray:
    """Create an array with elements drawn from distribution using rng.

    The shape is validated and its element count checked before anything
    is allocated or sampled. A zero extent yields an empty array without
    touching distribution or rng.

    Independent distributions are drawn through ind_sample, so an instance
    can be reused across calls and the output depends only on rng. Only
    purely stateful distributions are drawn through sample.

    Args:
        shape: Extent or sequence of extents.
        distribution: Source of element values; its dtype sets the array dtype.
        rng: Caller-owned RNG, advanced by the draws.
        order: Memory order and fill order, "C" or "F".

    Returns:
        New array of the given shape and distribution.dtype.

    Raises:
        ShapeOverflowError: If the element count does not fit numpy.intp.
        InvalidShapeError: If an extent is negative or order is unknown.

    Examples:
        >>> from jax_ndrand.distributions import Uniform
        >>> from jax_ndrand.rng import KeyStream
        >>> a = random_using((2, 5), Uniform(0.0, 10.0), KeyStream(42))
        >>> a.shape
        (2, 5)
        >>> b = random_using((2, 5), Uniform(0.0, 10.0), KeyStream(42))
        >>> bool((a == b).all())
        True

    """
    dims = resolve_shape(shape)
    order = check_order(order)
    size = checked_size(dims)
    dtype = np.dtype(getattr(distribution, "dtype", np.float64))
    logger.debug("filling %s array of shape %s (order %s, %d elements)", dtype, dims, order, size)

    draw = distribution.ind_sample if is_independent(distribution) else distribution.sample
    draws = (draw(rng) for _ in range(size))
    flat = np.fromiter(draws, dtype=dtype, count=size)
    return flat.reshape(dims, order=order)


def random(
    shape: int | Sequence[int],
    distribution: Distribution,
    *,
    order: str = "C",
) -> np.ndarray:
    """Create an array with elements drawn from distribution.

    Uses the calling thread's default RNG, which is fast and weakly
    seeded. Pass an explicit RNG to random_using for reproducible output.

    Examples:
        >>> from jax_ndrand.distributions import F32, Normal
        >>> a = random((2, 5), F32(Normal(0.0, 1.0)))
        >>> a.shape, a.dtype
        ((2, 5), dtype('float32'))

    """
    return random_using(shape, distribution, default_rng(), order=order)
