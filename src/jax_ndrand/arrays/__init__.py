"""Dense NumPy arrays populated from distributions.

random uses the thread's default RNG; random_using takes an explicit
one. Shapes are validated and size-checked before allocation.
"""

from jax_ndrand.arrays.construct import random, random_using
from jax_ndrand.arrays.shape import MAX_INDEX, check_order, checked_size, resolve_shape

__all__ = [
    "random",
    "random_using",
    "resolve_shape",
    "checked_size",
    "check_order",
    "MAX_INDEX",
]
