"""Single-precision views of double-precision distributions.

F32 reuses float64 distribution math for float32 arrays. Each sample is
one float64 draw narrowed toward zero, so the adapter consumes exactly
the RNG words the wrapped distribution does, and the result is never
larger in magnitude than the double it came from.
"""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from jax_ndrand.distributions.base import Distribution, IndependentDistribution
from jax_ndrand.rng.streams import RngCore

_ZERO_F32 = np.float32(0.0)


def truncate_to_f32(value: float) -> np.float32:
    """Narrow a double to float32, truncating toward zero.

    NumPy's cast rounds to nearest. When that rounding moved away from
    zero the result is stepped one float32 ulp back toward zero. Values
    whose magnitude overflows the cast become infinite, NaN stays NaN.

    Args:
        value: Double-precision input.

    Returns:
        The float32 nearest to value that is not larger in magnitude.

    Examples:
        >>> float(truncate_to_f32(0.5))
        0.5
        >>> bool(truncate_to_f32(0.1) <= 0.1)
        True
        >>> bool(truncate_to_f32(-0.1) >= -0.1)
        True

    """
    value = float(value)
    with np.errstate(over="ignore"):
        narrowed = np.float32(value)
    if math.isinf(narrowed) or math.isnan(value):
        return narrowed
    if abs(float(narrowed)) > abs(value):
        narrowed = np.nextafter(narrowed, _ZERO_F32)
    return narrowed


class F32(Distribution):
    """Expose a float64 distribution as a float32 distribution.

    Wrapping an IndependentDistribution yields an independent adapter
    (an instance of IndependentDistribution); wrapping a stateful one
    yields a stateful adapter that drives the inner sample().

    Args:
        inner: Distribution producing float64 values.

    Examples:
        >>> from jax_ndrand.distributions.continuous import Normal
        >>> dist = F32(Normal(0.0, 1.0))
        >>> dist.dtype
        dtype('float32')

    """

    dtype: ClassVar[np.dtype] = np.dtype(np.float32)

    def __new__(cls, inner: Distribution) -> F32:
        if cls is F32 and isinstance(inner, IndependentDistribution):
            cls = _IndependentF32
        return super().__new__(cls)

    def __init__(self, inner: Distribution) -> None:
        self.inner = inner

    def __repr__(self) -> str:
        return f"F32({self.inner!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, F32) and self.inner == other.inner

    def sample(self, rng: RngCore) -> np.float32:
        return truncate_to_f32(self.inner.sample(rng))


class _IndependentF32(F32, IndependentDistribution):
    def ind_sample(self, rng: RngCore) -> np.float32:
        return truncate_to_f32(self.inner.ind_sample(rng))
