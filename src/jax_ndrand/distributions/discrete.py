"""Reference integer distributions."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from jax_ndrand.distributions.base import IndependentDistribution
from jax_ndrand.errors import InvalidParameterError
from jax_ndrand.rng.streams import RngCore

_INT64 = np.iinfo(np.int64)


@dataclass(frozen=True)
class UniformInt(IndependentDistribution):
    """Uniform integers over [low, high), without modulo bias.

    64-bit words falling in the incomplete top bucket are rejected and
    redrawn, so every value in the range is equally likely.

    Args:
        low: Lower bound (inclusive).
        high: Upper bound (exclusive). Must be greater than low.

    Examples:
        >>> from jax_ndrand.rng import KeyStream
        >>> 1 <= UniformInt(1, 7).sample(KeyStream(3)) < 7
        True

    """

    dtype: ClassVar[np.dtype] = np.dtype(np.int64)

    low: int = 0
    high: int = 2

    def __post_init__(self) -> None:
        try:
            low, high = operator.index(self.low), operator.index(self.high)
        except TypeError as exc:
            raise InvalidParameterError("UniformInt bounds must be integers") from exc
        if not low < high:
            raise InvalidParameterError(f"UniformInt requires low < high, got [{low}, {high})")
        if low < _INT64.min or high - 1 > _INT64.max:
            raise InvalidParameterError(f"UniformInt bounds [{low}, {high}) exceed int64")
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    def ind_sample(self, rng: RngCore) -> int:
        span = self.high - self.low
        zone = (1 << 64) - (1 << 64) % span
        while True:
            value = rng.next_u64()
            if value < zone:
                return self.low + value % span
