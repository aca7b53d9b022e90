"""Reference float64 distributions.

Uniform and Normal cover the common initialization cases and serve as
inner distributions for F32. Both build on RngCore.next_f64.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from jax_ndrand.distributions.base import IndependentDistribution
from jax_ndrand.errors import InvalidParameterError
from jax_ndrand.rng.streams import RngCore

_TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Uniform(IndependentDistribution):
    """Uniform distribution over the half-open interval [low, high).

    Args:
        low: Lower bound (inclusive).
        high: Upper bound (exclusive). Must be greater than low.

    Examples:
        >>> from jax_ndrand.rng import KeyStream
        >>> value = Uniform(0.0, 10.0).sample(KeyStream(42))
        >>> 0.0 <= value < 10.0
        True

    """

    low: float = 0.0
    high: float = 1.0

    def __post_init__(self) -> None:
        low, high = float(self.low), float(self.high)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidParameterError(f"Uniform bounds must be finite, got [{low}, {high})")
        if not low < high:
            raise InvalidParameterError(f"Uniform requires low < high, got [{low}, {high})")
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    def ind_sample(self, rng: RngCore) -> float:
        value = self.low + (self.high - self.low) * rng.next_f64()
        # Scaling can round up onto the excluded bound.
        if value >= self.high:
            value = math.nextafter(self.high, self.low)
        return value


def _box_muller(rng: RngCore) -> tuple[float, float]:
    """Draw a pair of independent standard normal values."""
    radius = math.sqrt(-2.0 * math.log(1.0 - rng.next_f64()))
    theta = _TWO_PI * rng.next_f64()
    return radius * math.cos(theta), radius * math.sin(theta)


@dataclass
class Normal(IndependentDistribution):
    """Normal distribution N(mean, std**2) via the Box-Muller transform.

    Box-Muller produces values in pairs. ind_sample keeps the first value
    of each pair and retains nothing. sample() is the stateful path: it
    caches the second value and returns it on the next call, halving RNG
    use, so one Normal instance must not be sampled concurrently.

    Args:
        mean: Location.
        std: Standard deviation, non-negative.

    Examples:
        >>> from jax_ndrand.rng import KeyStream
        >>> dist = Normal(0.0, 1.0)
        >>> isinstance(dist.sample(KeyStream(0)), float)
        True

    """

    mean: float = 0.0
    std: float = 1.0
    _cached: float | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.mean, self.std = float(self.mean), float(self.std)
        if not (math.isfinite(self.mean) and math.isfinite(self.std)):
            raise InvalidParameterError(f"Normal parameters must be finite, got {self.mean}, {self.std}")
        if self.std < 0.0:
            raise InvalidParameterError(f"Normal requires std >= 0, got {self.std}")

    def ind_sample(self, rng: RngCore) -> float:
        z, _ = _box_muller(rng)
        return self.mean + self.std * z

    def sample(self, rng: RngCore) -> float:
        if self._cached is not None:
            z, self._cached = self._cached, None
        else:
            z, self._cached = _box_muller(rng)
        return self.mean + self.std * z
