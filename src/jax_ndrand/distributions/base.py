"""Distribution capability.

Two variants let callers reason about re-entrancy:

- Distribution: sample(rng) may mutate the instance (e.g. cache the
  second value of a pair), so draws on one instance must be sequential
  and the instance must not be shared between concurrent constructions.
- IndependentDistribution: ind_sample(rng) is a pure function of the
  RNG state. sample() delegates to it unless a subclass provides a
  faster stateful path.

Sampling has no error condition. Parameters are validated when a
distribution is constructed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np

from jax_ndrand.rng.streams import RngCore


class Distribution(ABC):
    """A source of values of type dtype, possibly stateful."""

    dtype: ClassVar[np.dtype] = np.dtype(np.float64)

    @abstractmethod
    def sample(self, rng: RngCore) -> Any:
        """Draw one value, consuming rng and possibly updating self."""


class IndependentDistribution(Distribution):
    """A distribution that retains no state between draws."""

    @abstractmethod
    def ind_sample(self, rng: RngCore) -> Any:
        """Draw one value as a pure function of rng's state."""

    def sample(self, rng: RngCore) -> Any:
        return self.ind_sample(rng)


def is_independent(distribution: Distribution) -> bool:
    """Return True if distribution can be sampled without retained state."""
    return isinstance(distribution, IndependentDistribution)
