"""Shared test doubles."""

from __future__ import annotations

from jax_ndrand.distributions import Distribution, IndependentDistribution, Normal
from jax_ndrand.rng import RngCore


class ScriptedRng(RngCore):
    """RngCore replaying a fixed list of 32-bit words."""

    def __init__(self, words):
        self.words = list(words)
        self.consumed = 0

    def next_u32(self):
        word = self.words[self.consumed]
        self.consumed += 1
        return word


class CountingDistribution(IndependentDistribution):
    """Returns 1.0 and counts calls."""

    def __init__(self):
        self.calls = 0

    def ind_sample(self, rng):
        self.calls += 1
        return 1.0


class Counter(Distribution):
    """Stateful distribution yielding 0.0, 1.0, 2.0, ... without using rng."""

    def __init__(self):
        self.next_value = 0.0

    def sample(self, rng):
        value = self.next_value
        self.next_value += 1.0
        return value


class PairCachingNormal(Distribution):
    """Purely stateful normal: always takes Normal's pair-caching path."""

    def __init__(self):
        self.normal = Normal()

    def sample(self, rng):
        return self.normal.sample(rng)
