"""Distributions sampled element by element against an RNG.

Distribution is the stateful capability, IndependentDistribution the
stateless one. F32 narrows any float64 distribution to float32.
"""

from jax_ndrand.distributions.base import (
    Distribution,
    IndependentDistribution,
    is_independent,
)
from jax_ndrand.distributions.continuous import Normal, Uniform
from jax_ndrand.distributions.discrete import UniformInt
from jax_ndrand.distributions.precision import F32, truncate_to_f32

__all__ = [
    "Distribution",
    "IndependentDistribution",
    "is_independent",
    "F32",
    "truncate_to_f32",
    "Uniform",
    "Normal",
    "UniformInt",
]
