"""jax_ndrand: dense arrays with elements drawn from distributions.

Modules:
    arrays: random / random_using constructors, shape checks
    distributions: Distribution capability, F32 adapter, Uniform/Normal/UniformInt
    rng: JAX key streams, NumPy adapter, thread-scoped default RNG
    config: Environment-driven settings
    errors: Exception hierarchy
"""

import logging

from jax_ndrand.arrays import random, random_using
from jax_ndrand.distributions import (
    F32,
    Distribution,
    IndependentDistribution,
    Normal,
    Uniform,
    UniformInt,
    truncate_to_f32,
)
from jax_ndrand.errors import (
    ConfigError,
    InvalidParameterError,
    InvalidShapeError,
    NdRandError,
    ShapeOverflowError,
)
from jax_ndrand.rng import GeneratorStream, KeyStream, RngCore, default_rng

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "random",
    "random_using",
    "Distribution",
    "IndependentDistribution",
    "F32",
    "truncate_to_f32",
    "Uniform",
    "Normal",
    "UniformInt",
    "RngCore",
    "KeyStream",
    "GeneratorStream",
    "default_rng",
    "NdRandError",
    "ShapeOverflowError",
    "InvalidShapeError",
    "InvalidParameterError",
    "ConfigError",
]
