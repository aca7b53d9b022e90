"""Random-number generators as mutable word streams.

JAX's PRNG is explicit and splittable. KeyStream wraps a key into the
sequential stream that element-by-element sampling needs, and split()
hands out disjoint streams for concurrent work. The default RNG is
thread-scoped and weakly seeded.
"""

from jax_ndrand.rng.default import default_rng, reset_default_rng, weak_seed
from jax_ndrand.rng.streams import (
    BlockRng,
    GeneratorStream,
    KeyStream,
    RngCore,
    create_key,
    split_key,
)

__all__ = [
    "RngCore",
    "BlockRng",
    "KeyStream",
    "GeneratorStream",
    "create_key",
    "split_key",
    "default_rng",
    "reset_default_rng",
    "weak_seed",
]
