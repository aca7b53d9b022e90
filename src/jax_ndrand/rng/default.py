"""Thread-scoped default RNG.

Each thread lazily gets its own KeyStream on first use. It is never
shared between threads and is reclaimed when the thread ends.
"""

from __future__ import annotations

import logging
import os
import threading

from jax_ndrand.config import load_settings
from jax_ndrand.rng.streams import KeyStream

logger = logging.getLogger(__name__)

_local = threading.local()


def weak_seed() -> int:
    """Return a fresh 31-bit seed. Not suitable for cryptography."""
    return int.from_bytes(os.urandom(4), "little") >> 1


def default_rng() -> KeyStream:
    """Return the calling thread's default RNG, creating it if needed.

    The stream is seeded from JAX_NDRAND_SEED when set, otherwise from
    weak_seed().

    Examples:
        >>> default_rng() is default_rng()
        True

    """
    rng = getattr(_local, "rng", None)
    if rng is None:
        settings = load_settings()
        seed = settings.default_seed
        configured = seed is not None
        if seed is None:
            seed = weak_seed()
        rng = KeyStream(seed, block_size=settings.block_size)
        _local.rng = rng
        logger.debug(
            "created default rng for thread %s (configured seed: %s)",
            threading.current_thread().name,
            configured,
        )
    return rng


def reset_default_rng() -> None:
    """Drop the calling thread's default RNG; the next use re-creates it."""
    _local.__dict__.pop("rng", None)
