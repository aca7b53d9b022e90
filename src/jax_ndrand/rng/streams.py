"""Mutable bit streams for sampling.

Distributions consume randomness as a stream of 32-bit words. JAX's PRNG
is functional, so KeyStream holds a key and splits it on every refill,
turning the splittable key into a sequential stream. GeneratorStream
reads NumPy bit generators the same way for interop with code that is
already seeded through numpy.random.

References:
    - JAX random: https://jax.readthedocs.io/en/latest/random-numbers.html
    - NumPy bit generators: https://numpy.org/doc/stable/reference/random/bit_generators/

"""

from __future__ import annotations

from abc import ABC, abstractmethod

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array

from jax_ndrand.config import load_settings
from jax_ndrand.errors import InvalidParameterError

_U32_MASK = 0xFFFFFFFF
_F64_SCALE = 1.0 / 9007199254740992.0  # 2**-53


def create_key(seed: int) -> Array:
    """Create a PRNG key from an integer seed.

    Args:
        seed: Integer seed for reproducibility.

    Returns:
        PRNG key array.

    Examples:
        >>> key = create_key(42)
        >>> key.shape
        ()

    """
    return jax.random.key(seed)


def split_key(key: Array, num: int = 2) -> Array:
    """Split a PRNG key into multiple independent sub-keys.

    Args:
        key: Parent PRNG key (consumed, do not reuse).
        num: Number of sub-keys to generate.

    Returns:
        Array of sub-keys with shape (num,).

    Examples:
        >>> key, subkey = split_key(create_key(0))
        >>> subkey.shape
        ()

    """
    return jax.random.split(key, num)


class RngCore(ABC):
    """A mutable stream of pseudorandom 32-bit words.

    Subclasses implement next_u32; wider integers, floats and bytes are
    derived from it so every stream yields identical derived values for
    identical word sequences.
    """

    @abstractmethod
    def next_u32(self) -> int:
        """Return the next word in [0, 2**32)."""

    def next_u64(self) -> int:
        """Return a 64-bit integer built from two words, high word first."""
        high = self.next_u32()
        return (high << 32) | self.next_u32()

    def next_f64(self) -> float:
        """Return a float in [0, 1) with 53 random bits.

        Examples:
            >>> 0.0 <= KeyStream(0).next_f64() < 1.0
            True

        """
        a = self.next_u32() >> 5
        b = self.next_u32() >> 6
        return (a * 67108864 + b) * _F64_SCALE

    def fill_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill a writable buffer with random bytes, little-endian per word."""
        view = memoryview(buffer).cast("B")
        for start in range(0, len(view), 4):
            chunk = self.next_u32().to_bytes(4, "little")
            end = min(start + 4, len(view))
            view[start:end] = chunk[: end - start]


class BlockRng(RngCore):
    """RngCore that hands out words from blocks produced by _refill."""

    def __init__(self, block_size: int | None = None) -> None:
        if block_size is None:
            block_size = load_settings().block_size
        if block_size <= 0:
            raise InvalidParameterError(f"block_size must be positive, got {block_size}")
        self._block_size = block_size
        self._words: list[int] = []
        self._pos = 0

    @property
    def block_size(self) -> int:
        return self._block_size

    @abstractmethod
    def _refill(self) -> list[int]:
        """Produce the next non-empty block of 32-bit words."""

    def next_u32(self) -> int:
        if self._pos >= len(self._words):
            self._words = self._refill()
            self._pos = 0
        word = self._words[self._pos]
        self._pos += 1
        return word


class KeyStream(BlockRng):
    """Sequential RNG backed by a splittable JAX PRNG key.

    Each refill splits the held key once and draws block_size words from
    the sub-key with jax.random.bits. Two streams built from the same seed
    and block size produce the same words.

    Args:
        seed: Integer seed.
        block_size: Words drawn per refill. Defaults to the configured
            JAX_NDRAND_BLOCK_SIZE.

    Examples:
        >>> a, b = KeyStream(7), KeyStream(7)
        >>> [a.next_u32() for _ in range(3)] == [b.next_u32() for _ in range(3)]
        True

    """

    def __init__(self, seed: int, block_size: int | None = None) -> None:
        super().__init__(block_size)
        self._key = create_key(seed)

    @classmethod
    def from_key(cls, key: Array, block_size: int | None = None) -> KeyStream:
        """Wrap an existing PRNG key (consumed, do not reuse it elsewhere)."""
        stream = cls.__new__(cls)
        BlockRng.__init__(stream, block_size)
        stream._key = key
        return stream

    def _refill(self) -> list[int]:
        self._key, subkey = split_key(self._key)
        words = jax.random.bits(subkey, (self._block_size,), dtype=jnp.uint32)
        return np.asarray(words).tolist()

    def split(self, num: int = 2) -> list[KeyStream]:
        """Derive num independent streams and advance this one.

        Useful for handing disjoint RNGs to concurrent constructions.

        Examples:
            >>> children = KeyStream(0).split(3)
            >>> len(children)
            3

        """
        if num < 1:
            raise InvalidParameterError(f"num must be at least 1, got {num}")
        keys = split_key(self._key, num + 1)
        self._key = keys[0]
        return [KeyStream.from_key(k, self._block_size) for k in keys[1:]]


class GeneratorStream(BlockRng):
    """RngCore reading raw output from a NumPy bit generator.

    Args:
        generator: A numpy.random.Generator, or a seed passed to
            numpy.random.default_rng.
        block_size: Words buffered per refill.

    Examples:
        >>> GeneratorStream(3).next_u32() == GeneratorStream(3).next_u32()
        True

    """

    def __init__(
        self,
        generator: np.random.Generator | int | None = None,
        block_size: int | None = None,
    ) -> None:
        super().__init__(block_size)
        if not isinstance(generator, np.random.Generator):
            generator = np.random.default_rng(generator)
        self._bit_generator = generator.bit_generator
        # MT19937 emits 32-bit raw values; the others emit 64-bit.
        self._raw_u32 = isinstance(self._bit_generator, np.random.MT19937)

    def _refill(self) -> list[int]:
        if self._raw_u32:
            return self._bit_generator.random_raw(self._block_size).tolist()
        words = []
        for value in self._bit_generator.random_raw(max(1, self._block_size // 2)).tolist():
            words.append(value & _U32_MASK)
            words.append(value >> 32)
        return words
