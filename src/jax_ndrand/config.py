"""Environment-driven settings.

Settings are read once per call to load_settings() and frozen, so a
running construction never observes a change in configuration.

Environment variables:
    JAX_NDRAND_SEED: Integer seed used for every thread's default RNG.
        Unset means automatic weak seeding.
    JAX_NDRAND_BLOCK_SIZE: Number of 32-bit words a KeyStream buffers
        per refill. Default 256.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from jax_ndrand.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_SEED = "JAX_NDRAND_SEED"
ENV_BLOCK_SIZE = "JAX_NDRAND_BLOCK_SIZE"

DEFAULT_BLOCK_SIZE = 256


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    default_seed: int | None = None
    block_size: int = DEFAULT_BLOCK_SIZE


def _parse_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Frozen Settings instance.

    Raises:
        ConfigError: If a variable is set but malformed.

    Examples:
        >>> load_settings({}).block_size
        256
        >>> load_settings({"JAX_NDRAND_SEED": "42"}).default_seed
        42

    """
    if environ is None:
        environ = os.environ

    seed = _parse_int(environ, ENV_SEED)
    if seed is not None and seed < 0:
        raise ConfigError(f"{ENV_SEED} must be non-negative, got {seed}")

    block_size = _parse_int(environ, ENV_BLOCK_SIZE)
    if block_size is None:
        block_size = DEFAULT_BLOCK_SIZE
    elif block_size <= 0:
        raise ConfigError(f"{ENV_BLOCK_SIZE} must be positive, got {block_size}")

    settings = Settings(default_seed=seed, block_size=block_size)
    logger.debug("loaded settings %s", settings)
    return settings
