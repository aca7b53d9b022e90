"""Pytest configuration."""

from __future__ import annotations

import pytest

from jax_ndrand.config import ENV_BLOCK_SIZE, ENV_SEED
from jax_ndrand.rng import reset_default_rng


@pytest.fixture(autouse=True)
def clean_default_rng(monkeypatch):
    """Isolate tests from each other's default RNG and environment."""
    monkeypatch.delenv(ENV_SEED, raising=False)
    monkeypatch.delenv(ENV_BLOCK_SIZE, raising=False)
    reset_default_rng()
    yield
    reset_default_rng()
