"""Tests for jax_ndrand.distributions module."""

from __future__ import annotations

import math

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from helpers import Counter, ScriptedRng
from jax_ndrand.distributions import (
    F32,
    Distribution,
    IndependentDistribution,
    Normal,
    Uniform,
    UniformInt,
    is_independent,
    truncate_to_f32,
)
from jax_ndrand.errors import InvalidParameterError
from jax_ndrand.rng import KeyStream

MAX_WORDS = [0xFFFFFFFF] * 8


class TestDistributionVariants:
    """Tests for the Distribution / IndependentDistribution split."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            Distribution()
        with pytest.raises(TypeError):
            IndependentDistribution()

    def test_default_dtype(self):
        assert Counter.dtype == np.float64

    def test_is_independent(self):
        assert is_independent(Uniform())
        assert is_independent(Normal())
        assert not is_independent(Counter())

    def test_sample_delegates_to_ind_sample(self):
        dist = Uniform(0.0, 1.0)
        assert dist.sample(KeyStream(1)) == dist.ind_sample(KeyStream(1))


class TestTruncateToF32:
    """Tests for truncate_to_f32."""

    def test_exact_values_unchanged(self):
        for value in (0.0, 0.5, -2.25, 1024.0):
            assert float(truncate_to_f32(value)) == value

    def test_returns_float32(self):
        assert isinstance(truncate_to_f32(0.1), np.float32)

    def test_truncates_where_rounding_goes_up(self):
        # float32 rounding of 0.1 lands above 0.1.
        assert float(np.float32(0.1)) > 0.1
        expected = np.nextafter(np.float32(0.1), np.float32(0.0))
        assert truncate_to_f32(0.1) == expected

    def test_keeps_rounding_that_goes_down(self):
        value = 1.0 + 2.0**-30
        assert truncate_to_f32(value) == np.float32(1.0)

    def test_negative_truncates_toward_zero(self):
        assert truncate_to_f32(-0.1) == -truncate_to_f32(0.1)

    def test_overflow_becomes_infinite(self):
        assert truncate_to_f32(1e300) == np.inf
        assert truncate_to_f32(-1e300) == -np.inf

    def test_infinities_and_nan(self):
        assert truncate_to_f32(math.inf) == np.inf
        assert truncate_to_f32(-math.inf) == -np.inf
        assert math.isnan(truncate_to_f32(math.nan))

    def test_tiny_values_truncate_to_zero(self):
        assert truncate_to_f32(1e-50) == np.float32(0.0)

    @given(st.floats(min_value=-3e38, max_value=3e38, allow_nan=False))
    @settings(max_examples=200)
    def test_never_increases_magnitude(self, value):
        """Property: |truncate(x)| <= |x| and within one float32 ulp."""
        narrowed = float(truncate_to_f32(value))
        assert abs(narrowed) <= abs(value)
        assert abs(value - narrowed) <= float(np.spacing(np.float32(abs(narrowed))))


class TestF32:
    """Tests for the F32 precision adapter."""

    def test_dtype(self):
        assert F32(Uniform()).dtype == np.float32

    def test_independent_inner_gives_independent_adapter(self):
        adapter = F32(Uniform())
        assert isinstance(adapter, F32)
        assert is_independent(adapter)

    def test_stateful_inner_gives_stateful_adapter(self):
        adapter = F32(Counter())
        assert isinstance(adapter, F32)
        assert not is_independent(adapter)
        assert not hasattr(adapter, "ind_sample")

    def test_matches_truncated_inner_sample(self):
        inner_rng, adapter_rng = KeyStream(42), KeyStream(42)
        inner = Uniform(0.0, 10.0)
        adapter = F32(Uniform(0.0, 10.0))
        for _ in range(20):
            assert adapter.sample(adapter_rng) == truncate_to_f32(inner.sample(inner_rng))
        # Both consumed the same number of words.
        assert adapter_rng.next_u32() == inner_rng.next_u32()

    def test_ind_sample_matches_inner(self):
        adapter = F32(Normal(1.0, 2.0))
        expected = truncate_to_f32(Normal(1.0, 2.0).ind_sample(KeyStream(3)))
        assert adapter.ind_sample(KeyStream(3)) == expected

    def test_stateful_path_follows_inner(self):
        inner, adapter = Normal(), F32(Normal())
        inner_rng, adapter_rng = KeyStream(8), KeyStream(8)
        for _ in range(5):
            assert adapter.sample(adapter_rng) == truncate_to_f32(inner.sample(inner_rng))

    def test_word_consumption_matches_inner(self):
        inner_rng = ScriptedRng(MAX_WORDS)
        adapter_rng = ScriptedRng(MAX_WORDS)
        Uniform().sample(inner_rng)
        F32(Uniform()).sample(adapter_rng)
        assert adapter_rng.consumed == inner_rng.consumed == 2

    def test_equality_and_repr(self):
        assert F32(Uniform(0.0, 2.0)) == F32(Uniform(0.0, 2.0))
        assert F32(Uniform(0.0, 2.0)) != F32(Uniform(0.0, 3.0))
        assert repr(F32(Uniform())) == "F32(Uniform(low=0.0, high=1.0))"

    def test_unhashable_like_stateful_inner(self):
        with pytest.raises(TypeError):
            hash(Normal())
        with pytest.raises(TypeError):
            hash(F32(Normal()))


class TestUniform:
    """Tests for Uniform."""

    def test_range(self):
        rng = KeyStream(0)
        dist = Uniform(-1.0, 1.0)
        values = [dist.sample(rng) for _ in range(1000)]
        assert min(values) >= -1.0
        assert max(values) < 1.0

    def test_lower_bound_reached_by_zero_words(self):
        assert Uniform(2.0, 3.0).sample(ScriptedRng([0, 0])) == 2.0

    def test_upper_bound_excluded(self):
        # 1.0 + 0.5 * (1 - 2**-53) rounds to 1.5 in double precision.
        value = Uniform(1.0, 1.5).sample(ScriptedRng(MAX_WORDS))
        assert value < 1.5
        assert value == math.nextafter(1.5, 1.0)

    def test_coerces_to_float(self):
        dist = Uniform(0, 10)
        assert isinstance(dist.low, float)
        assert isinstance(dist.high, float)

    @pytest.mark.parametrize("low, high", [(1.0, 1.0), (2.0, 1.0), (0.0, math.inf), (math.nan, 1.0)])
    def test_invalid(self, low, high):
        with pytest.raises(InvalidParameterError):
            Uniform(low, high)

    def test_approximate_mean(self):
        rng = KeyStream(1)
        dist = Uniform(0.0, 10.0)
        values = [dist.sample(rng) for _ in range(5000)]
        assert abs(sum(values) / len(values) - 5.0) < 0.2


class TestNormal:
    """Tests for Normal."""

    def test_approximate_moments(self):
        rng = KeyStream(0)
        dist = Normal(0.0, 1.0)
        values = np.array([dist.sample(rng) for _ in range(10000)])
        assert abs(float(values.mean())) < 0.1
        assert abs(float(values.std()) - 1.0) < 0.1

    def test_location_and_scale(self):
        rng = KeyStream(2)
        dist = Normal(5.0, 0.5)
        values = np.array([dist.ind_sample(rng) for _ in range(5000)])
        assert abs(float(values.mean()) - 5.0) < 0.05
        assert abs(float(values.std()) - 0.5) < 0.05

    def test_zero_std(self):
        dist = Normal(3.0, 0.0)
        rng = KeyStream(0)
        assert all(dist.sample(rng) == 3.0 for _ in range(10))

    def test_stateful_sample_caches_pair(self):
        rng = ScriptedRng(MAX_WORDS * 2)
        dist = Normal()
        dist.sample(rng)
        assert rng.consumed == 4
        dist.sample(rng)
        assert rng.consumed == 4
        dist.sample(rng)
        assert rng.consumed == 8

    def test_ind_sample_retains_nothing(self):
        rng = ScriptedRng(MAX_WORDS * 2)
        dist = Normal()
        dist.ind_sample(rng)
        dist.ind_sample(rng)
        assert rng.consumed == 8

    def test_ind_sample_is_first_of_pair(self):
        assert Normal().ind_sample(KeyStream(4)) == Normal().sample(KeyStream(4))

    def test_cache_not_part_of_equality(self):
        used = Normal(1.0, 2.0)
        used.sample(KeyStream(0))
        assert used == Normal(1.0, 2.0)

    @pytest.mark.parametrize("mean, std", [(0.0, -1.0), (math.inf, 1.0), (0.0, math.nan)])
    def test_invalid(self, mean, std):
        with pytest.raises(InvalidParameterError):
            Normal(mean, std)


class TestUniformInt:
    """Tests for UniformInt."""

    def test_dtype(self):
        assert UniformInt(0, 3).dtype == np.int64

    def test_range_and_coverage(self):
        rng = KeyStream(0)
        dist = UniformInt(1, 7)
        values = {dist.sample(rng) for _ in range(500)}
        assert values == {1, 2, 3, 4, 5, 6}

    def test_negative_range(self):
        rng = KeyStream(1)
        dist = UniformInt(-5, -2)
        assert all(-5 <= dist.sample(rng) < -2 for _ in range(100))

    def test_rejects_top_bucket(self):
        # 2**64 - 1 falls outside the largest multiple of 3; it is redrawn.
        rng = ScriptedRng([0xFFFFFFFF, 0xFFFFFFFF, 0, 5])
        assert UniformInt(10, 13).sample(rng) == 10 + 5 % 3
        assert rng.consumed == 4

    def test_full_int64_range(self):
        info = np.iinfo(np.int64)
        dist = UniformInt(int(info.min), int(info.max) + 1)
        value = dist.sample(KeyStream(0))
        assert info.min <= value <= info.max

    @pytest.mark.parametrize("low, high", [(3, 3), (4, 1), (0, 2**63 + 1), (0.5, 2)])
    def test_invalid(self, low, high):
        with pytest.raises(InvalidParameterError):
            UniformInt(low, high)

    @given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=1, max_value=1000))
    @settings(max_examples=20, deadline=None)
    def test_in_range_property(self, low, span):
        """Property: every draw lies in [low, low + span)."""
        rng = KeyStream(span, block_size=16)
        dist = UniformInt(low, low + span)
        for _ in range(10):
            assert low <= dist.sample(rng) < low + span
