"""
Tests for single-pass summary statistics.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from math import inf, nan

import numpy as np
import pytest

from pysatl_distview.stats.summary import StatsAccumulator, compute_stats
from pysatl_distview.types import StatsSummary

from .base import BaseStatsTest


class TestComputeStats(BaseStatsTest):
    def test_small_sample(self):
        stats = compute_stats([1, 2, 3, 4, 5])

        assert stats.count == 5
        assert stats.mean == pytest.approx(3.0)
        assert stats.std == pytest.approx(math.sqrt(2.0))
        assert stats.min == 1.0
        assert stats.max == 5.0

    def test_non_finite_values_are_skipped(self):
        stats = compute_stats([1.0, nan, inf, -inf, 3.0])

        assert stats.count == 2
        assert stats.mean == pytest.approx(2.0)
        assert stats.std == pytest.approx(1.0)
        assert (stats.min, stats.max) == (1.0, 3.0)

    @pytest.mark.parametrize(
        "values",
        [[], [nan, inf, -inf], np.array([])],
        ids=["empty_list", "only_non_finite", "empty_array"],
    )
    def test_empty_sentinel(self, values):
        stats = compute_stats(values)

        assert stats == StatsSummary(count=0, mean=0.0, std=0.0, min=inf, max=-inf)
        assert stats.is_empty

    def test_single_value_has_zero_std(self):
        stats = compute_stats([42.0])

        assert stats.count == 1
        assert stats.mean == 42.0
        assert stats.std == 0.0
        assert stats.min == stats.max == 42.0

    def test_large_offset_does_not_cancel(self):
        # deviations -6, -3, 3, 6 around 10 -> population variance 22.5
        stats = compute_stats(1e9 + np.array([4.0, 7.0, 13.0, 16.0]))

        assert stats.mean == pytest.approx(1e9 + 10.0, rel=1e-15)
        assert stats.variance == pytest.approx(22.5, rel=1e-9)

    def test_matches_numpy_population_moments(self, rng):
        data = rng.normal(loc=-3.0, scale=7.0, size=200_003)
        stats = compute_stats(data)

        assert stats.count == data.size
        assert stats.mean == pytest.approx(float(data.mean()), rel=1e-12)
        assert stats.std == pytest.approx(float(data.std(ddof=0)), rel=1e-10)
        assert stats.min == float(data.min())
        assert stats.max == float(data.max())

    def test_accepts_generators(self):
        stats = compute_stats(float(v) for v in range(1, 6))
        assert stats.count == 5
        assert stats.mean == pytest.approx(3.0)

    def test_every_finite_value_is_within_range(self, rng):
        data = rng.standard_cauchy(size=5_000)
        data[::97] = nan
        stats = compute_stats(data)

        finite = data[np.isfinite(data)]
        assert stats.count == finite.size
        assert np.all((finite >= stats.min) & (finite <= stats.max))


class TestStatsAccumulator(BaseStatsTest):
    def test_push_matches_batch(self, rng):
        data = rng.exponential(scale=3.0, size=1_000)

        scalar = StatsAccumulator()
        for v in data:
            scalar.push(v)

        batch = StatsAccumulator()
        batch.push_many(data)

        assert scalar.n == batch.n
        assert scalar.mean == pytest.approx(batch.mean, rel=1e-12)
        assert scalar.variance == pytest.approx(batch.variance, rel=1e-10)
        assert (scalar.min, scalar.max) == (batch.min, batch.max)

    def test_push_skips_non_finite(self):
        acc = StatsAccumulator()
        for v in (nan, 1.0, inf, 2.0, -inf):
            acc.push(v)

        assert acc.n == 2
        assert acc.mean == pytest.approx(1.5)

    def test_merge_equals_single_pass(self, rng):
        left = rng.normal(size=700)
        right = rng.normal(loc=5.0, size=300)

        a = StatsAccumulator()
        a.push_many(left)
        b = StatsAccumulator()
        b.push_many(right)
        a.merge(b)

        expected = compute_stats(np.concatenate([left, right]))
        summary = a.summary()
        assert summary.count == expected.count
        assert summary.mean == pytest.approx(expected.mean, rel=1e-12)
        assert summary.std == pytest.approx(expected.std, rel=1e-12)
        assert (summary.min, summary.max) == (expected.min, expected.max)

    def test_merge_with_empty_is_noop(self):
        a = StatsAccumulator()
        a.push_many(np.array([1.0, 2.0, 3.0]))
        before = a.summary()

        a.merge(StatsAccumulator())

        assert a.summary() == before

    def test_fresh_accumulator_is_empty(self):
        assert StatsAccumulator().summary().is_empty
