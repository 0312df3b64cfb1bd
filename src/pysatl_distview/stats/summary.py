"""
Single-pass Summary Statistics
==============================

Welford's online algorithm for count, mean, population standard deviation,
minimum and maximum.

Notes
-----
- Non-finite values (NaN, ±inf) are skipped.
- Array chunks are folded in with the pairwise update of Chan, Golub and
  LeVeque, which combines two Welford states exactly. The result matches
  the element-by-element recurrence up to rounding and keeps its freedom
  from catastrophic cancellation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, isfinite, sqrt
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distview.types import StatsSummary, as_float_array, finite_only

if TYPE_CHECKING:
    from pysatl_distview.types import Number, NumericArray, Values

CHUNK_SIZE = 1 << 16


class StatsAccumulator:
    """
    Running Welford state.

    Attributes
    ----------
    n : int
        Number of finite values seen.
    mean : float
        Running mean.
    m2 : float
        Running sum of squared deviations from the mean.
    min, max : float
        Running extrema (``+inf``/``-inf`` while empty).
    """

    __slots__ = ("n", "mean", "m2", "min", "max")

    def __init__(self) -> None:
        self.n = 0
        self.mean = 0.0
        self.m2 = 0.0
        self.min = inf
        self.max = -inf

    def push(self, value: Number) -> None:
        """Add a single observation; non-finite values are ignored."""
        v = float(value)
        if not isfinite(v):
            return
        self.n += 1
        delta = v - self.mean
        self.mean += delta / self.n
        delta2 = v - self.mean
        self.m2 += delta * delta2
        if v < self.min:
            self.min = v
        if v > self.max:
            self.max = v

    def push_many(self, values: NumericArray) -> None:
        """Add a batch of observations; non-finite values are ignored."""
        finite = finite_only(np.asarray(values, dtype=np.float64).ravel())
        for start in range(0, finite.size, CHUNK_SIZE):
            chunk = finite[start : start + CHUNK_SIZE]
            chunk_mean = float(chunk.mean())
            centered = chunk - chunk_mean
            self._combine(
                chunk.size,
                chunk_mean,
                float(np.dot(centered, centered)),
                float(chunk.min()),
                float(chunk.max()),
            )

    def merge(self, other: StatsAccumulator) -> None:
        """Fold another accumulator's state into this one."""
        self._combine(other.n, other.mean, other.m2, other.min, other.max)

    def _combine(self, n_b: int, mean_b: float, m2_b: float, min_b: float, max_b: float) -> None:
        if n_b == 0:
            return
        n_a = self.n
        n = n_a + n_b
        delta = mean_b - self.mean
        self.mean += delta * n_b / n
        self.m2 += m2_b + delta * delta * n_a * n_b / n
        self.n = n
        self.min = min(self.min, min_b)
        self.max = max(self.max, max_b)

    @property
    def variance(self) -> float:
        """Population variance (``0`` for fewer than two values)."""
        return self.m2 / self.n if self.n > 1 else 0.0

    def summary(self) -> StatsSummary:
        """Freeze the current state into a :class:`StatsSummary`."""
        if self.n == 0:
            return StatsSummary()
        return StatsSummary(
            count=self.n,
            mean=self.mean,
            std=sqrt(self.variance),
            min=self.min,
            max=self.max,
        )


def compute_stats(values: Values) -> StatsSummary:
    """
    Compute summary statistics in a single pass.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations; non-finite entries are skipped.

    Returns
    -------
    StatsSummary
        Count, mean, population std and extrema of the finite values.
        Zero finite values give the empty sentinel
        ``count=0, mean=0, std=0, min=+inf, max=-inf``.
    """
    acc = StatsAccumulator()
    acc.push_many(as_float_array(values))
    return acc.summary()


__all__ = [
    "StatsAccumulator",
    "compute_stats",
]
