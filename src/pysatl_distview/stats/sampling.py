"""
Reservoir Sampling
==================

Uniform fixed-size samples from arbitrarily long sequences (Algorithm R).

- :class:`ReservoirSampler`: streaming sampler for inputs of unknown length.
- :func:`reservoir_sample`: array sampler that draws every replacement
  index at once.

Notes
-----
- The random source is always an explicit :class:`numpy.random.Generator`
  (or a seed for :func:`numpy.random.default_rng`). ``None`` creates a fresh
  generator; the module never touches a global random state.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_distview.logging import get_logger
from pysatl_distview.types import as_float_array

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_distview.types import Number, NumericArray, Values

type RandomSource = np.random.Generator | int | None
"""A generator, a seed, or ``None`` for a fresh OS-seeded generator."""

logger = get_logger(__name__)


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return ``rng`` itself when it is a generator, else ``default_rng(rng)``."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class ReservoirSampler:
    """
    Streaming Algorithm R sampler.

    Parameters
    ----------
    k : int
        Reservoir capacity.
    rng : numpy.random.Generator or int or None, optional
        Random source.

    Attributes
    ----------
    k : int
        Reservoir capacity.
    seen : int
        Number of values pushed so far.

    Raises
    ------
    ValueError
        If ``k`` is negative.
    """

    __slots__ = ("k", "seen", "_rng", "_reservoir")

    def __init__(self, k: int, rng: RandomSource = None) -> None:
        if k < 0:
            raise ValueError(f"Reservoir size must be non-negative, got {k}")
        self.k = k
        self.seen = 0
        self._rng = make_rng(rng)
        self._reservoir: list[float] = []

    def __len__(self) -> int:
        return len(self._reservoir)

    def push(self, value: Number) -> None:
        """Offer one value to the reservoir."""
        i = self.seen
        self.seen += 1
        if i < self.k:
            self._reservoir.append(float(value))
            return
        j = int(self._rng.integers(0, i + 1))
        if j < self.k:
            self._reservoir[j] = float(value)

    def extend(self, values: Iterable[Number]) -> None:
        """Offer every value of ``values`` in order."""
        for v in values:
            self.push(v)

    @property
    def sample(self) -> NumericArray:
        """Copy of the current reservoir."""
        return np.array(self._reservoir, dtype=np.float64)


def reservoir_sample(values: Values, k: int, rng: RandomSource = None) -> NumericArray:
    """
    Draw a uniform sample of size ``min(k, n)`` without replacement.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Population (all entries, including non-finite ones, are eligible).
    k : int
        Target sample size.
    rng : numpy.random.Generator or int or None, optional
        Random source.

    Returns
    -------
    NumericArray
        All values (copied) when ``n <= k``; otherwise ``k`` values where each
        original element was kept with probability ``k / n``.

    Raises
    ------
    ValueError
        If ``k`` is negative.

    Notes
    -----
    Equivalent to the sequential loop: the reservoir starts with the first
    ``k`` values and, for every ``i >= k``, ``j ~ U{0..i}`` replaces slot
    ``j`` when ``j < k``. All ``j`` are drawn in one call and, for each slot,
    only the last replacement is applied.
    """
    if k < 0:
        raise ValueError(f"Reservoir size must be non-negative, got {k}")

    arr = as_float_array(values)
    n = arr.size
    if n <= k:
        return arr

    generator = make_rng(rng)
    sample = arr[:k].copy()
    if k == 0:
        return sample

    positions = np.arange(k, n)
    slots = generator.integers(0, positions + 1)
    hits = slots < k
    hit_slots = slots[hits]
    hit_positions = positions[hits]

    # last write wins: keep the final replacement of every slot
    rev_slots = hit_slots[::-1]
    unique_slots, first_in_reversed = np.unique(rev_slots, return_index=True)
    sample[unique_slots] = arr[hit_positions[::-1][first_in_reversed]]

    logger.debug("reservoir_sampled", population=n, k=k, replacements=int(hits.sum()))
    return sample


__all__ = [
    "RandomSource",
    "ReservoirSampler",
    "make_rng",
    "reservoir_sample",
]
