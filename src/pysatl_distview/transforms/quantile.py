"""
Rank-based Transforms
=====================

- :func:`transform_quantile_uniform`: empirical CDF of each value.
- :func:`transform_quantile_normal`: empirical CDF mapped through the
  inverse normal CDF (quantile normalization).

Notes
-----
Inputs with more finite values than ``sample_for_ranks`` are ranked against a
reservoir sample of that size. This bounds the sort to ``sample_for_ranks``
elements at the price of an approximate rank.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_distview.logging import get_logger
from pysatl_distview.settings import QUANTILE_CLIP, SAMPLE_FOR_RANKS
from pysatl_distview.stats.probit import norm_inv
from pysatl_distview.stats.sampling import reservoir_sample
from pysatl_distview.types import as_float_array, finite_only

if TYPE_CHECKING:
    from pysatl_distview.stats.sampling import RandomSource
    from pysatl_distview.types import NumericArray, Values

logger = get_logger(__name__)


def transform_quantile_uniform(
    values: Values,
    sample_for_ranks: int = SAMPLE_FOR_RANKS,
    rng: RandomSource = None,
) -> NumericArray:
    """
    Replace each finite value by its empirical rank in ``(0, 1]``.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations; non-finite entries are dropped.
    sample_for_ranks : int, default 200000
        Largest rank reference.
    rng : numpy.random.Generator or int or None, optional
        Random source for the reference sample.

    Returns
    -------
    NumericArray
        ``count(reference <= v) / len(reference)`` for every finite ``v``,
        in input order.

    Raises
    ------
    ValueError
        If ``sample_for_ranks`` is smaller than one.
    """
    if sample_for_ranks < 1:
        raise ValueError(f"sample_for_ranks must be >= 1, got {sample_for_ranks}")

    finite = finite_only(as_float_array(values))
    if finite.size == 0:
        return finite

    reference = finite
    if finite.size > sample_for_ranks:
        reference = reservoir_sample(finite, sample_for_ranks, rng)
        logger.debug(
            "rank_reference_sampled", population=finite.size, reference=sample_for_ranks
        )
    reference = np.sort(reference)

    ranks = np.searchsorted(reference, finite, side="right")
    return ranks / reference.size


def transform_quantile_normal(
    values: Values,
    sample_for_ranks: int = SAMPLE_FOR_RANKS,
    rng: RandomSource = None,
    clip: float = QUANTILE_CLIP,
) -> NumericArray:
    """
    Quantile-normalize the finite values.

    Uniform ranks from :func:`transform_quantile_uniform` are clipped to
    ``[clip, 1 - clip]`` and passed through
    :func:`~pysatl_distview.stats.probit.norm_inv`; non-finite results are
    dropped.
    """
    uniform = transform_quantile_uniform(values, sample_for_ranks, rng)
    z = norm_inv(np.clip(uniform, clip, 1 - clip))
    return z[np.isfinite(z)]


__all__ = [
    "transform_quantile_uniform",
    "transform_quantile_normal",
]
