"""
Histogram Binning
=================

- :func:`suggest_bin_count`: Freedman-Diaconis bin count with clamping.
- :func:`compute_histogram`: density-normalized equal-width histogram.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import ceil, floor, isfinite
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distview.logging import get_logger
from pysatl_distview.settings import DEFAULT_BINS, FALLBACK_MAX_BINS, MAX_BINS, MIN_BINS
from pysatl_distview.types import HistogramBin, as_float_array, finite_only

if TYPE_CHECKING:
    from pysatl_distview.types import Values

logger = get_logger(__name__)


def suggest_bin_count(
    values: Values,
    default_bins: int = DEFAULT_BINS,
    *,
    min_bins: int = MIN_BINS,
    max_bins: int = MAX_BINS,
    fallback_max_bins: int = FALLBACK_MAX_BINS,
) -> int:
    """
    Suggest a histogram bin count with the Freedman-Diaconis rule.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations; non-finite entries are ignored.
    default_bins : int, default 30
        Returned when the rule yields no usable width (e.g. ``IQR == 0``).
    min_bins, max_bins : int, default 5, 200
        Clamp for the rule's result.
    fallback_max_bins : int, default 10
        With fewer than two finite values the result is
        ``max(min_bins, min(fallback_max_bins, default_bins))``.

    Returns
    -------
    int
        Suggested bin count.

    Notes
    -----
    Quartiles use nearest-rank indexing ``floor(p * (n - 1))`` on the sorted
    finite values; the bin width is ``2 * IQR / cbrt(n)``.
    """
    finite = np.sort(finite_only(as_float_array(values)))
    n = finite.size
    if n < 2:
        bins = max(min_bins, min(fallback_max_bins, default_bins))
        logger.debug("bin_count_fallback", reason="too_few_values", count=n, bins=bins)
        return bins

    q1 = float(finite[floor(0.25 * (n - 1))])
    q3 = float(finite[floor(0.75 * (n - 1))])
    bin_width = 2.0 * (q3 - q1) / float(np.cbrt(n))
    if not isfinite(bin_width) or bin_width <= 0:
        logger.debug("bin_count_fallback", reason="zero_iqr", count=n, bins=default_bins)
        return default_bins

    span = float(finite[-1]) - float(finite[0])
    raw = span / bin_width
    if not isfinite(raw):
        # the span overflows the float range
        return max_bins
    return max(min_bins, min(max_bins, ceil(raw)))


def compute_histogram(values: Values, bin_count: int = DEFAULT_BINS) -> tuple[HistogramBin, ...]:
    """
    Bin observations into equal-width, density-normalized buckets.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations; non-finite entries are not binned.
    bin_count : int, default 30
        Number of bins spanning ``[min, max]`` of the finite values.

    Returns
    -------
    tuple[HistogramBin, ...]
        Contiguous bins with ``bins[i].end == bins[i + 1].start``. The
        maximum lands in the last bin. Empty input gives an empty tuple.
        When nothing is finite, or every finite value is equal, a single
        degenerate bin of zero width is returned with ``count`` equal to the
        total input length and ``density == 1``. A span too narrow to split
        into ``bin_count`` representable widths gives one bin over
        ``[min, max]`` holding every finite value, also with ``density == 1``.

    Raises
    ------
    ValueError
        If ``bin_count`` is smaller than one.
    """
    if bin_count < 1:
        raise ValueError(f"bin_count must be >= 1, got {bin_count}")

    arr = as_float_array(values)
    if arr.size == 0:
        return ()

    finite = finite_only(arr)
    lo = float(finite.min()) if finite.size else 0.0
    hi = float(finite.max()) if finite.size else 0.0
    if finite.size == 0 or lo == hi:
        logger.debug("histogram_degenerate", point=lo, total=arr.size, finite=finite.size)
        return (HistogramBin(x=lo, start=lo, end=lo, count=int(arr.size), density=1.0),)

    # spans wider than the float range are binned at half scale, which is exact
    scale = 1.0 if isfinite(hi - lo) else 0.5
    step = (hi * scale - lo * scale) / bin_count
    n = finite.size
    if not step > 0:
        logger.debug("histogram_degenerate", point=lo, total=arr.size, finite=n, span=hi - lo)
        return (HistogramBin(x=lo + (hi - lo) / 2, start=lo, end=hi, count=n, density=1.0),)

    idx = np.floor((finite * scale - lo * scale) / step).astype(np.int64)
    np.clip(idx, 0, bin_count - 1, out=idx)
    counts = np.bincount(idx, minlength=bin_count)

    # shared edges keep neighbouring bins exactly contiguous
    positions = np.arange(bin_count + 1, dtype=np.float64)
    edges = (lo * scale + positions * step) / scale
    edges[0] = lo
    edges[-1] = hi
    centers = (lo * scale + (positions[:-1] + 0.5) * step) / scale
    with np.errstate(over="ignore"):
        densities = counts / n / step * scale

    return tuple(
        HistogramBin(
            x=float(centers[i]),
            start=float(edges[i]),
            end=float(edges[i + 1]),
            count=int(counts[i]),
            density=float(densities[i]),
        )
        for i in range(bin_count)
    )


__all__ = [
    "suggest_bin_count",
    "compute_histogram",
]
