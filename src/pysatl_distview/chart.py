"""
Chart payload helpers.

Data preparation for a histogram chart with a normal-density overlay: the
combined series, axis ranges and the summary caption. Nothing here renders.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import isfinite
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distview.settings import DEFAULT_SETTINGS, DistributionSettings
from pysatl_distview.stats.gaussian import gaussian_pdf

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_distview.types import Domain, HistogramBin, StatsSummary


@dataclass(frozen=True, slots=True)
class ChartPoint:
    """
    One bar of the chart with the overlay value at its center.

    Parameters
    ----------
    x : float
        Bin center.
    density : float
        Bar height.
    curve : float
        Normal density at ``x``.
    """

    x: float
    density: float
    curve: float


def chart_points(histogram: Sequence[HistogramBin], stats: StatsSummary) -> tuple[ChartPoint, ...]:
    """Pair every bin with the fitted normal density at its center."""
    centers = np.fromiter((b.x for b in histogram), dtype=np.float64, count=len(histogram))
    curve = gaussian_pdf(centers, stats.mean, stats.std)
    return tuple(
        ChartPoint(x=b.x, density=b.density, curve=float(c))
        for b, c in zip(histogram, curve, strict=True)
    )


def y_axis_max(
    points: Sequence[ChartPoint],
    fixed_y_max: float | None = None,
    *,
    settings: DistributionSettings = DEFAULT_SETTINGS,
) -> float:
    """
    Upper end of the y axis.

    Parameters
    ----------
    points : Sequence[ChartPoint]
        Chart series.
    fixed_y_max : float, optional
        Used as is when finite and non-zero, so that several charts share
        one scale. ``None``, ``0`` and non-finite values mean "not set".
    settings : DistributionSettings, optional
        Supplies ``y_headroom``, the multiplier applied to the tallest bar
        or curve value.
    """
    if fixed_y_max and isfinite(fixed_y_max):
        return fixed_y_max
    tallest = max((max(p.density, p.curve) for p in points), default=0.0)
    return max(0.0, tallest) * settings.y_headroom


def x_axis_domain(
    domain: Domain, fixed_domain: tuple[float, float] | None = None
) -> tuple[float, float]:
    """``fixed_domain`` when both of its ends are finite, else the data domain."""
    if fixed_domain is not None and isfinite(fixed_domain[0]) and isfinite(fixed_domain[1]):
        return fixed_domain
    return domain.min, domain.max


def stats_caption(stats: StatsSummary, digits: int = 3) -> str:
    """Summary line such as ``"μ=3.000 σ=1.414 n=5"``."""
    return f"μ={stats.mean:.{digits}f} σ={stats.std:.{digits}f} n={stats.count}"


__all__ = [
    "ChartPoint",
    "chart_points",
    "y_axis_max",
    "x_axis_domain",
    "stats_caption",
]
