"""
Distribution Settings
=====================

Tunable defaults for the composed distribution view.

Notes
-----
- Settings are immutable and passed explicitly; there is no global
  mutable configuration.
- The numeric defaults of the individual functions match
  :data:`DEFAULT_SETTINGS`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import isfinite

from pysatl_distview.constraints import ConstrainedRecord, constraint

DEFAULT_BINS = 30
MIN_BINS = 5
MAX_BINS = 200
FALLBACK_MAX_BINS = 10
CURVE_POINTS = 200
SAMPLE_FOR_RANKS = 200_000
QUANTILE_CLIP = 1e-12
PREVIEW_SAMPLE_SIZE = 20_000
Y_HEADROOM = 1.15


@dataclass(frozen=True, slots=True)
class DistributionSettings(ConstrainedRecord):
    """
    Defaults used when composing a distribution view.

    Parameters
    ----------
    default_bins : int, default 30
        Bin count used when Freedman-Diaconis cannot produce a width.
    min_bins, max_bins : int, default 5, 200
        Clamp applied to the Freedman-Diaconis bin count.
    fallback_max_bins : int, default 10
        Upper clamp for the fewer-than-two-values fallback.
    curve_points : int, default 200
        Number of intervals of the normal curve (``points + 1`` samples).
    sample_for_ranks : int, default 200000
        Size of the rank reference used by quantile transforms.
    quantile_clip : float, default 1e-12
        Distance from 0 and 1 at which uniform ranks are clipped before
        the inverse normal CDF.
    preview_sample_size : int, default 20000
        Reservoir size for thumbnail previews.
    y_headroom : float, default 1.15
        Multiplier applied to the tallest bar or curve point for the y axis.
    """

    default_bins: int = DEFAULT_BINS
    min_bins: int = MIN_BINS
    max_bins: int = MAX_BINS
    fallback_max_bins: int = FALLBACK_MAX_BINS
    curve_points: int = CURVE_POINTS
    sample_for_ranks: int = SAMPLE_FOR_RANKS
    quantile_clip: float = QUANTILE_CLIP
    preview_sample_size: int = PREVIEW_SAMPLE_SIZE
    y_headroom: float = Y_HEADROOM

    @constraint(description="default_bins >= 1")
    def check_default_bins(self) -> bool:
        return self.default_bins >= 1

    @constraint(description="1 <= min_bins <= max_bins")
    def check_bin_clamp(self) -> bool:
        return 1 <= self.min_bins <= self.max_bins

    @constraint(description="min_bins <= fallback_max_bins")
    def check_fallback_clamp(self) -> bool:
        return self.min_bins <= self.fallback_max_bins

    @constraint(description="curve_points >= 1")
    def check_curve_points(self) -> bool:
        return self.curve_points >= 1

    @constraint(description="sample_for_ranks >= 1")
    def check_sample_for_ranks(self) -> bool:
        return self.sample_for_ranks >= 1

    @constraint(description="0 < quantile_clip < 0.5")
    def check_quantile_clip(self) -> bool:
        return 0.0 < self.quantile_clip < 0.5

    @constraint(description="preview_sample_size >= 1")
    def check_preview_sample_size(self) -> bool:
        return self.preview_sample_size >= 1

    @constraint(description="y_headroom is finite and >= 1")
    def check_y_headroom(self) -> bool:
        return isfinite(self.y_headroom) and self.y_headroom >= 1.0


DEFAULT_SETTINGS = DistributionSettings()
"""Settings matching the documented defaults."""


__all__ = [
    "DistributionSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_BINS",
    "MIN_BINS",
    "MAX_BINS",
    "FALLBACK_MAX_BINS",
    "CURVE_POINTS",
    "SAMPLE_FOR_RANKS",
    "QUANTILE_CLIP",
    "PREVIEW_SAMPLE_SIZE",
    "Y_HEADROOM",
]
