"""
Statistics subpackage

Numerical building blocks of the distribution view:

- single-pass summary statistics (:mod:`.summary`);
- Freedman-Diaconis binning and histograms (:mod:`.binning`);
- normal density and overlay curve (:mod:`.gaussian`);
- reservoir sampling (:mod:`.sampling`);
- inverse normal CDF (:mod:`.probit`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .binning import compute_histogram, suggest_bin_count
from .gaussian import build_normal_curve, gaussian_pdf
from .probit import norm_inv
from .sampling import RandomSource, ReservoirSampler, make_rng, reservoir_sample
from .summary import StatsAccumulator, compute_stats

__all__ = [
    # summary
    "StatsAccumulator",
    "compute_stats",
    # binning
    "suggest_bin_count",
    "compute_histogram",
    # gaussian
    "gaussian_pdf",
    "build_normal_curve",
    # sampling
    "RandomSource",
    "ReservoirSampler",
    "make_rng",
    "reservoir_sample",
    # probit
    "norm_inv",
]
