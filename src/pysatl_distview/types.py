"""
Core Type Definitions
=====================

Value objects and type aliases shared by the statistics, transform and
composition layers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from math import inf, isfinite
from typing import Any

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for the float arrays produced by this package."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

Values = Iterable[Number] | NDArray[Any]
"""Anything that can be turned into a 1D float array of observations."""


class TransformMethod(StrEnum):
    """
    Closed set of value transforms.

    Attributes
    ----------
    LOG : str
        Logarithm with a selectable base and offset.
    SQRT : str
        Square root with an offset.
    BOX_COX : str
        Box-Cox power transform (strictly positive inputs).
    YEO_JOHNSON : str
        Yeo-Johnson power transform (any real input).
    QUANTILE_UNIFORM : str
        Empirical rank mapped to ``[0, 1]``.
    QUANTILE_NORMAL : str
        Empirical rank mapped through the inverse normal CDF.
    """

    LOG = "log"
    SQRT = "sqrt"
    BOX_COX = "box_cox"
    YEO_JOHNSON = "yeo_johnson"
    QUANTILE_UNIFORM = "quantile_uniform"
    QUANTILE_NORMAL = "quantile_normal"


class LogBase(StrEnum):
    """Logarithm bases supported by the log transform."""

    E = "e"
    TEN = "10"
    TWO = "2"


@dataclass(frozen=True, slots=True)
class StatsSummary:
    """
    Summary statistics over the finite entries of a sample.

    Parameters
    ----------
    count : int
        Number of finite values.
    mean : float
        Arithmetic mean.
    std : float
        Population standard deviation.
    min : float
        Smallest finite value, ``+inf`` when ``count == 0``.
    max : float
        Largest finite value, ``-inf`` when ``count == 0``.

    Notes
    -----
    The empty summary is a sentinel rather than an error: callers must
    check :attr:`is_empty` before using ``min``/``max`` as a plot domain.
    """

    count: int = 0
    mean: float = 0.0
    std: float = 0.0
    min: float = inf
    max: float = -inf

    @property
    def is_empty(self) -> bool:
        """Whether no finite value contributed to the summary."""
        return self.count == 0

    @property
    def variance(self) -> float:
        """Population variance."""
        return self.std**2


@dataclass(frozen=True, slots=True)
class HistogramBin:
    """
    One histogram bucket.

    Parameters
    ----------
    x : float
        Bin center.
    start : float
        Left edge.
    end : float
        Right edge (equal to the next bin's ``start``).
    count : int
        Number of values in the bin.
    density : float
        ``count / (n * width)``, so densities integrate to one.
    """

    x: float
    start: float
    end: float
    count: int
    density: float

    @property
    def width(self) -> float:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class CurvePoint:
    """A single ``(x, y)`` sample of a curve."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Domain:
    """Closed plotting interval ``[min, max]``."""

    min: float
    max: float

    @property
    def is_finite(self) -> bool:
        return isfinite(self.min) and isfinite(self.max)


@dataclass(frozen=True, slots=True)
class DistributionData:
    """
    Everything a chart needs to draw a histogram with a normal overlay.

    Parameters
    ----------
    histogram : tuple[HistogramBin, ...]
        Density-normalized bins.
    normal_curve : tuple[CurvePoint, ...]
        Fitted normal density sampled across ``domain``.
    stats : StatsSummary
        Summary of the finite input values.
    domain : Domain
        X range covered by the histogram.
    """

    histogram: tuple[HistogramBin, ...]
    normal_curve: tuple[CurvePoint, ...]
    stats: StatsSummary
    domain: Domain


def as_float_array(values: Values) -> NumericArray:
    """
    Convert observations into a flat ``float64`` array.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations. Generators are consumed.

    Returns
    -------
    NumericArray
        1D array, a fresh copy when ``values`` was already an array.
    """
    if isinstance(values, np.ndarray):
        return np.array(values, dtype=np.float64, copy=True).ravel()
    return np.fromiter((float(v) for v in values), dtype=np.float64)


def finite_only(arr: NumericArray) -> NumericArray:
    """Return the finite entries of ``arr``."""
    return arr[np.isfinite(arr)]


__all__ = [
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "Values",
    "TransformMethod",
    "LogBase",
    "StatsSummary",
    "HistogramBin",
    "CurvePoint",
    "Domain",
    "DistributionData",
    "as_float_array",
    "finite_only",
]
