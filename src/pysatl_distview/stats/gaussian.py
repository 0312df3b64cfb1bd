"""
Gaussian density and the fitted normal overlay curve.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isfinite
from typing import cast, overload

import numpy as np

from pysatl_distview.settings import CURVE_POINTS
from pysatl_distview.types import CurvePoint, Number, NumericArray

_INV_SQRT_2PI = 1.0 / np.sqrt(2.0 * np.pi)


@overload
def gaussian_pdf(x: Number, mean: float, std: float) -> float: ...
@overload
def gaussian_pdf(x: NumericArray, mean: float, std: float) -> NumericArray: ...


def gaussian_pdf(x: Number | NumericArray, mean: float, std: float) -> float | NumericArray:
    """
    Normal probability density.

    Parameters
    ----------
    x : Number or NumericArray
        Point(s) at which to evaluate the density.
    mean : float
        Mean of the distribution.
    std : float
        Standard deviation of the distribution.

    Returns
    -------
    float or NumericArray
        ``exp(-0.5 * ((x - mean) / std) ** 2) / (std * sqrt(2π))``, or zeros
        when ``std <= 0`` (degenerate, zero-variance data).
    """
    arr = np.asarray(x, dtype=np.float64)
    if not std > 0:
        result = np.zeros_like(arr)
    else:
        z = (arr - mean) / std
        result = (_INV_SQRT_2PI / std) * np.exp(-0.5 * z * z)

    if np.ndim(arr) == 0:
        return float(result)
    return cast(NumericArray, result)


def build_normal_curve(
    domain_min: float,
    domain_max: float,
    mean: float,
    std: float,
    points: int = CURVE_POINTS,
) -> tuple[CurvePoint, ...]:
    """
    Sample the normal density across a plotting domain.

    Parameters
    ----------
    domain_min, domain_max : float
        Ends of the domain (both included).
    mean, std : float
        Parameters of the fitted normal distribution.
    points : int, default 200
        Number of intervals; ``points + 1`` samples are produced.

    Returns
    -------
    tuple[CurvePoint, ...]
        Evenly spaced ``(x, pdf(x))`` pairs.

    Raises
    ------
    ValueError
        If ``points`` is smaller than one.
    """
    if points < 1:
        raise ValueError(f"points must be >= 1, got {points}")

    # domains wider than the float range are sampled at half scale
    scale = 1.0 if isfinite(domain_max - domain_min) else 0.5
    step = (domain_max * scale - domain_min * scale) / points
    xs = (domain_min * scale + np.arange(points + 1, dtype=np.float64) * step) / scale
    ys = gaussian_pdf(xs, mean, std)
    return tuple(CurvePoint(x=float(x), y=float(y)) for x, y in zip(xs, ys, strict=True))


__all__ = [
    "gaussian_pdf",
    "build_normal_curve",
]
