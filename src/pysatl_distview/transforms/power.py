"""
Elementwise Value Transforms
============================

Log, square-root, Box-Cox and Yeo-Johnson transforms.

Notes
-----
- Values outside a transform's domain, and non-finite values, are dropped
  from the output instead of raising, so the output may be shorter than
  the input. Order of the kept values is preserved.
- No parameter is estimated from the data.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distview.types import LogBase, as_float_array

if TYPE_CHECKING:
    from pysatl_distview.transforms.parameters import Lambda
    from pysatl_distview.types import NumericArray, Values

LAMBDA_EPS = 1e-12
"""Exponents closer to the singular value than this use the log limit."""

_LOG_FUNCS = {
    LogBase.E: np.log,
    LogBase.TEN: np.log10,
    LogBase.TWO: np.log2,
}


def transform_log(
    values: Values, base: LogBase | str = LogBase.E, offset: float = 0.0
) -> NumericArray:
    """
    ``log_base(v + offset)`` for every finite ``v + offset > 0``.

    Raises
    ------
    ValueError
        If ``base`` is not one of ``"e"``, ``"10"``, ``"2"``.
    """
    log = _LOG_FUNCS[LogBase(base)]
    shifted = as_float_array(values) + offset
    kept = shifted[np.isfinite(shifted) & (shifted > 0)]
    return cast("NumericArray", log(kept))


def transform_sqrt(values: Values, offset: float = 0.0) -> NumericArray:
    """``sqrt(v + offset)`` for every finite ``v + offset >= 0``."""
    shifted = as_float_array(values) + offset
    kept = shifted[np.isfinite(shifted) & (shifted >= 0)]
    return cast("NumericArray", np.sqrt(kept))


def transform_box_cox(values: Values, lmbda: Lambda = 0.0) -> NumericArray:
    """
    Box-Cox power transform of the finite, strictly positive values.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations.
    lmbda : float or "auto", default 0
        Exponent; ``"auto"`` is treated as ``0``.

    Returns
    -------
    NumericArray
        ``ln(v)`` when ``|lmbda| < 1e-12``, else ``(v ** lmbda - 1) / lmbda``.
    """
    lam = 0.0 if lmbda == "auto" else float(lmbda)
    arr = as_float_array(values)
    kept = arr[np.isfinite(arr) & (arr > 0)]
    if abs(lam) < LAMBDA_EPS:
        return cast("NumericArray", np.log(kept))
    with np.errstate(over="ignore"):
        return cast("NumericArray", (np.power(kept, lam) - 1) / lam)


def transform_yeo_johnson(values: Values, lmbda: Lambda = 1.0) -> NumericArray:
    """
    Yeo-Johnson power transform of the finite values.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations; negative values are supported.
    lmbda : float or "auto", default 1
        Exponent; ``"auto"`` is treated as ``1``.

    Returns
    -------
    NumericArray
        For ``y >= 0``: ``ln(y + 1)`` when ``|lmbda| < 1e-12``, else
        ``((y + 1) ** lmbda - 1) / lmbda``.
        For ``y < 0`` with ``u = 1 - y`` and ``d = 2 - lmbda``: ``-ln(u)`` when
        ``|d| < 1e-12``, else ``-(u ** d - 1) / d``.
    """
    lam = 1.0 if lmbda == "auto" else float(lmbda)
    arr = as_float_array(values)
    y = arr[np.isfinite(arr)]
    out = np.empty_like(y)

    pos = y >= 0
    neg = ~pos

    with np.errstate(over="ignore"):
        if abs(lam) < LAMBDA_EPS:
            out[pos] = np.log1p(y[pos])
        else:
            out[pos] = (np.power(y[pos] + 1, lam) - 1) / lam

        u = 1 - y[neg]
        denom = 2 - lam
        if abs(denom) < LAMBDA_EPS:
            out[neg] = -np.log(u)
        else:
            out[neg] = -(np.power(u, denom) - 1) / denom

    return out


__all__ = [
    "LAMBDA_EPS",
    "transform_log",
    "transform_sqrt",
    "transform_box_cox",
    "transform_yeo_johnson",
]
