"""
Transform dispatch.

:func:`apply_transform` resolves a method name and its parameters into a
parameter record and matches exhaustively over the record classes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from typing import TYPE_CHECKING, assert_never

from pysatl_distview.logging import get_logger
from pysatl_distview.transforms.parameters import (
    AnyTransformParams,
    BoxCoxParams,
    LogParams,
    QuantileNormalParams,
    QuantileUniformParams,
    SqrtParams,
    TransformParams,
    YeoJohnsonParams,
    make_transform_params,
    params_class,
)
from pysatl_distview.transforms.power import (
    transform_box_cox,
    transform_log,
    transform_sqrt,
    transform_yeo_johnson,
)
from pysatl_distview.transforms.quantile import (
    transform_quantile_normal,
    transform_quantile_uniform,
)
from pysatl_distview.types import TransformMethod, as_float_array

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distview.stats.sampling import RandomSource
    from pysatl_distview.types import NumericArray, Values

logger = get_logger(__name__)


def resolve_params(
    method: TransformMethod | str,
    params: AnyTransformParams | Mapping[str, Any] | None = None,
) -> AnyTransformParams:
    """
    Turn ``method`` and ``params`` into a validated parameter record.

    Raises
    ------
    ValueError
        If the method is unknown or a parameter is invalid.
    TypeError
        If ``params`` is a record of another method or not a mapping.
    """
    if params is None:
        return make_transform_params(method)
    if isinstance(params, TransformParams):
        expected = params_class(method)
        if type(params) is not expected:
            raise TypeError(
                f"Transform {TransformMethod(method).value} expects {expected.__name__}, "
                f"got {type(params).__name__}"
            )
        return params
    if isinstance(params, Mapping):
        return make_transform_params(method, **params)
    raise TypeError(f"params must be a parameter record or a mapping, got {type(params).__name__}")


def apply_transform(
    values: Values,
    method: TransformMethod | str,
    params: AnyTransformParams | Mapping[str, Any] | None = None,
    *,
    rng: RandomSource = None,
) -> NumericArray:
    """
    Apply one of the value transforms.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations.
    method : TransformMethod or str
        Transform to apply.
    params : parameter record or mapping, optional
        The record matching ``method`` or keyword arguments to build it
        (e.g. ``{"base": "10", "offset": 1}``). Defaults when omitted.
    rng : numpy.random.Generator or int or None, optional
        Random source for the quantile transforms' rank reference.

    Returns
    -------
    NumericArray
        Transformed values; out-of-domain and non-finite inputs are dropped.

    Raises
    ------
    ValueError
        If the method is unknown or a parameter is invalid.
    TypeError
        If ``params`` does not fit ``method``.
    """
    record = resolve_params(method, params)
    arr = as_float_array(values)

    result: NumericArray
    match record:
        case LogParams(base=base, offset=offset):
            result = transform_log(arr, base, offset)
        case SqrtParams(offset=offset):
            result = transform_sqrt(arr, offset)
        case BoxCoxParams():
            result = transform_box_cox(arr, record.resolved_lambda)
        case YeoJohnsonParams():
            result = transform_yeo_johnson(arr, record.resolved_lambda)
        case QuantileUniformParams(sample_for_ranks=size):
            result = transform_quantile_uniform(arr, size, rng)
        case QuantileNormalParams(sample_for_ranks=size, clip=clip):
            result = transform_quantile_normal(arr, size, rng, clip)
        case _:
            assert_never(record)

    logger.debug(
        "transform_applied",
        method=record.method.value,
        kept=int(result.size),
        dropped=int(arr.size - result.size),
    )
    return result


__all__ = [
    "resolve_params",
    "apply_transform",
]
