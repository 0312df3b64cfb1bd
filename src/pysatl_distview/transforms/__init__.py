"""
Transforms subpackage

Skew-correcting value transforms:

- parameter records, one per method (:mod:`.parameters`);
- log, sqrt, Box-Cox and Yeo-Johnson (:mod:`.power`);
- rank-based uniform and normal transforms (:mod:`.quantile`);
- exhaustive dispatch by method (:mod:`.dispatch`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .dispatch import apply_transform, resolve_params
from .parameters import (
    AnyTransformParams,
    BoxCoxParams,
    Lambda,
    LogParams,
    QuantileNormalParams,
    QuantileUniformParams,
    SqrtParams,
    TransformParams,
    YeoJohnsonParams,
    make_transform_params,
    params_class,
    transform_params,
)
from .power import (
    LAMBDA_EPS,
    transform_box_cox,
    transform_log,
    transform_sqrt,
    transform_yeo_johnson,
)
from .quantile import transform_quantile_normal, transform_quantile_uniform

__all__ = [
    # parameters
    "Lambda",
    "TransformParams",
    "LogParams",
    "SqrtParams",
    "BoxCoxParams",
    "YeoJohnsonParams",
    "QuantileUniformParams",
    "QuantileNormalParams",
    "AnyTransformParams",
    "transform_params",
    "params_class",
    "make_transform_params",
    # power
    "LAMBDA_EPS",
    "transform_log",
    "transform_sqrt",
    "transform_box_cox",
    "transform_yeo_johnson",
    # quantile
    "transform_quantile_uniform",
    "transform_quantile_normal",
    # dispatch
    "resolve_params",
    "apply_transform",
]
