"""
Transform parameter records.

Every transform method owns one frozen parameter record; together the
records form the closed union :data:`AnyTransformParams` over which
:func:`~pysatl_distview.transforms.dispatch.apply_transform` matches.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields
from math import e, isfinite
from numbers import Integral, Real
from typing import TYPE_CHECKING, ClassVar, Literal

from pysatl_distview.constraints import ConstrainedRecord, constraint
from pysatl_distview.settings import QUANTILE_CLIP, SAMPLE_FOR_RANKS
from pysatl_distview.types import LogBase, TransformMethod

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

type Lambda = float | Literal["auto"]
"""Power-transform exponent, or ``"auto"`` for the method's default."""

_REGISTERED: dict[TransformMethod, type[TransformParams]] = {}

# keys accepted in place of the field names when building from a mapping
_ALIASES = {"lambda": "lmbda"}

_NUMERIC_LOG_BASES = {e: LogBase.E, 10: LogBase.TEN, 2: LogBase.TWO}


def transform_params[T: type[TransformParams]](method: TransformMethod) -> Callable[[T], T]:
    """
    Decorator to register a record class as the parameters of ``method``.

    Parameters
    ----------
    method : TransformMethod
        Transform the record belongs to.

    Raises
    ------
    ValueError
        If ``method`` already has a parameter record.
    """

    def decorator(cls: T) -> T:
        if method in _REGISTERED:
            raise ValueError(f"Transform {method} already has parameters registered")
        cls.method = method
        _REGISTERED[method] = cls
        return cls

    return decorator


class TransformParams(ConstrainedRecord):
    """Base class of all transform parameter records."""

    __slots__ = ()

    method: ClassVar[TransformMethod]


def _finite_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and isfinite(value)


def _lambda_ok(value: object) -> bool:
    return value == "auto" or _finite_number(value)


def _positive_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and int(value) >= 1


@transform_params(TransformMethod.LOG)
@dataclass(frozen=True, slots=True)
class LogParams(TransformParams):
    """
    Parameters of the log transform.

    Parameters
    ----------
    base : LogBase, default "e"
        Logarithm base; ``"e"``, ``"10"`` or ``"2"`` (numbers ``e``, ``10``
        and ``2`` are accepted as well).
    offset : float, default 0
        Added to every value before taking the logarithm.
    """

    base: LogBase = LogBase.E
    offset: float = 0.0

    def __post_init__(self) -> None:
        base: object = self.base
        if not isinstance(base, LogBase):
            if isinstance(base, str) and base in {b.value for b in LogBase}:
                object.__setattr__(self, "base", LogBase(base))
            elif _finite_number(base) and base in _NUMERIC_LOG_BASES:
                object.__setattr__(self, "base", _NUMERIC_LOG_BASES[base])  # type: ignore[index]
        self.validate()

    @constraint(description="base in {e, 10, 2}")
    def check_base(self) -> bool:
        return isinstance(self.base, LogBase)

    @constraint(description="offset is finite")
    def check_offset(self) -> bool:
        return _finite_number(self.offset)


@transform_params(TransformMethod.SQRT)
@dataclass(frozen=True, slots=True)
class SqrtParams(TransformParams):
    """
    Parameters of the square-root transform.

    Parameters
    ----------
    offset : float, default 0
        Added to every value before taking the root.
    """

    offset: float = 0.0

    @constraint(description="offset is finite")
    def check_offset(self) -> bool:
        return _finite_number(self.offset)


@transform_params(TransformMethod.BOX_COX)
@dataclass(frozen=True, slots=True)
class BoxCoxParams(TransformParams):
    """
    Parameters of the Box-Cox transform.

    Parameters
    ----------
    lmbda : float or "auto", default 0
        Exponent. No estimation is performed: ``"auto"`` means ``0``
        (plain natural log).
    """

    lmbda: Lambda = 0.0

    @constraint(description='lmbda is finite or "auto"')
    def check_lambda(self) -> bool:
        return _lambda_ok(self.lmbda)

    @property
    def resolved_lambda(self) -> float:
        return 0.0 if self.lmbda == "auto" else float(self.lmbda)


@transform_params(TransformMethod.YEO_JOHNSON)
@dataclass(frozen=True, slots=True)
class YeoJohnsonParams(TransformParams):
    """
    Parameters of the Yeo-Johnson transform.

    Parameters
    ----------
    lmbda : float or "auto", default 1
        Exponent. ``"auto"`` means ``1`` (identity on non-negative values).
    """

    lmbda: Lambda = 1.0

    @constraint(description='lmbda is finite or "auto"')
    def check_lambda(self) -> bool:
        return _lambda_ok(self.lmbda)

    @property
    def resolved_lambda(self) -> float:
        return 1.0 if self.lmbda == "auto" else float(self.lmbda)


@transform_params(TransformMethod.QUANTILE_UNIFORM)
@dataclass(frozen=True, slots=True)
class QuantileUniformParams(TransformParams):
    """
    Parameters of the rank-to-uniform transform.

    Parameters
    ----------
    sample_for_ranks : int, default 200000
        Largest rank reference; bigger inputs are reservoir-sampled down.
    """

    sample_for_ranks: int = SAMPLE_FOR_RANKS

    @constraint(description="sample_for_ranks >= 1")
    def check_sample_for_ranks(self) -> bool:
        return _positive_integer(self.sample_for_ranks)


@transform_params(TransformMethod.QUANTILE_NORMAL)
@dataclass(frozen=True, slots=True)
class QuantileNormalParams(TransformParams):
    """
    Parameters of the rank-to-normal transform.

    Parameters
    ----------
    sample_for_ranks : int, default 200000
        Largest rank reference; bigger inputs are reservoir-sampled down.
    clip : float, default 1e-12
        Uniform ranks are clipped to ``[clip, 1 - clip]`` before the
        inverse normal CDF.
    """

    sample_for_ranks: int = SAMPLE_FOR_RANKS
    clip: float = QUANTILE_CLIP

    @constraint(description="sample_for_ranks >= 1")
    def check_sample_for_ranks(self) -> bool:
        return _positive_integer(self.sample_for_ranks)

    @constraint(description="0 < clip < 0.5")
    def check_clip(self) -> bool:
        return _finite_number(self.clip) and 0.0 < self.clip < 0.5


type AnyTransformParams = (
    LogParams
    | SqrtParams
    | BoxCoxParams
    | YeoJohnsonParams
    | QuantileUniformParams
    | QuantileNormalParams
)
"""Closed union of all parameter records."""


def params_class(method: TransformMethod | str) -> type[TransformParams]:
    """
    Look up the parameter record class of a transform.

    Raises
    ------
    ValueError
        If ``method`` is not a known transform.
    """
    try:
        return _REGISTERED[TransformMethod(method)]
    except ValueError:
        raise ValueError(
            f"Unknown transform method {method!r}; "
            f"expected one of {[m.value for m in TransformMethod]}"
        ) from None


def make_transform_params(method: TransformMethod | str, **params: Any) -> AnyTransformParams:
    """
    Build the parameter record of ``method`` from keyword arguments.

    Parameters
    ----------
    method : TransformMethod or str
        Transform name.
    **params
        Field values. ``None`` values fall back to the field default and
        ``lambda`` is accepted for ``lmbda``.

    Returns
    -------
    AnyTransformParams
        Validated parameter record.

    Raises
    ------
    ValueError
        If the method is unknown, a parameter name is not a field of the
        record, or a constraint does not hold.
    """
    cls = params_class(method)
    allowed = {f.name for f in fields(cls)}  # type: ignore[arg-type]

    kwargs: dict[str, Any] = {}
    for key, value in params.items():
        name = _ALIASES.get(key, key)
        if name not in allowed:
            raise ValueError(
                f"Unknown parameter {key!r} for transform {cls.method.value}; "
                f"expected a subset of {sorted(allowed)}"
            )
        if value is not None:
            kwargs[name] = value
    return cls(**kwargs)  # type: ignore[return-value]


__all__ = [
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
]
