"""
Distribution Composition
========================

Combines summary statistics, binning and the fitted normal curve into one
:class:`~pysatl_distview.types.DistributionData`.

- :func:`build_distribution`: full-resolution view.
- :func:`build_preview_distribution`: thumbnail view over a reservoir
  sample, for inputs too large to bin in full.
- :func:`build_transformed_distribution`: view of transformed values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from numbers import Integral
from typing import TYPE_CHECKING

from pysatl_distview.logging import get_logger
from pysatl_distview.settings import DEFAULT_SETTINGS, DistributionSettings
from pysatl_distview.stats.binning import compute_histogram, suggest_bin_count
from pysatl_distview.stats.gaussian import build_normal_curve
from pysatl_distview.stats.sampling import reservoir_sample
from pysatl_distview.stats.summary import compute_stats
from pysatl_distview.transforms.dispatch import apply_transform
from pysatl_distview.transforms.parameters import TransformParams
from pysatl_distview.types import DistributionData, Domain, TransformMethod, as_float_array

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distview.stats.sampling import RandomSource
    from pysatl_distview.transforms.parameters import AnyTransformParams
    from pysatl_distview.types import Values

logger = get_logger(__name__)


def _requested_bin_count(requested_bins: int | None) -> int | None:
    """``None`` when no bin count was requested, the count otherwise."""
    if requested_bins is None or requested_bins == 0:
        return None
    if isinstance(requested_bins, bool) or not isinstance(requested_bins, Integral):
        raise ValueError(f"requested_bins must be a positive integer, got {requested_bins!r}")
    if requested_bins < 0:
        raise ValueError(f"requested_bins must be a positive integer, got {requested_bins}")
    return int(requested_bins)


def build_distribution(
    values: Values,
    requested_bins: int | None = None,
    *,
    settings: DistributionSettings = DEFAULT_SETTINGS,
) -> DistributionData:
    """
    Compose histogram, normal overlay and summary for one numeric column.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations; non-finite entries are ignored by the statistics.
    requested_bins : int, optional
        Explicit bin count. ``None`` or ``0`` selects the count with the
        Freedman-Diaconis rule.
    settings : DistributionSettings, optional
        Bin clamps, fallback count and curve resolution.

    Returns
    -------
    DistributionData
        ``domain`` spans the first bin's start to the last bin's end, or
        ``stats.min``/``stats.max`` when the histogram is empty. The normal
        curve is empty when that domain is not finite.

    Raises
    ------
    ValueError
        If ``requested_bins`` is negative or not an integer.
    """
    arr = as_float_array(values)
    stats = compute_stats(arr)

    bins = _requested_bin_count(requested_bins)
    if bins is None:
        bins = suggest_bin_count(
            arr,
            settings.default_bins,
            min_bins=settings.min_bins,
            max_bins=settings.max_bins,
            fallback_max_bins=settings.fallback_max_bins,
        )

    histogram = compute_histogram(arr, bins)
    if histogram:
        domain = Domain(min=histogram[0].start, max=histogram[-1].end)
    else:
        domain = Domain(min=stats.min, max=stats.max)

    normal_curve = (
        build_normal_curve(domain.min, domain.max, stats.mean, stats.std, settings.curve_points)
        if domain.is_finite
        else ()
    )

    logger.debug(
        "distribution_built",
        count=stats.count,
        total=arr.size,
        bins=len(histogram),
        curve_points=len(normal_curve),
    )
    return DistributionData(
        histogram=histogram,
        normal_curve=normal_curve,
        stats=stats,
        domain=domain,
    )


def build_preview_distribution(
    values: Values,
    requested_bins: int | None = None,
    *,
    max_points: int | None = None,
    rng: RandomSource = None,
    settings: DistributionSettings = DEFAULT_SETTINGS,
) -> DistributionData:
    """
    Compose a distribution over at most ``max_points`` sampled values.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations.
    requested_bins : int, optional
        As in :func:`build_distribution`.
    max_points : int, optional
        Reservoir size; ``settings.preview_sample_size`` when omitted.
    rng : numpy.random.Generator or int or None, optional
        Random source of the reservoir.
    settings : DistributionSettings, optional
        As in :func:`build_distribution`.

    Returns
    -------
    DistributionData
        Identical to :func:`build_distribution` when the input already fits.

    Raises
    ------
    ValueError
        If ``max_points`` is smaller than one.
    """
    limit = settings.preview_sample_size if max_points is None else max_points
    if limit < 1:
        raise ValueError(f"max_points must be >= 1, got {limit}")

    arr = as_float_array(values)
    if arr.size > limit:
        logger.debug("preview_sampled", population=arr.size, sample=limit)
        arr = reservoir_sample(arr, limit, rng)
    return build_distribution(arr, requested_bins, settings=settings)


def _settings_defaults(
    method: TransformMethod, settings: DistributionSettings
) -> dict[str, Any]:
    match method:
        case TransformMethod.QUANTILE_UNIFORM:
            return {"sample_for_ranks": settings.sample_for_ranks}
        case TransformMethod.QUANTILE_NORMAL:
            return {"sample_for_ranks": settings.sample_for_ranks, "clip": settings.quantile_clip}
        case _:
            return {}


def build_transformed_distribution(
    values: Values,
    method: TransformMethod | str,
    params: AnyTransformParams | Mapping[str, Any] | None = None,
    requested_bins: int | None = None,
    *,
    rng: RandomSource = None,
    settings: DistributionSettings = DEFAULT_SETTINGS,
) -> DistributionData:
    """
    Transform the values and compose the distribution of the result.

    Parameters
    ----------
    values : iterable of numbers or numpy.ndarray
        Observations.
    method : TransformMethod or str
        Transform to apply before binning.
    params : parameter record or mapping, optional
        As in :func:`~pysatl_distview.transforms.dispatch.apply_transform`.
        Quantile parameters missing from a mapping are taken from
        ``settings``.
    requested_bins : int, optional
        As in :func:`build_distribution`.
    rng : numpy.random.Generator or int or None, optional
        Random source for the quantile rank reference.
    settings : DistributionSettings, optional
        Defaults for binning, curve resolution and quantile transforms.

    Returns
    -------
    DistributionData
        Distribution of the transformed values.
    """
    if not isinstance(params, TransformParams):
        params = _settings_defaults(TransformMethod(method), settings) | dict(params or {})
    transformed = apply_transform(values, method, params, rng=rng)
    return build_distribution(transformed, requested_bins, settings=settings)


__all__ = [
    "build_distribution",
    "build_preview_distribution",
    "build_transformed_distribution",
]
