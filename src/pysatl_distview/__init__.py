"""
PySATL DistView
===============

Distribution computations behind data-exploration charts: single-pass
summary statistics, adaptive histogram binning, fitted normal curves,
reservoir sampling and skew-correcting value transforms.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .chart import ChartPoint, chart_points, stats_caption, x_axis_domain, y_axis_max
from .composer import (
    build_distribution,
    build_preview_distribution,
    build_transformed_distribution,
)
from .logging import configure_logging, get_logger
from .settings import DEFAULT_SETTINGS, DistributionSettings
from .stats import *
from .stats import __all__ as _stats_all
from .transforms import *
from .transforms import __all__ as _transforms_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-distview")
__all__ = [
    "__version__",
    # composer
    "build_distribution",
    "build_preview_distribution",
    "build_transformed_distribution",
    # chart payload
    "ChartPoint",
    "chart_points",
    "y_axis_max",
    "x_axis_domain",
    "stats_caption",
    # settings and logging
    "DistributionSettings",
    "DEFAULT_SETTINGS",
    "configure_logging",
    "get_logger",
    *_stats_all,
    *_transforms_all,
    *_types_all,
]

del _stats_all
del _transforms_all
del _types_all
