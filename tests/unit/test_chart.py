from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import exp, inf, nan, pi, sqrt

import pytest

from pysatl_distview.chart import (
    ChartPoint,
    chart_points,
    stats_caption,
    x_axis_domain,
    y_axis_max,
)
from pysatl_distview.composer import build_distribution
from pysatl_distview.settings import DistributionSettings
from pysatl_distview.types import Domain, HistogramBin, StatsSummary


class TestChartPoints:
    def test_curve_at_bin_centers(self):
        histogram = (
            HistogramBin(x=-1.0, start=-2.0, end=0.0, count=1, density=0.25),
            HistogramBin(x=1.0, start=0.0, end=2.0, count=1, density=0.25),
        )
        stats = StatsSummary(count=2, mean=0.0, std=1.0, min=-2.0, max=2.0)

        points = chart_points(histogram, stats)

        expected = 1.0 / sqrt(2.0 * pi) * exp(-0.5)
        assert [p.x for p in points] == [-1.0, 1.0]
        assert [p.density for p in points] == [0.25, 0.25]
        assert points[0].curve == pytest.approx(expected)
        assert points[1].curve == pytest.approx(expected)

    def test_degenerate_spread_gives_flat_curve(self):
        data = build_distribution([4.0, 4.0, 4.0])
        points = chart_points(data.histogram, data.stats)

        assert len(points) == 1
        assert points[0].curve == 0.0

    def test_empty(self):
        assert chart_points((), StatsSummary()) == ()


class TestAxes:
    POINTS = (
        ChartPoint(x=0.0, density=0.2, curve=0.3),
        ChartPoint(x=1.0, density=0.5, curve=0.1),
    )

    def test_headroom_over_tallest_value(self):
        assert y_axis_max(self.POINTS) == pytest.approx(0.575)
        settings = DistributionSettings(y_headroom=2.0)
        assert y_axis_max(self.POINTS, settings=settings) == pytest.approx(1.0)
        assert y_axis_max(self.POINTS, 0.0, settings=settings) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "fixed, expected",
        [(2.0, 2.0), (None, 0.575), (0.0, 0.575), (inf, 0.575), (nan, 0.575)],
        ids=["fixed", "none", "zero", "inf", "nan"],
    )
    def test_fixed_y_max(self, fixed, expected):
        assert y_axis_max(self.POINTS, fixed) == pytest.approx(expected)

    def test_empty_series(self):
        assert y_axis_max(()) == 0.0

    def test_x_domain(self):
        domain = Domain(min=1.0, max=5.0)

        assert x_axis_domain(domain) == (1.0, 5.0)
        assert x_axis_domain(domain, (0.0, 10.0)) == (0.0, 10.0)
        assert x_axis_domain(domain, (0.0, inf)) == (1.0, 5.0)


class TestCaption:
    def test_default_digits(self):
        stats = StatsSummary(count=5, mean=3.0, std=sqrt(2.0), min=1.0, max=5.0)
        assert stats_caption(stats) == "μ=3.000 σ=1.414 n=5"

    def test_custom_digits(self):
        stats = StatsSummary(count=2, mean=-0.26, std=0.5, min=-0.5, max=0.0)
        assert stats_caption(stats, digits=1) == "μ=-0.3 σ=0.5 n=2"
