from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import nan

import numpy as np
import pytest
from structlog.testing import capture_logs

from pysatl_distview.transforms.dispatch import apply_transform, resolve_params
from pysatl_distview.transforms.parameters import (
    BoxCoxParams,
    LogParams,
    QuantileUniformParams,
    SqrtParams,
)
from pysatl_distview.types import TransformMethod

VALUES = [-2.0, 0.0, 1.0, 4.0, 9.0, nan]


class TestApplyTransform:
    @pytest.mark.parametrize(
        "method, params, expected",
        [
            ("log", {"base": "10", "offset": 1.0}, np.log10([1.0, 2.0, 5.0, 10.0])),
            ("sqrt", None, [0.0, 1.0, 2.0, 3.0]),
            ("box_cox", {"lambda": 1.0}, [0.0, 3.0, 8.0]),
            ("yeo_johnson", {"lambda": "auto"}, [-2.0, 0.0, 1.0, 4.0, 9.0]),
            ("quantile_uniform", None, [0.2, 0.4, 0.6, 0.8, 1.0]),
        ],
        ids=["log", "sqrt", "box_cox", "yeo_johnson", "quantile_uniform"],
    )
    def test_string_method_with_mapping(self, method, params, expected):
        np.testing.assert_allclose(apply_transform(VALUES, method, params), expected)

    def test_quantile_normal(self):
        result = apply_transform(VALUES, TransformMethod.QUANTILE_NORMAL)
        assert result.size == 5
        assert result[2] == pytest.approx(0.2533471031357997, rel=1e-8)

    def test_record_params(self):
        result = apply_transform(VALUES, TransformMethod.SQRT, SqrtParams(offset=2.0))
        np.testing.assert_allclose(result, np.sqrt([0.0, 2.0, 3.0, 6.0, 11.0]))

    def test_quantile_rng_is_forwarded(self):
        values = np.random.default_rng(0).normal(size=2_000)
        params = QuantileUniformParams(sample_for_ranks=50)

        first = apply_transform(values, "quantile_uniform", params, rng=42)
        second = apply_transform(values, "quantile_uniform", params, rng=42)

        assert first.tolist() == second.tolist()

    def test_mismatched_record(self):
        with pytest.raises(TypeError, match="expects LogParams, got BoxCoxParams"):
            apply_transform(VALUES, "log", BoxCoxParams())

    def test_params_of_wrong_type(self):
        with pytest.raises(TypeError, match="mapping"):
            apply_transform(VALUES, "log", [("base", "10")])  # type: ignore[arg-type]

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown transform method"):
            apply_transform(VALUES, "rank")

    def test_invalid_parameter_value(self):
        with pytest.raises(ValueError, match="base in"):
            apply_transform(VALUES, "log", {"base": "3"})

    def test_logs_kept_and_dropped(self):
        with capture_logs() as logs:
            apply_transform(VALUES, "log")

        event = next(e for e in logs if e["event"] == "transform_applied")
        assert event["method"] == "log"
        assert event["kept"] == 3
        assert event["dropped"] == 3


def test_resolve_params_defaults():
    assert resolve_params("log") == LogParams()
    assert resolve_params(TransformMethod.BOX_COX, {}) == BoxCoxParams()
