from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError
from math import e, inf, nan

import numpy as np
import pytest

from pysatl_distview.transforms.parameters import (
    BoxCoxParams,
    LogParams,
    QuantileNormalParams,
    QuantileUniformParams,
    SqrtParams,
    YeoJohnsonParams,
    make_transform_params,
    params_class,
    transform_params,
)
from pysatl_distview.types import LogBase, TransformMethod


class TestParameterRecords:
    @pytest.mark.parametrize(
        "method, cls",
        [
            (TransformMethod.LOG, LogParams),
            (TransformMethod.SQRT, SqrtParams),
            (TransformMethod.BOX_COX, BoxCoxParams),
            (TransformMethod.YEO_JOHNSON, YeoJohnsonParams),
            (TransformMethod.QUANTILE_UNIFORM, QuantileUniformParams),
            (TransformMethod.QUANTILE_NORMAL, QuantileNormalParams),
        ],
    )
    def test_every_method_has_a_record(self, method, cls):
        assert params_class(method) is cls
        assert params_class(method.value) is cls
        assert cls.method is method

    def test_defaults(self):
        assert LogParams().parameters == {"base": LogBase.E, "offset": 0.0}
        assert SqrtParams().offset == 0.0
        assert BoxCoxParams().resolved_lambda == 0.0
        assert YeoJohnsonParams().resolved_lambda == 1.0
        assert QuantileUniformParams().sample_for_ranks == 200_000
        assert QuantileNormalParams().clip == 1e-12

    @pytest.mark.parametrize("base", ["e", "10", "2", e, 10, 2, LogBase.TWO])
    def test_log_base_coercion(self, base):
        assert isinstance(LogParams(base=base).base, LogBase)

    @pytest.mark.parametrize("base", ["3", 3, "ten", None])
    def test_log_base_rejected(self, base):
        with pytest.raises(ValueError, match="base in"):
            LogParams(base=base)

    @pytest.mark.parametrize(
        "factory, match",
        [
            (lambda: SqrtParams(offset=nan), "offset is finite"),
            (lambda: LogParams(offset=inf), "offset is finite"),
            (lambda: BoxCoxParams(lmbda=nan), "lmbda"),
            (lambda: YeoJohnsonParams(lmbda="estimate"), "lmbda"),
            (lambda: QuantileUniformParams(sample_for_ranks=0), "sample_for_ranks"),
            (lambda: QuantileNormalParams(clip=0.5), "clip"),
        ],
        ids=["sqrt_offset", "log_offset", "box_cox_nan", "yeo_johnson_str", "ranks", "clip"],
    )
    def test_constraints(self, factory, match):
        with pytest.raises(ValueError, match=match):
            factory()

    @pytest.mark.parametrize(
        "size", [np.int64(1000), np.int32(7), 1000], ids=["int64", "int32", "int"]
    )
    def test_sample_for_ranks_accepts_integers(self, size):
        assert QuantileUniformParams(sample_for_ranks=size).sample_for_ranks == size
        assert QuantileNormalParams(sample_for_ranks=size).sample_for_ranks == size

    @pytest.mark.parametrize("size", [True, 2.5, np.float64(10.0), "10"])
    def test_sample_for_ranks_rejects_non_integers(self, size):
        with pytest.raises(ValueError, match="sample_for_ranks"):
            QuantileUniformParams(sample_for_ranks=size)

    def test_numpy_offsets_accepted(self):
        assert SqrtParams(offset=np.int64(2)).offset == 2
        assert LogParams(offset=np.float32(0.5)).offset == 0.5

    def test_auto_lambda(self):
        assert BoxCoxParams(lmbda="auto").resolved_lambda == 0.0
        assert YeoJohnsonParams(lmbda="auto").resolved_lambda == 1.0

    def test_records_are_frozen(self):
        params = SqrtParams(offset=1.0)
        with pytest.raises(FrozenInstanceError):
            params.offset = 2.0  # type: ignore[misc]

    def test_replace_revalidates(self):
        params = QuantileNormalParams()
        assert params.replace(sample_for_ranks=10).sample_for_ranks == 10
        with pytest.raises(ValueError):
            params.replace(sample_for_ranks=-1)

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already has parameters"):
            transform_params(TransformMethod.LOG)(SqrtParams)


class TestMakeTransformParams:
    def test_builds_record(self):
        params = make_transform_params("log", base="10", offset=1.0)
        assert params == LogParams(base=LogBase.TEN, offset=1.0)

    def test_lambda_alias(self):
        assert make_transform_params("box_cox", **{"lambda": 0.5}) == BoxCoxParams(lmbda=0.5)

    def test_none_falls_back_to_default(self):
        assert make_transform_params("log", base=None, offset=None) == LogParams()

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown transform method"):
            make_transform_params("cube_root")

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown parameter 'lambda'"):
            make_transform_params("sqrt", **{"lambda": 2.0})
