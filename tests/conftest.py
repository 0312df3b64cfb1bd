from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest
import structlog


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20250101)


@pytest.fixture(autouse=True)
def _fresh_logging() -> Generator[None, Any, None]:
    yield
    structlog.reset_defaults()
