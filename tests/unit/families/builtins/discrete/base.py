"""
Common fixtures and utilities for discrete distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    # Tolerance on the total probability mass
    MASS_TOLERANCE = 1e-8

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    @staticmethod
    def pmf_moment(pmf: np.ndarray[Any, Any], order: int, center: float = 0.0) -> float:
        """Moment of the outcome count computed directly from a probability table."""
        k = np.arange(pmf.size)
        return float(np.sum(pmf * (k - center) ** order))
