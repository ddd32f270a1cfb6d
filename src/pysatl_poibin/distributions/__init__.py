"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocol (:mod:`.distribution`);
- supports (:mod:`.support`);
- finite categorical helper (:mod:`.categorical`);
- sampling protocol, array-backed samples and tabulated sampler (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- functional characteristic queries (:mod:`.characteristics`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .categorical import Categorical, is_probability_vector
from .characteristics import GenericCharacteristic
from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, Sample, TabulatedSampler
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    SamplingStrategy,
    TabulatedSamplingStrategy,
)
from .support import DiscreteSupport, IntegerRangeSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "GenericCharacteristic",
    # distribution
    "Distribution",
    "Categorical",
    "is_probability_vector",
    # support
    "Support",
    "DiscreteSupport",
    "IntegerRangeSupport",
    # sampling
    "Sample",
    "ArraySample",
    "TabulatedSampler",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "TabulatedSamplingStrategy",
]
