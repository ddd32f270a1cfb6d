"""
Shared Types
============

Enumerations, the distribution type descriptor and numeric type aliases
used across the package.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Kind of sample space a distribution lives on."""

    DISCRETE = "discrete"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Descriptor of the sample space of a distribution.

    Parameters
    ----------
    kind : Kind
        Kind of outcomes.
    dimension : int
        Number of components of an outcome (1 for counts).
    """

    kind: Kind
    dimension: int


UnivariateDiscrete = DistributionType(kind=Kind.DISCRETE, dimension=1)
"""Scalar integer-valued outcomes."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float

NumericArray = NDArray[NumPyNumber]
"""Real-valued array (probabilities, outcomes, evaluation points)."""

ComplexArray = NDArray[np.complexfloating[Any]]
BoolArray = NDArray[np.bool_]
IntArray = NDArray[np.integer[Any]]

type GenericCharacteristicName = str
"""Name under which a family publishes a characteristic."""

type ParametrizationName = str


class CharacteristicName(StrEnum):
    """
    Characteristics a discrete family can publish.

    Besides the distribution functions and moments this includes summaries
    read off the probability table (``median``, ``mode``, ``modes``) and
    accessors of the per-trial parameters (``ntrials``, ``succprob``,
    ``failprob``).
    """

    PMF = "pmf"
    LOGPMF = "logpmf"
    CDF = "cdf"
    PPF = "ppf"
    CF = "cf"
    MGF = "mgf"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"
    MEDIAN = "median"
    MODE = "mode"
    MODES = "modes"
    NTRIALS = "ntrials"
    SUCCPROB = "succprob"
    FAILPROB = "failprob"


class FamilyName(StrEnum):
    POISSON_BINOMIAL = "PoissonBinomial"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "BoolArray",
    "IntArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ComplexArray",
    "CharacteristicName",
    "FamilyName",
]
