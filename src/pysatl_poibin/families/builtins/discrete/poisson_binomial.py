"""
Poisson-Binomial distribution family implementation.

Contains the PoissonBinomial family with multiple parameterizations, the
probability mass recursion it is built on, and a convenience constructor.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import expit

from pysatl_poibin.distributions.categorical import Categorical, is_probability_vector
from pysatl_poibin.distributions.strategies import TabulatedSamplingStrategy
from pysatl_poibin.distributions.support import IntegerRangeSupport
from pysatl_poibin.errors import InvalidParameterError, PMFInvariantError
from pysatl_poibin.families.parametric_family import ParametricFamily
from pysatl_poibin.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_poibin.families.registry import ParametricFamilyRegister
from pysatl_poibin.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_poibin.families.distribution import ParametricFamilyDistribution
    from pysatl_poibin.types import ComplexArray, NumericArray

# Warnings are attributed to the first frame outside the package
_PACKAGE_PREFIX = str(Path(__file__).parents[3]) + os.sep


def _as_trial_array(values: Any, name: str) -> NumericArray:
    """Copy per-trial values into a read-only 1D floating array."""
    arr = np.array(values)
    if arr.dtype.kind not in "biuf":
        raise InvalidParameterError(f"{name} must contain real numbers, got dtype {arr.dtype}")
    if arr.ndim != 1:
        raise InvalidParameterError(f"{name} must be one-dimensional")
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    arr.flags.writeable = False
    return cast("NumericArray", arr)


def poisson_binomial_pmf(p: Any) -> NumericArray:
    """
    Probability mass function of the number of successes in independent trials.

    Uses the recursion of Thomas & Taub (1982): the table for the first
    ``col`` trials is extended by trial ``col`` in place. Each update reads
    the whole previous table before writing, so ``S[row - 1]`` on the right
    still holds the value for ``col`` trials.

    Parameters
    ----------
    p : array_like
        Success probability of each trial.

    Returns
    -------
    numpy.ndarray
        Array of length ``len(p) + 1`` whose ``k``-th entry is ``P(X = k)``.
        Arithmetic runs in the dtype of ``p`` (float64 for non-floating input).

    Notes
    -----
    Runs in the linear probability domain without renormalisation: O(n^2)
    time, O(n) memory. Probabilities of extreme counts may underflow to zero
    for large ``n``.

    References
    ----------
    Marlin A. Thomas & Audrey E. Taub (1982). Calculating binomial
    probabilities when the trial probabilities are unequal. Journal of
    Statistical Computation and Simulation, 14:2, 125-131.
    """
    probs = np.asarray(p)
    if not np.issubdtype(probs.dtype, np.floating):
        probs = probs.astype(np.float64)
    probs = probs.ravel()

    S = np.zeros(probs.size + 1, dtype=probs.dtype)
    S[0] = 1
    for col, succ in enumerate(probs):
        fail = 1 - succ
        S[1 : col + 2] = fail * S[1 : col + 2] + succ * S[: col + 1]
        S[0] *= fail
    return S


def _warn_on_underflow(p: NumericArray, pmf: NumericArray) -> None:
    """Warn when outcomes of non-zero probability were rounded to zero mass."""
    lowest = int(np.count_nonzero(p == 1))
    highest = p.size - int(np.count_nonzero(p == 0))
    underflowed = int(np.count_nonzero(pmf[lowest : highest + 1] == 0))
    if underflowed:
        warnings.warn(
            f"{underflowed} outcome(s) with non-zero probability underflowed to 0 "
            f"in the probability mass function of {p.size} trials; "
            "their log-probabilities evaluate to -inf",
            RuntimeWarning,
            skip_file_prefixes=(_PACKAGE_PREFIX,),
        )


def configure_poisson_binomial_family() -> None:
    """
    Configure and register the Poisson-Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON_BINOMIAL):
        return

    POISSON_BINOMIAL_DOC = """
    Poisson-Binomial distribution.

    The number of successes in n independent Bernoulli trials, where trial i
    succeeds with its own probability p[i]. With all p[i] equal it reduces to
    the binomial distribution.

    Probability mass function:
        P(X = k) = Σ_{A ⊆ {1..n}, |A| = k} Π_{i ∈ A} p[i] Π_{j ∉ A} (1 - p[j]),
        k = 0, 1, ..., n

    The full table P(X = 0..n) is computed once, when a distribution is
    created; quantiles, modes, entropy and sampling are read from it.
    """

    def _base(parameters: Parametrization) -> _SuccessProbabilities:
        return cast(_SuccessProbabilities, parameters)

    def pmf(parameters: Parametrization, k: Any) -> Any:
        """
        Probability mass function.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - p: numpy.ndarray (success probability of each trial)
            - pmf: numpy.ndarray (precomputed table)
        k : Number or NumericArray
            Outcome(s) at which to evaluate the probability mass function

        Returns
        -------
        Number or NumericArray
            ``P(X = k)``; 0 for ``k`` that is not an integer in ``[0, n]``
        """
        params = _base(parameters)
        table = params.pmf
        k_arr = np.asarray(k, dtype=np.float64)

        inside = np.asarray(IntegerRangeSupport(0, params.p.size).contains(k_arr))
        result = np.zeros(k_arr.shape, dtype=table.dtype)
        result[inside] = table[k_arr[inside].astype(np.intp)]
        return result[()]

    def logpmf(parameters: Parametrization, k: Any) -> Any:
        """Logarithm of the probability mass function (-inf off support)."""
        with np.errstate(divide="ignore"):
            return np.log(pmf(parameters, k))

    def cdf(parameters: Parametrization, x: Any) -> Any:
        """Cumulative distribution function ``P(X <= x)``."""
        return Categorical(_base(parameters).pmf, check_args=False).cdf(x)

    def ppf(parameters: Parametrization, q: Any) -> Any:
        """
        Quantile function (smallest outcome whose CDF reaches ``q``).

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        return Categorical(_base(parameters).pmf, check_args=False).quantile(q)

    def mgf(parameters: Parametrization, t: Any) -> Any:
        """
        Moment generating function ``Π (1 - p[i] + p[i] e^t)``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field p
        t : Number or NumericArray
            Points at which to evaluate the moment generating function

        Returns
        -------
        Number or NumericArray
            Values at points t
        """
        p = _base(parameters).p
        t_arr = np.asarray(t, dtype=np.float64)
        factors = 1 - p + p * np.expand_dims(np.exp(t_arr), -1)
        return np.prod(factors, axis=-1)[()]

    def char_func(parameters: Parametrization, t: Any) -> Any:
        """
        Characteristic function ``Π (1 - p[i] + p[i] e^{it})``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field p
        t : Number or NumericArray
            Points at which to evaluate the characteristic function

        Returns
        -------
        complex or ComplexArray
            Characteristic function values at points t
        """
        p = _base(parameters).p
        t_arr = np.asarray(t, dtype=np.float64)
        factors = 1 - p + p * np.expand_dims(np.exp(1j * t_arr), -1)
        return cast("ComplexArray", np.prod(factors, axis=-1))[()]

    def mean_func(parameters: Parametrization, _: Any = None) -> float:
        """Mean of Poisson-Binomial distribution."""
        return float(np.sum(_base(parameters).p))

    def var_func(parameters: Parametrization, _: Any = None) -> float:
        """Variance of Poisson-Binomial distribution."""
        p = _base(parameters).p
        return float(np.sum(p * (1 - p)))

    def skew_func(parameters: Parametrization, _: Any = None) -> float:
        """Skewness of Poisson-Binomial distribution (nan without variance)."""
        p = _base(parameters).p
        v = np.sum(p * (1 - p), dtype=np.float64)
        s = np.sum(p * (1 - p) * (1 - 2 * p), dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(s / np.sqrt(v) / v)

    def kurt_func(parameters: Parametrization, _: Any = None, excess: bool = True) -> float:
        """Excess or raw kurtosis of Poisson-Binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field p
        excess : bool
            A value defines if there will be excess or raw kurtosis,
            default is True

        Returns
        -------
        float
            Kurtosis value (nan without variance)
        """
        p = _base(parameters).p
        v = np.sum(p * (1 - p), dtype=np.float64)
        s = np.sum(p * (1 - p) * (1 - 6 * (1 - p) * p), dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            kurt = float(s / v / v)
        return kurt if excess else kurt + 3.0

    def entropy_func(parameters: Parametrization, _: Any = None) -> float:
        """Shannon entropy in nats."""
        return Categorical(_base(parameters).pmf, check_args=False).entropy()

    def median_func(parameters: Parametrization, _: Any = None) -> int:
        return cast(int, Categorical(_base(parameters).pmf, check_args=False).median())

    def mode_func(parameters: Parametrization, _: Any = None) -> int:
        return cast(int, Categorical(_base(parameters).pmf, check_args=False).mode())

    def modes_func(parameters: Parametrization, _: Any = None) -> list[int]:
        return Categorical(_base(parameters).pmf, check_args=False).modes()

    def ntrials_func(parameters: Parametrization, _: Any = None) -> int:
        return int(_base(parameters).p.size)

    def succprob_func(parameters: Parametrization, _: Any = None) -> NumericArray:
        return _base(parameters).p

    def failprob_func(parameters: Parametrization, _: Any = None) -> NumericArray:
        return cast("NumericArray", 1 - _base(parameters).p)

    def _support(parameters: Parametrization) -> IntegerRangeSupport:
        """Support of Poisson-Binomial distribution"""
        return IntegerRangeSupport(0, _base(parameters).p.size)

    PoissonBinomial = ParametricFamily(
        name=FamilyName.POISSON_BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["successProbabilities", "failureProbabilities", "logOdds"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LOGPMF: logpmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MGF: mgf,
            CharacteristicName.CF: char_func,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MODES: modes_func,
            CharacteristicName.NTRIALS: ntrials_func,
            CharacteristicName.SUCCPROB: succprob_func,
            CharacteristicName.FAILPROB: failprob_func,
        },
        sampling_strategy=TabulatedSamplingStrategy(),
        support_by_parametrization=_support,
    )
    PoissonBinomial.__doc__ = POISSON_BINOMIAL_DOC

    @parametrization(family=PoissonBinomial, name="successProbabilities")
    @dataclass(slots=True, frozen=True, eq=False)
    class _SuccessProbabilities(Parametrization):
        """
        Standard parametrization of Poisson-Binomial distribution.

        Parameters
        ----------
        p : array_like
            Success probability of each trial, in trial order

        Attributes
        ----------
        pmf : numpy.ndarray
            Probability of each success count 0..n, set by :meth:`prepare`
        """

        p: NumericArray
        pmf: NumericArray = field(init=False, repr=False)

        def __post_init__(self) -> None:
            object.__setattr__(self, "p", _as_trial_array(self.p, "p"))

        @constraint(description="0 <= p[i] <= 1")
        def check_p_in_unit_interval(self) -> bool:
            """Check that every success probability lies in [0, 1]."""
            return bool(np.all((self.p >= 0) & (self.p <= 1)))

        def prepare(self) -> None:
            """
            Compute the probability mass table.

            Raises
            ------
            PMFInvariantError
                If the table is not a probability vector.
            """
            table = poisson_binomial_pmf(self.p)
            if not is_probability_vector(table):
                raise PMFInvariantError(
                    "Poisson-Binomial probability mass function is not a probability "
                    f"vector (sum={float(np.sum(table))!r}, min={float(np.min(table))!r})"
                )
            _warn_on_underflow(self.p, table)
            table.flags.writeable = False
            object.__setattr__(self, "pmf", table)

    @parametrization(family=PoissonBinomial, name="failureProbabilities")
    @dataclass(slots=True, frozen=True, eq=False)
    class _FailureProbabilities(Parametrization):
        """
        Failure-probability parametrization of Poisson-Binomial distribution.

        Parameters
        ----------
        q : array_like
            Failure probability of each trial, in trial order
        """

        q: NumericArray

        def __post_init__(self) -> None:
            object.__setattr__(self, "q", _as_trial_array(self.q, "q"))

        @constraint(description="0 <= q[i] <= 1")
        def check_q_in_unit_interval(self) -> bool:
            """Check that every failure probability lies in [0, 1]."""
            return bool(np.all((self.q >= 0) & (self.q <= 1)))

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to success-probability parametrization.

            Returns
            -------
            Parametrization
                Success-probability parametrization instance
            """
            return _SuccessProbabilities(p=1 - self.q)

    @parametrization(family=PoissonBinomial, name="logOdds")
    @dataclass(slots=True, frozen=True, eq=False)
    class _LogOdds(Parametrization):
        """
        Log-odds parametrization of Poisson-Binomial distribution.
            p[i] = 1 / (1 + exp(-eta[i]))

        Parameters
        ----------
        eta : array_like
            Log-odds of success of each trial; +-inf mean certain outcomes
        """

        eta: NumericArray

        def __post_init__(self) -> None:
            object.__setattr__(self, "eta", _as_trial_array(self.eta, "eta"))

        @constraint(description="eta[i] is not NaN")
        def check_eta_not_nan(self) -> bool:
            """Check that log-odds are numbers."""
            return not bool(np.any(np.isnan(self.eta)))

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to success-probability parametrization.

            Returns
            -------
            Parametrization
                Success-probability parametrization instance
            """
            return _SuccessProbabilities(p=expit(self.eta))

    ParametricFamilyRegister.register(PoissonBinomial)


def PoissonBinomial(p: Any, check_args: bool = True) -> ParametricFamilyDistribution:
    """
    Create a Poisson-Binomial distribution from success probabilities.

    Parameters
    ----------
    p : array_like
        Success probability of each trial.
    check_args : bool, default True
        Check that every ``p[i]`` lies in ``[0, 1]``.

    Returns
    -------
    ParametricFamilyDistribution
        Distribution with its probability mass table computed.

    Raises
    ------
    InvalidParameterError
        If ``check_args`` is set and a probability is outside ``[0, 1]``,
        or ``p`` is not one-dimensional.
    PMFInvariantError
        If the computed probability mass table is not a probability vector.
    """
    from pysatl_poibin.families.configuration import configure_families_register

    family = configure_families_register().get(FamilyName.POISSON_BINOMIAL)
    return family(p=p, check_args=check_args)
