"""
Characteristics API
===================

Lightweight wrappers for calling a distribution's characteristic (e.g.,
``pmf``, ``mean``, ``ppf``) resolved by the current computation strategy.

:class:`GenericCharacteristic` delegates the actual computation to the
distribution's :class:`~pysatl_poibin.distributions.strategies.ComputationStrategy`.
The module-level instances give a functional query surface::

    >>> d = PoissonBinomial([0.5, 0.5])
    >>> pmf(d, 1)
    0.5
    >>> mean(d)
    1.0

Notes
-----
- The characteristic name controls *what* to compute (e.g., "pmf").
- ``**options`` are forwarded to the characteristic (e.g., ``excess`` for
  ``kurtosis``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pysatl_poibin.types import CharacteristicName, GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_poibin.distributions.distribution import Distribution
    from pysatl_poibin.distributions.sampling import SeedLike, TabulatedSampler
    from pysatl_poibin.families.distribution import ParametricFamilyDistribution


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pmf"``, ``"cdf"`` or ``"ppf"``).

    Notes
    -----
    This object does not implement the characteristic itself. It resolves and
    calls the analytical function via the active computation strategy.

    Examples
    --------
    >>> PMF = GenericCharacteristic[float, float]("pmf")
    >>> # Later:
    >>> # value = PMF(dist, 3)  # resolves dist's pmf(3)
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: Distribution, data: In | None = None, **options: Any) -> Out:
        """
        Evaluate the characteristic on the given data.

        Parameters
        ----------
        distribution : Distribution
            Distribution instance providing the computation strategy.
        data : Any, optional
            Input value for the characteristic; omitted for moments and
            parameter accessors.
        **options
            Characteristic-specific options.

        Returns
        -------
        Any
            Characteristic value at ``data``.
        """
        method = distribution.computation_strategy.query_method(self.name, distribution)
        result: Out = method(data, **options)
        return result


pmf = GenericCharacteristic[Any, Any](CharacteristicName.PMF)
logpmf = GenericCharacteristic[Any, Any](CharacteristicName.LOGPMF)
cdf = GenericCharacteristic[Any, Any](CharacteristicName.CDF)
quantile = GenericCharacteristic[Any, Any](CharacteristicName.PPF)
mgf = GenericCharacteristic[Any, Any](CharacteristicName.MGF)
cf = GenericCharacteristic[Any, Any](CharacteristicName.CF)

mean = GenericCharacteristic[None, float](CharacteristicName.MEAN)
var = GenericCharacteristic[None, float](CharacteristicName.VAR)
skewness = GenericCharacteristic[None, float](CharacteristicName.SKEW)
kurtosis = GenericCharacteristic[None, float](CharacteristicName.KURT)
entropy = GenericCharacteristic[None, float](CharacteristicName.ENTROPY)
median = GenericCharacteristic[None, Any](CharacteristicName.MEDIAN)
mode = GenericCharacteristic[None, Any](CharacteristicName.MODE)
modes = GenericCharacteristic[None, list[Any]](CharacteristicName.MODES)

ntrials = GenericCharacteristic[None, int](CharacteristicName.NTRIALS)
succprob = GenericCharacteristic[None, Any](CharacteristicName.SUCCPROB)
failprob = GenericCharacteristic[None, Any](CharacteristicName.FAILPROB)

pdf = pmf
logpdf = logpmf
variance = var


def params(distribution: ParametricFamilyDistribution) -> tuple[Any, ...]:
    """Parameter values of ``distribution`` in its family's base parametrization."""
    return distribution.params


def sampler(distribution: ParametricFamilyDistribution, rng: SeedLike = None) -> TabulatedSampler:
    """Reusable sampler drawing outcomes of ``distribution``."""
    return distribution.sampler(rng=rng)


__all__ = [
    "GenericCharacteristic",
    "pmf",
    "pdf",
    "logpmf",
    "logpdf",
    "cdf",
    "quantile",
    "mgf",
    "cf",
    "mean",
    "var",
    "variance",
    "skewness",
    "kurtosis",
    "entropy",
    "median",
    "mode",
    "modes",
    "ntrials",
    "succprob",
    "failprob",
    "params",
    "sampler",
]
