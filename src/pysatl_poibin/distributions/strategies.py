"""
Computation and Sampling Strategies
===================================

A distribution delegates two things:

- resolving a characteristic name to a callable
  (:class:`ComputationStrategy`, default :class:`DefaultComputationStrategy`);
- drawing samples (:class:`SamplingStrategy`, default
  :class:`TabulatedSamplingStrategy` for finite discrete supports).

Strategies hold no state; a seed or generator reaches ``sample`` through the
``rng`` option.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_poibin.distributions.categorical import Categorical
from pysatl_poibin.distributions.sampling import ArraySample

if TYPE_CHECKING:
    from typing import Any

    from pysatl_poibin.distributions.computation import AnalyticalComputation
    from pysatl_poibin.distributions.distribution import Distribution
    from pysatl_poibin.distributions.sampling import Sample
    from pysatl_poibin.types import GenericCharacteristicName


class ComputationStrategy(Protocol):
    def query_method(
        self, name: GenericCharacteristicName, distr: Distribution
    ) -> AnalyticalComputation[Any, Any]: ...


class DefaultComputationStrategy:
    """Looks characteristics up among the distribution's analytical computations."""

    def query_method(
        self, name: GenericCharacteristicName, distr: Distribution
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve characteristic ``name`` of ``distr``.

        Raises
        ------
        RuntimeError
            If ``distr`` does not provide ``name``.
        """
        computations = distr.analytical_computations
        try:
            return computations[name]
        except KeyError:
            raise RuntimeError(
                f"Characteristic '{name}' is not provided by this distribution. "
                f"Available: {', '.join(sorted(computations))}."
            ) from None


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample: ...


class TabulatedSamplingStrategy:
    """
    Samples a distribution with finite discrete support from its ``pmf``.

    The ``pmf`` is tabulated over the support on every call and the table is
    sampled by :class:`~pysatl_poibin.distributions.sampling.TabulatedSampler`.
    The result is an ``(n, 1)`` :class:`ArraySample`.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        draw = Categorical.from_distribution(distr).sampler(rng=options.get("rng"))
        return ArraySample(np.asarray(draw(n), dtype=np.float64).reshape(n, 1))


__all__ = [
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "TabulatedSamplingStrategy",
]
