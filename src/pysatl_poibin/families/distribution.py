"""
Family Members
==============

:class:`ParametricFamilyDistribution` is one member of a parametric family:
the parameters as given, the same parameters in the base parametrization
(with their derived state), the support and the characteristics bound to
them. Members never change after construction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from pysatl_poibin.distributions.categorical import Categorical
from pysatl_poibin.distributions.distribution import Distribution

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import DTypeLike

    from pysatl_poibin.distributions.computation import AnalyticalComputation
    from pysatl_poibin.distributions.sampling import SeedLike, TabulatedSampler
    from pysatl_poibin.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_poibin.distributions.support import Support
    from pysatl_poibin.families.parametric_family import ParametricFamily
    from pysatl_poibin.families.parametrizations import Parametrization
    from pysatl_poibin.types import DistributionType, GenericCharacteristicName


@dataclass(frozen=True, slots=True, eq=False)
class ParametricFamilyDistribution(Distribution):
    """
    Immutable member of a :class:`ParametricFamily`.

    Parameters
    ----------
    family : ParametricFamily
        Family the member was built by.
    _distribution_type : DistributionType
        Sample space of the member.
    parameters : Parametrization
        Parameters in the parametrization the caller used.
    base_parameters : Parametrization
        The same parameters in the base parametrization, after ``prepare``.
    _support : Support or None
        Attainable outcomes.
    """

    family: ParametricFamily
    _distribution_type: DistributionType
    parameters: Parametrization
    base_parameters: Parametrization
    _support: Support | None
    _analytical: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        init=False, repr=False
    )

    def __post_init__(self) -> None:
        bound = self.family.build_analytical_computations(self.base_parameters)
        object.__setattr__(self, "_analytical", MappingProxyType(bound))

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Read-only mapping of characteristic name to bound computation."""
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def params(self) -> tuple[Any, ...]:
        """Base parameter values in field order."""
        return tuple(self.base_parameters.parameters.values())

    def sampler(self, rng: SeedLike = None) -> TabulatedSampler:
        """
        Reusable sampler over the member's probability table.

        Raises
        ------
        RuntimeError
            If the member has no finite discrete support.
        """
        return Categorical.from_distribution(self).sampler(rng=rng)

    def astype(self, dtype: DTypeLike) -> ParametricFamilyDistribution:
        """
        Rebuild the member with its base parameters cast to ``dtype``.

        Constraints are not checked again; derived state is recomputed in
        ``dtype``.
        """
        values = {
            name: np.asarray(value, dtype=dtype)
            for name, value in self.base_parameters.parameters.items()
        }
        return self.family.distribution(check_args=False, **values)
