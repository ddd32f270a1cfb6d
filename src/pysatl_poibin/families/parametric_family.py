"""
Parametric Families
===================

:class:`ParametricFamily` ties together the parametrizations of a family, its
closed-form characteristics (written against the base parametrization), its
support and its sampling strategy, and builds distributions from parameter
values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING

from pysatl_poibin.distributions.computation import AnalyticalComputation
from pysatl_poibin.distributions.strategies import (
    DefaultComputationStrategy,
    TabulatedSamplingStrategy,
)
from pysatl_poibin.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_poibin.distributions.strategies import SamplingStrategy
    from pysatl_poibin.distributions.support import Support
    from pysatl_poibin.families.parametrizations import Parametrization
    from pysatl_poibin.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type CharacteristicFunc = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    Family of distributions indexed by parameters.

    Parameters
    ----------
    name : str
        Family name, the key in the family register.
    distr_type : DistributionType
        Sample space of every member.
    distr_parametrizations : list[str]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : Mapping[str, Callable]
        Characteristic name to ``func(base_parameters, data, **options)``.
    sampling_strategy : SamplingStrategy, optional
        Defaults to :class:`TabulatedSamplingStrategy`.
    support_by_parametrization : Callable, optional
        Support of the member with the given base parameters; ``None``
        leaves members without a support.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[GenericCharacteristicName, CharacteristicFunc],
        sampling_strategy: SamplingStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ) -> None:
        self._name = name
        self.distr_type = distr_type
        self.parametrization_names = list(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self.distr_characteristics = dict(distr_characteristics)
        self.sampling_strategy: SamplingStrategy = (
            TabulatedSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.computation_strategy = DefaultComputationStrategy()
        self._support_of = support_by_parametrization
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> Mapping[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If it has not been registered yet.
        """
        if self.base_parametrization_name not in self._parametrizations:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return self._parametrizations[self.base_parametrization_name]

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Attach ``parametrization_class`` under ``name``.

        Raises
        ------
        ValueError
            If ``name`` is taken.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build_analytical_computations(
        self, base_parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Every characteristic of the family, bound to ``base_parameters``."""
        return {
            name: AnalyticalComputation(target=name, func=partial(func, base_parameters))
            for name, func in self.distr_characteristics.items()
        }

    def distribution(
        self,
        parametrization_name: ParametrizationName | None = None,
        check_args: bool = True,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Build the member with the given parameter values.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are written in; the base one by default.
        check_args : bool, default True
            Check the parametrization's constraints. Derived state checks
            (done by ``prepare``) run either way.
        **parameters_values
            Field values of the parametrization.

        Returns
        -------
        ParametricFamilyDistribution

        Raises
        ------
        KeyError
            If ``parametrization_name`` is unknown.
        InvalidParameterError
            If ``check_args`` is set and a constraint does not hold.
        """
        cls = (
            self.base
            if parametrization_name is None
            else self._parametrizations[parametrization_name]
        )
        parameters = cls(**parameters_values)
        if check_args:
            parameters.validate()
        base_parameters = self.to_base(parameters)
        base_parameters.prepare()
        support = None if self._support_of is None else self._support_of(base_parameters)
        return ParametricFamilyDistribution(
            self, self.distr_type, parameters, base_parameters, support
        )

    __call__ = distribution
