"""
Distribution Protocol
=====================

The interface shared by family distributions, the categorical helper and
the characteristic query functions. Characteristic lookups and sampling are
delegated to the distribution's strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_poibin.distributions.computation import AnalyticalComputation
    from pysatl_poibin.distributions.sampling import Sample
    from pysatl_poibin.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_poibin.distributions.support import Support
    from pysatl_poibin.types import DistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(self, name: GenericCharacteristicName) -> AnalyticalComputation[Any, Any]:
        """Callable evaluating characteristic ``name``."""
        return self.computation_strategy.query_method(name, self)

    def calculate_characteristic(
        self, name: GenericCharacteristicName, value: Any = None, **options: Any
    ) -> Any:
        """Evaluate characteristic ``name`` at ``value``, forwarding ``options``."""
        return self.query_method(name)(value, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        """Draw ``n`` outcomes; ``rng`` may be passed as an option."""
        return self.sampling_strategy.sample(n, self, **options)
