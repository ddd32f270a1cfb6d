from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from pysatl_poibin.distributions import (
    DefaultComputationStrategy,
    IntegerRangeSupport,
    TabulatedSamplingStrategy,
)
from pysatl_poibin.errors import InvalidParameterError
from pysatl_poibin.families import ParametricFamily, ParametricFamilyDistribution
from pysatl_poibin.types import UnivariateDiscrete

from .base import BaseFamilyTest


class TestParametricFamily(BaseFamilyTest):
    def test_family_metadata(self) -> None:
        family = self.make_default_family()

        assert family.name == "Toy"
        assert family.parametrization_names == ["base", "halves"]
        assert family.base_parametrization_name == "base"
        assert family.base is family.parametrizations["base"]
        assert isinstance(family.computation_strategy, DefaultComputationStrategy)

    def test_default_sampling_strategy_is_tabulated(self) -> None:
        family = ParametricFamily(
            name="Plain",
            distr_type=UnivariateDiscrete,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        assert isinstance(family.sampling_strategy, TabulatedSamplingStrategy)

    def test_base_must_be_registered(self) -> None:
        family = ParametricFamily(
            name="Empty",
            distr_type=UnivariateDiscrete,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="not registered"):
            _ = family.base

    def test_distribution_in_base_parametrization(self) -> None:
        family = self.make_default_family()
        distr = family(n=4)

        assert isinstance(distr, ParametricFamilyDistribution)
        assert distr.family is family
        assert distr.family_name == "Toy"
        assert distr.parametrization_name == "base"
        assert distr.distribution_type == UnivariateDiscrete
        assert distr.support == IntegerRangeSupport(0, 4)
        assert distr.calculate_characteristic(self.MEAN) == 2.0

    def test_distribution_in_alternative_parametrization(self) -> None:
        family = self.make_default_family()
        distr = family.distribution(parametrization_name="halves", halves=6)

        assert distr.parametrization_name == "halves"
        assert distr.base_parameters.n == 3  # type: ignore[attr-defined]
        assert distr.support == IntegerRangeSupport(0, 3)
        assert distr.calculate_characteristic(self.MEAN) == 1.5
        assert distr.calculate_characteristic(self.NTRIALS) == 3

    def test_every_characteristic_is_bound_to_base_parameters(self) -> None:
        family = self.make_default_family()
        distr = family.distribution(parametrization_name="halves", halves=2)

        assert set(distr.analytical_computations) == {self.PMF, self.MEAN, self.NTRIALS}
        for name, computation in distr.analytical_computations.items():
            assert computation.target == name
            assert computation.func.args == (distr.base_parameters,)  # type: ignore[attr-defined]

    def test_analytical_computations_are_read_only(self) -> None:
        distr = self.make_default_family()(n=1)
        with pytest.raises(TypeError):
            distr.analytical_computations[self.MEAN] = None  # type: ignore[index]

    def test_constraints_are_checked(self) -> None:
        family = self.make_default_family()

        with pytest.raises(InvalidParameterError, match="n >= 0"):
            family(n=-1)
        with pytest.raises(InvalidParameterError, match="halves is even"):
            family.distribution(parametrization_name="halves", halves=3)

    def test_constraints_can_be_skipped(self) -> None:
        family = self.make_default_family()
        distr = family.distribution(parametrization_name="halves", halves=3, check_args=False)
        assert distr.base_parameters.n == 1  # type: ignore[attr-defined]

    def test_unknown_parametrization(self) -> None:
        family = self.make_default_family()
        with pytest.raises(KeyError):
            family.distribution(parametrization_name="nope", n=1)

    def test_distribution_is_frozen(self) -> None:
        distr = self.make_default_family()(n=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            distr.family = None  # type: ignore[misc]

    def test_sample_uses_family_strategy(self) -> None:
        distr = self.make_default_family()(n=2)
        sample = distr.sample(7)
        assert sample.shape == (7, 1)

    def test_sampler_tabulates_support(self) -> None:
        distr = self.make_default_family()(n=3)
        draws = distr.sampler(rng=0)(20)
        assert draws.tolist() == [0] * 20
