"""
Built-in Families
=================

:func:`configure_families_register` fills the
:class:`~pysatl_poibin.families.registry.ParametricFamilyRegister` with the
families shipped with the package (currently only Poisson-Binomial). The
result is cached, so repeated calls are cheap; :func:`reset_families_register`
drops both the cache and the register.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_poibin.families.builtins import configure_poisson_binomial_family
from pysatl_poibin.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register the built-in families and return the register.

    Convenience constructors such as
    :func:`~pysatl_poibin.families.builtins.PoissonBinomial` call this lazily.
    """
    configure_poisson_binomial_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
