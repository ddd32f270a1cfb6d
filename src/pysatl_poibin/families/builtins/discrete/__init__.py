"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_poibin.families.builtins.discrete.poisson_binomial import (
    PoissonBinomial,
    configure_poisson_binomial_family,
    poisson_binomial_pmf,
)

__all__ = [
    "PoissonBinomial",
    "configure_poisson_binomial_family",
    "poisson_binomial_pmf",
]
