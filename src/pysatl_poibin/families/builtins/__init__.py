"""
Built-in distribution families.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_poibin.families.builtins.discrete import (
    PoissonBinomial,
    configure_poisson_binomial_family,
    poisson_binomial_pmf,
)

__all__ = [
    "PoissonBinomial",
    "configure_poisson_binomial_family",
    "poisson_binomial_pmf",
]
