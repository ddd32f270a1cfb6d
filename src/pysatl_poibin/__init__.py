"""
PySATL Poisson-Binomial
=======================

The Poisson-Binomial distribution (number of successes in independent
Bernoulli trials with per-trial success probabilities) built on a small
framework of parametric families, analytical characteristics, supports and
sampling strategies.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .distributions.characteristics import *
from .distributions.characteristics import __all__ as _char_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-poibin")
__all__ = [
    "__version__",
    *_distr_all,
    *[name for name in _char_all if name not in _distr_all],
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _char_all
del _errors_all
del _family_all
del _types_all
