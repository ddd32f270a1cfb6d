"""
Bound Characteristic Computations
=================================

:class:`AnalyticalComputation` pairs a characteristic name with a closed-form
callable already bound to a distribution's parameters. Scalar arguments give
scalar results and arrays give arrays of the same shape; characteristics
without an argument (moments, summaries, parameter accessors) are called
with ``None``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_poibin.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic of one distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g. ``"pmf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Callable taking the argument and characteristic-specific options.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In = None, **options: Any) -> Out:  # type: ignore[assignment]
        return self.func(data, **options)
