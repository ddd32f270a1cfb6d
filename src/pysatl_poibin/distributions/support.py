"""
Supports
========

Protocols for the set of attainable outcomes of a distribution, and the
bounded integer range ``{0, ..., n}`` of a count distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_poibin.types import BoolArray, IntArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    """Finite support whose outcomes can be listed, in increasing order."""

    @property
    def points(self) -> IntArray: ...


@dataclass(frozen=True, slots=True)
class IntegerRangeSupport(DiscreteSupport):
    """
    Consecutive integers ``min_k, min_k + 1, ..., max_k``.

    Parameters
    ----------
    min_k : int
        Smallest outcome.
    max_k : int
        Largest outcome, not below ``min_k``.

    Raises
    ------
    ValueError
        If ``max_k < min_k``.
    """

    min_k: int
    max_k: int

    def __post_init__(self) -> None:
        if self.max_k < self.min_k:
            raise ValueError("max_k must not be smaller than min_k.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Elementwise test for integral values inside the range (NaN and inf are outside)."""
        xf = np.asarray(x, dtype=float)
        with np.errstate(invalid="ignore"):
            inside = (xf >= self.min_k) & (xf <= self.max_k) & (np.floor(xf) == xf)
        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __len__(self) -> int:
        return self.max_k - self.min_k + 1

    @property
    def points(self) -> IntArray:
        return np.arange(self.min_k, self.max_k + 1)


__all__ = [
    "Support",
    "DiscreteSupport",
    "IntegerRangeSupport",
]
