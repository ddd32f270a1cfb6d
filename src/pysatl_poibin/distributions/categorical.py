"""
Finite Categorical Distributions
================================

A generic discrete distribution over a finite, ordered set of labelled
outcomes with arbitrary probabilities. Families whose probability mass
function is available as a table (e.g. Poisson-Binomial) delegate entropy,
median, mode, quantile and sampling to :class:`Categorical`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.stats import entropy as _shannon_entropy

from pysatl_poibin.distributions.sampling import TabulatedSampler
from pysatl_poibin.distributions.support import DiscreteSupport
from pysatl_poibin.errors import InvalidParameterError
from pysatl_poibin.types import CharacteristicName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_poibin.distributions.distribution import Distribution
    from pysatl_poibin.distributions.sampling import SeedLike
    from pysatl_poibin.types import IntArray, NumericArray


def is_probability_vector(probabilities: NumericArray) -> bool:
    """
    Check that ``probabilities`` is non-negative and sums to one.

    The tolerance on the sum is ``sqrt(eps)`` of the array dtype, so that
    single-precision tables are judged by single-precision rounding.
    """
    arr = np.asarray(probabilities)
    if arr.ndim != 1 or arr.size == 0:
        return False
    if not np.all(arr >= 0):
        return False
    dtype = arr.dtype if np.issubdtype(arr.dtype, np.floating) else np.dtype(np.float64)
    rtol = float(np.sqrt(np.finfo(dtype).eps))
    return bool(np.isclose(np.sum(arr, dtype=np.float64), 1.0, rtol=rtol, atol=0.0))


class Categorical:
    """
    Finite categorical distribution.

    Parameters
    ----------
    probabilities : array_like
        Probability of each category, in category order.
    values : array_like, optional
        Outcome label of each category (non-decreasing). Defaults to
        ``0, 1, ..., K - 1``.
    check_args : bool, default True
        Validate that ``probabilities`` is a probability vector.

    Raises
    ------
    InvalidParameterError
        If ``check_args`` is set and the table is not a probability vector,
        or if ``values`` does not match ``probabilities`` in size.
    """

    __slots__ = ("_p", "_values", "_cdf")

    def __init__(
        self,
        probabilities: Any,
        values: Any = None,
        check_args: bool = True,
    ) -> None:
        p = np.asarray(probabilities)
        if not np.issubdtype(p.dtype, np.floating):
            p = p.astype(np.float64)
        if check_args and not is_probability_vector(p):
            raise InvalidParameterError(
                'Constraint "probabilities form a probability vector" does not hold'
            )
        labels = np.arange(p.size) if values is None else np.asarray(values)
        if labels.shape != p.shape:
            raise InvalidParameterError("values and probabilities must have the same shape.")

        self._p = p
        self._values = labels
        self._cdf = np.cumsum(p)

    @classmethod
    def from_distribution(cls, distribution: Distribution) -> Categorical:
        """
        Tabulate a distribution with finite discrete support.

        Raises
        ------
        RuntimeError
            If the distribution's support is not a finite discrete support.
        """
        support = distribution.support
        if not isinstance(support, DiscreteSupport):
            raise RuntimeError("Tabulation requires a finite discrete support.")
        values = support.points
        pmf = distribution.query_method(CharacteristicName.PMF)
        return cls(np.asarray(pmf(values), dtype=np.float64), values, check_args=False)

    @property
    def probabilities(self) -> NumericArray:
        return cast("NumericArray", self._p)

    @property
    def values(self) -> IntArray | NumericArray:
        return self._values

    @property
    def ncategories(self) -> int:
        return int(self._p.size)

    def entropy(self) -> float:
        """Shannon entropy in nats."""
        return float(_shannon_entropy(self._p))

    def cdf(self, x: Any) -> Any:
        """``P(X <= x)`` for scalar or array ``x``; NaN for NaN ``x``."""
        arr = np.asarray(x, dtype=np.float64)
        idx = np.searchsorted(self._values, arr, side="right")
        padded = np.concatenate(([0.0], self._cdf))
        result = np.where(np.isnan(arr), np.nan, padded[idx])
        if np.ndim(arr) == 0:
            return float(result)
        return result

    def quantile(self, q: Any) -> Any:
        """
        Smallest outcome whose cumulative probability reaches ``q``.

        Parameters
        ----------
        q : float or array_like
            Probability level(s) in ``[0, 1]``.

        Raises
        ------
        ValueError
            If a probability is outside ``[0, 1]`` or is NaN.
        """
        arr = np.asarray(q, dtype=np.float64)
        if np.any(~((arr >= 0) & (arr <= 1))):
            raise ValueError("Probability must be in [0, 1]")

        idx = np.searchsorted(self._cdf, arr, side="left")
        # Rounding can leave the last cumulative value just below q
        idx = np.minimum(idx, self._p.size - 1)
        result = self._values[idx]
        if np.ndim(arr) == 0:
            return result.item()
        return result

    def median(self) -> Any:
        return self.quantile(0.5)

    def mode(self) -> Any:
        """First outcome of maximal probability."""
        return self._values[int(np.argmax(self._p))].item()

    def modes(self) -> list[Any]:
        """All outcomes of maximal probability, in ascending order."""
        return list(self._values[np.flatnonzero(self._p == np.max(self._p))].tolist())

    def sampler(self, rng: SeedLike = None) -> TabulatedSampler:
        return TabulatedSampler(self._values, self._p, rng=rng)


__all__ = [
    "Categorical",
    "is_probability_vector",
]
