"""
Samples and Samplers
====================

:class:`ArraySample` holds draws as an ``(n, d)`` array;
:class:`TabulatedSampler` draws outcomes of a finite table by inverse
transform on its cumulative probabilities.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    from pysatl_poibin.types import IntArray, NumericArray

    type SeedLike = int | np.random.Generator | None


class Sample(Protocol):
    """Draws of a distribution, one row per draw."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Sample backed by a 2D floating-point array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self._data = data

    def __len__(self) -> int:
        return int(self._data.shape[0])

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        rows, cols = self._data.shape
        return int(rows), int(cols)


class TabulatedSampler:
    """
    Reusable sampler for a finite discrete distribution.

    The cumulative table is built once; each draw is an inverse-transform
    lookup ``searchsorted(cdf, U)`` with ``U ~ U(0, 1)``.

    Parameters
    ----------
    values : numpy.ndarray
        Outcome labels, one per table entry.
    probabilities : numpy.ndarray
        Probability of each outcome. Assumed to be a probability vector.
    rng : int, numpy.random.Generator or None, optional
        Seed or generator used for draws.

    Raises
    ------
    ValueError
        If the table is empty or ``values`` and ``probabilities`` differ in
        shape.
    """

    __slots__ = ("_values", "_cdf", "_rng")

    def __init__(
        self,
        values: IntArray | NumericArray,
        probabilities: NumericArray,
        rng: SeedLike = None,
    ) -> None:
        values = np.asarray(values)
        probs = np.asarray(probabilities, dtype=np.float64)
        if values.shape != probs.shape or values.ndim != 1 or values.size == 0:
            raise ValueError("values and probabilities must be non-empty 1D arrays of equal size.")

        cdf = np.minimum(np.cumsum(probs), 1.0)
        # Rounding shortfall goes to the last outcome that has mass, never past it
        positive = np.flatnonzero(probs > 0)
        cdf[positive[-1] if positive.size else -1 :] = 1.0
        self._values = values
        self._cdf = cdf
        self._rng = np.random.default_rng(rng)

    @property
    def values(self) -> IntArray | NumericArray:
        return self._values

    def sample(self, n: int | None = None) -> Any:
        """
        Draw outcomes.

        Parameters
        ----------
        n : int or None, optional
            Number of draws. ``None`` draws a single scalar outcome.

        Returns
        -------
        scalar or numpy.ndarray
            One outcome, or a 1D array of ``n`` outcomes.
        """
        u = self._rng.random(n)
        idx = np.searchsorted(self._cdf, u, side="right")
        draws = self._values[idx]
        if n is None:
            return draws.item()
        return draws

    __call__ = sample


__all__ = [
    "Sample",
    "ArraySample",
    "TabulatedSampler",
]
