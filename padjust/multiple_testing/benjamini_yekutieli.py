"""Benjamini-Yekutieli step-up FDR correction under arbitrary dependence.

Same scan as Benjamini-Hochberg, with each candidate additionally scaled
by the harmonic number ``H(n) = 1 + 1/2 + ... + 1/n``:

    q_r = min(p_r * H(n) * n / r, q_{r+1}, 1)

Since ``H(n) >= 1`` for ``n >= 1`` the result is never below the
Benjamini-Hochberg q-value for the same input.

References
----------
Benjamini, Y., and Yekutieli, D. (2001). The control of the false discovery
rate in multiple testing under dependency. Annals of Statistics, 29(4),
1165-1188.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from padjust.core_utils.ordering import rank_descending, reindex, sort_descending


def harmonic_number(num_elements: int) -> float:
    """Sum of ``1/k`` for ``k = 1..num_elements`` (0.0 for an empty family).

    Summed left to right in plain floats so results are reproducible
    independently of numpy's pairwise summation.
    """
    return sum(1.0 / k for k in range(1, num_elements + 1))


class BenjaminiYekutieli:
    """Stateful Benjamini-Yekutieli corrector for one descending scan.

    Parameters
    ----------
    num_elements : int, default=0
        Total number of tests in the family.

    Attributes
    ----------
    current_max : float
        Most recently emitted q-value (starts at 1.0).
    cumulative : float
        Harmonic number ``H(num_elements)``, fixed at construction.

    Notes
    -----
    With ``num_elements=0`` the harmonic number is 0; such an instance has
    nothing to adjust and :meth:`adjust` should not be called on it.
    """

    def __init__(self, num_elements: int = 0) -> None:
        self.num_elements = int(num_elements)
        self.current_max = 1.0
        self.cumulative = harmonic_number(self.num_elements)

    def adjust(self, p_value: float, rank: int) -> float:
        """Adjust the next p-value of a descending scan.

        Same calling contract as :meth:`BenjaminiHochberg.adjust`.
        """
        candidate = float(p_value) * self.cumulative * (self.num_elements / rank)
        q_value = min(candidate, self.current_max, 1.0)
        self.current_max = q_value
        return q_value

    @classmethod
    def adjust_slice(cls, p_values: Sequence[float] | np.ndarray) -> np.ndarray:
        """Adjust an unsorted sequence of p-values, keeping input order.

        Raises
        ------
        ValueError
            If any p-value is NaN
        """
        p_values_array = np.asarray(p_values, dtype=float).reshape(-1)
        n = p_values_array.size
        if n == 0:
            return np.array([], dtype=float)

        corrector = cls(n)
        original_index = rank_descending(p_values_array)
        sorted_q_values = [
            corrector.adjust(p, n - idx)
            for idx, p in enumerate(sort_descending(p_values_array))
        ]
        return reindex(sorted_q_values, original_index)


__all__ = ["BenjaminiYekutieli", "harmonic_number"]
