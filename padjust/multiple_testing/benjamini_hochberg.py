"""Benjamini-Hochberg step-up FDR correction.

The correction scans p-values from the largest to the smallest. At rank
``r`` (1-based, counted from the smallest p-value, so the largest of ``n``
values has rank ``n``) the candidate q-value is ``p * n / r``. A running
minimum carried through the scan keeps q-values monotone: they never
increase as the scan moves towards smaller p-values.

References
----------
Benjamini, Y., and Hochberg, Y. (1995). Controlling the false discovery
rate: a practical and powerful approach to multiple testing. Journal of
the Royal Statistical Society Series B, 57, 289-300.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from padjust.core_utils.ordering import rank_descending, reindex, sort_descending


class BenjaminiHochberg:
    """Stateful Benjamini-Hochberg corrector for one descending scan.

    Parameters
    ----------
    num_elements : int
        Total number of tests in the family.

    Attributes
    ----------
    current_max : float
        Most recently emitted q-value (starts at 1.0). Only decreases or
        stays equal across successive :meth:`adjust` calls.

    Notes
    -----
    An instance carries scan state and must not be reused across unrelated
    scans or shared between concurrent callers.
    """

    def __init__(self, num_elements: int) -> None:
        self.num_elements = int(num_elements)
        self.current_max = 1.0

    def adjust(self, p_value: float, rank: int) -> float:
        """Adjust the next p-value of a descending scan.

        The result depends on previous calls through ``current_max``, so
        calls must come in descending p-value order. ``rank`` must be in
        ``1..num_elements``; ``rank=0`` raises ``ZeroDivisionError``.
        """
        candidate = float(p_value) * self.num_elements / rank
        q_value = min(candidate, self.current_max, 1.0)
        self.current_max = q_value
        return q_value

    @classmethod
    def adjust_slice(cls, p_values: Sequence[float] | np.ndarray) -> np.ndarray:
        """Adjust an unsorted sequence of p-values.

        Sorts descending, scans with ranks ``n, n-1, ..., 1`` and reindexes
        the q-values back to the caller's order.

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


__all__ = ["BenjaminiHochberg"]
