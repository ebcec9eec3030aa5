"""Bonferroni family-wise error rate correction.

Each p-value is scaled by the number of tests and capped at 1. The rule is
applied independently per element, so no sorting is involved.

References
----------
Dunn, O. J. (1961). Multiple comparisons among means. Journal of the
American Statistical Association, 56, 52-64.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


class Bonferroni:
    """Bonferroni correction for a family of ``num_elements`` tests."""

    def __init__(self, num_elements: int) -> None:
        self.num_elements = int(num_elements)

    def adjust(self, p_value: float) -> float:
        """Return ``min(p_value * num_elements, 1.0)``."""
        return min(float(p_value) * self.num_elements, 1.0)

    @classmethod
    def adjust_slice(cls, p_values: Sequence[float] | np.ndarray) -> np.ndarray:
        """Apply the correction to every p-value, keeping input order.

        The family size is ``len(p_values)``. Empty input yields an empty
        array.
        """
        p_values_array = np.asarray(p_values, dtype=float).reshape(-1)
        corrector = cls(p_values_array.size)
        return np.minimum(p_values_array * corrector.num_elements, 1.0)


__all__ = ["Bonferroni"]
