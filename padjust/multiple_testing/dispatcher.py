"""Dispatcher for multiple testing correction methods.

This module provides a unified interface for selecting and applying
different correction procedures based on an enum member or a string
identifier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

import numpy as np

from padjust import config
from padjust.core_utils.data_utils import as_p_value_array, validate_p_values

from .benjamini_hochberg import BenjaminiHochberg
from .benjamini_yekutieli import BenjaminiYekutieli
from .bonferroni import Bonferroni

logger = logging.getLogger(__name__)


class Procedure(Enum):
    """Available adjustment procedures."""

    BONFERRONI = "bonferroni"  # FWER
    BENJAMINI_HOCHBERG = "bh"  # FDR, independent or positively dependent tests
    BENJAMINI_YEKUTIELI = "by"  # FDR, arbitrary dependence

    @classmethod
    def from_name(cls, name: Union[str, "Procedure"]) -> "Procedure":
        """Resolve a procedure from a member or a (case-insensitive) alias.

        Raises
        ------
        ValueError
            If the name is not a known procedure or alias
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        try:
            return cls(config.PROCEDURE_ALIASES[key])
        except KeyError:
            supported = ", ".join(repr(alias) for alias in config.PROCEDURE_ALIASES)
            raise ValueError(
                f"Unknown correction method: {name!r}. Supported methods: {supported}"
            ) from None


ProcedureLike = Union[str, Procedure]

_CORRECTORS = {
    Procedure.BONFERRONI: Bonferroni,
    Procedure.BENJAMINI_HOCHBERG: BenjaminiHochberg,
    Procedure.BENJAMINI_YEKUTIELI: BenjaminiYekutieli,
}


@dataclass
class CorrectionResult:
    """Results from a multiple testing correction.

    Attributes
    ----------
    adjusted_p : np.ndarray
        Adjusted p-values, aligned to the input
    reject : np.ndarray
        Boolean array of rejections (True = reject null hypothesis)
    method : Procedure
        Procedure applied
    alpha : float
        Significance level used for the rejections
    """

    adjusted_p: np.ndarray
    reject: np.ndarray
    method: Procedure
    alpha: float

    @property
    def n_tests(self) -> int:
        return int(self.adjusted_p.size)

    @property
    def n_rejected(self) -> int:
        return int(np.count_nonzero(self.reject))


def adjust(
    p_values: Sequence[float] | np.ndarray,
    method: ProcedureLike | None = None,
    validate: bool | None = None,
) -> np.ndarray:
    """Adjust p-values for multiple testing.

    The p-values do not need to be sorted; the result is aligned to the
    input order.

    Parameters
    ----------
    p_values
        P-values of the individual tests
    method
        Procedure or alias (e.g. ``"fdr"`` for Benjamini-Hochberg).
        Defaults to ``config.DEFAULT_PROCEDURE``.
    validate
        Reject non-finite values and values outside [0, 1] before
        correcting. Defaults to ``config.VALIDATE_P_VALUES``.

    Returns
    -------
    np.ndarray
        Adjusted p-values

    Raises
    ------
    ValueError
        If the method is unknown, or validation is on and the input holds
        invalid p-values

    Examples
    --------
    >>> adjust([0.1, 0.2, 0.3, 0.4, 0.1], method="bonferroni")
    array([0.5, 1. , 1. , 1. , 0.5])
    """
    procedure = Procedure.from_name(
        config.DEFAULT_PROCEDURE if method is None else method
    )
    if validate is None:
        validate = config.VALIDATE_P_VALUES

    if validate:
        p_values_array = validate_p_values(p_values)
    else:
        p_values_array = as_p_value_array(p_values)

    logger.debug(
        "Adjusting %d p-values with %s.", p_values_array.size, procedure.name
    )
    return _CORRECTORS[procedure].adjust_slice(p_values_array)


def apply_multiple_testing_correction(
    p_values: Sequence[float] | np.ndarray,
    alpha: float | None = None,
    method: ProcedureLike | None = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Adjust p-values and decide which null hypotheses to reject.

    Parameters
    ----------
    p_values
        P-values of the individual tests
    alpha
        Significance level; defaults to ``config.SIGNIFICANCE_ALPHA``
    method
        Procedure or alias; defaults to ``config.DEFAULT_PROCEDURE``

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        (reject_null, adjusted_p_values) arrays aligned to input

    Raises
    ------
    ValueError
        If alpha is not in (0, 1), or see :func:`adjust`
    """
    alpha = _check_alpha(alpha)

    adjusted_p = adjust(p_values, method=method)
    if adjusted_p.size == 0:
        return np.zeros(0, dtype=bool), np.zeros(0, dtype=float)

    reject_null = adjusted_p <= alpha
    return reject_null, adjusted_p


def multiple_testing_correction(
    p_values: Sequence[float] | np.ndarray,
    alpha: float | None = None,
    method: ProcedureLike | None = None,
) -> CorrectionResult:
    """Like :func:`apply_multiple_testing_correction`, bundled with metadata."""
    alpha = _check_alpha(alpha)
    procedure = Procedure.from_name(
        config.DEFAULT_PROCEDURE if method is None else method
    )
    reject, adjusted_p = apply_multiple_testing_correction(
        p_values, alpha=alpha, method=procedure
    )
    return CorrectionResult(
        adjusted_p=adjusted_p, reject=reject, method=procedure, alpha=alpha
    )


def _check_alpha(alpha: float | None) -> float:
    alpha = float(config.SIGNIFICANCE_ALPHA if alpha is None else alpha)
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"alpha must lie in (0, 1), got {alpha!r}.")
    return alpha


__all__ = [
    "Procedure",
    "CorrectionResult",
    "adjust",
    "apply_multiple_testing_correction",
    "multiple_testing_correction",
]
