"""Annotate a DataFrame of test results with adjusted p-values.

Tests whose p-value is not finite are left out of the correction family:
they are given the conservative adjusted value 1.0 and are never marked
significant. The number of such tests is recorded on the returned frame
under ``attrs["multiple_testing_audit"]``.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from padjust import config

from .dispatcher import ProcedureLike, Procedure, apply_multiple_testing_correction

logger = logging.getLogger(__name__)


def annotate_adjusted_p_values(
    results_dataframe: pd.DataFrame,
    p_value_column: str,
    method: ProcedureLike | None = None,
    alpha: float | None = None,
    suffix: str | None = None,
) -> pd.DataFrame:
    """Add adjusted p-value and significance columns to a copy of the frame.

    Parameters
    ----------
    results_dataframe
        One row per hypothesis test
    p_value_column
        Column holding the raw p-values
    method
        Procedure or alias; defaults to ``config.DEFAULT_PROCEDURE``
    alpha
        Significance level; defaults to ``config.SIGNIFICANCE_ALPHA``
    suffix
        Suffix of the adjusted column; defaults to the procedure's short
        name upper-cased (``BH``, ``BY``, ``BONFERRONI``)

    Returns
    -------
    pd.DataFrame
        Input DataFrame augmented with columns:
        - <p_value_column>_<suffix>: adjusted p-value
        - <p_value_column>_Significant: True if rejected after correction

    Raises
    ------
    KeyError
        If ``p_value_column`` is missing
    ValueError
        If a finite p-value lies outside [0, 1] while validation is on
    """
    if p_value_column not in results_dataframe.columns:
        raise KeyError(
            f"Missing required column {p_value_column!r} in results dataframe."
        )

    procedure = Procedure.from_name(
        config.DEFAULT_PROCEDURE if method is None else method
    )
    alpha = float(config.SIGNIFICANCE_ALPHA if alpha is None else alpha)
    suffix = suffix or procedure.value.upper()

    annotated = results_dataframe.copy()
    p_values = pd.to_numeric(annotated[p_value_column], errors="coerce").to_numpy(
        dtype=float
    )
    valid = np.isfinite(p_values)
    n_invalid = int((~valid).sum())
    if n_invalid:
        logger.warning(
            "%d of %d p-values in %r are not finite; excluded from %s correction.",
            n_invalid,
            p_values.size,
            p_value_column,
            procedure.name,
        )

    adjusted_p = np.ones(p_values.size, dtype=float)
    reject_null = np.zeros(p_values.size, dtype=bool)
    valid_reject, valid_adjusted = apply_multiple_testing_correction(
        p_values[valid], alpha=alpha, method=procedure
    )
    adjusted_p[valid] = valid_adjusted
    reject_null[valid] = valid_reject

    annotated[f"{p_value_column}_{suffix}"] = adjusted_p
    annotated[f"{p_value_column}_Significant"] = reject_null
    annotated.attrs["multiple_testing_audit"] = {
        "total_tests": int(p_values.size),
        "invalid_tests": n_invalid,
        "method": procedure.value,
        "alpha": alpha,
    }
    return annotated


__all__ = ["annotate_adjusted_p_values"]
