from __future__ import annotations

from typing import Sequence

import numpy as np

from padjust import config


def as_p_value_array(p_values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Coerce p-values to a 1-D float array.

    Parameters
    ----------
    p_values
        Any sequence of reals (list, tuple, numpy array, pandas Series).

    Returns
    -------
    np.ndarray
        Float copy of the input

    Raises
    ------
    ValueError
        If the input has more than one dimension
    """
    array = np.array(p_values, dtype=float)
    if array.ndim == 0:
        raise ValueError("Expected a sequence of p-values, got a scalar.")
    if array.ndim > 1:
        raise ValueError(
            f"Expected a 1-D sequence of p-values, got shape {array.shape}."
        )
    return array


def validate_p_values(p_values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Check that every p-value is finite and lies in [0, 1].

    Parameters
    ----------
    p_values
        Sequence of p-values

    Returns
    -------
    np.ndarray
        The p-values as a 1-D float array

    Raises
    ------
    ValueError
        If any value is non-finite or outside [0, 1]
    """
    array = as_p_value_array(p_values)

    nonfinite = ~np.isfinite(array)
    if nonfinite.any():
        positions = np.flatnonzero(nonfinite)[: config.ERROR_PREVIEW_COUNT]
        preview = ", ".join(map(str, positions.tolist()))
        raise ValueError(f"Non-finite p-values at positions: {preview}.")

    out_of_range = (array < 0.0) | (array > 1.0)
    if out_of_range.any():
        positions = np.flatnonzero(out_of_range)[: config.ERROR_PREVIEW_COUNT]
        preview = ", ".join(f"{i} ({float(array[i])!r})" for i in positions.tolist())
        raise ValueError(f"P-values outside [0, 1] at positions: {preview}.")

    return array


__all__ = ["as_p_value_array", "validate_p_values"]
