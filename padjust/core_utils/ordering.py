"""Sort permutations, ranks and reindexing over sequences of reals.

The correctors work on p-values sorted in descending order and map their
results back to the caller's order. The helpers here keep that bookkeeping
in one place:

    sorted_values = sort_descending(values)
    ...                                  # work in sorted order
    result = reindex(sorted_result, rank_descending(values))

so that ``reindex(sort_descending(v), rank_descending(v))`` reproduces ``v``.

All sorts are stable: tied values keep their original relative order. The
descending permutation is a direct descending sort, not the reverse of the
ascending one, so ties are ordered the same way in both directions.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from padjust import config


def _as_orderable(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a 1-D float array, refusing NaN.

    Raises
    ------
    ValueError
        If any value is NaN, since NaN has no place in a total order.
    """
    array = np.asarray(values, dtype=float).reshape(-1)
    nan_mask = np.isnan(array)
    if nan_mask.any():
        positions = np.flatnonzero(nan_mask)[: config.ERROR_PREVIEW_COUNT]
        preview = ", ".join(map(str, positions.tolist()))
        raise ValueError(f"Cannot order NaN values (positions: {preview}).")
    return array


def argsort(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Indices that sort ``values`` in ascending order."""
    return np.argsort(_as_orderable(values), kind="stable")


def argsort_descending(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Indices that sort ``values`` in descending order."""
    # Negating keeps the stable tie order of the ascending sort.
    return np.argsort(-_as_orderable(values), kind="stable")


def invert_permutation(permutation: Sequence[int] | np.ndarray) -> np.ndarray:
    """Return ``inverse`` such that ``inverse[permutation[i]] == i``."""
    permutation = np.asarray(permutation, dtype=np.intp)
    inverse = np.empty_like(permutation)
    inverse[permutation] = np.arange(permutation.size, dtype=np.intp)
    return inverse


def rank(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """0-based position of each element within the ascending order."""
    return invert_permutation(argsort(values))


def rank_descending(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """0-based position of each element within the descending order."""
    return invert_permutation(argsort_descending(values))


def sort_ascending(values: Sequence[float] | np.ndarray) -> np.ndarray:
    array = _as_orderable(values)
    return array[np.argsort(array, kind="stable")]


def sort_descending(values: Sequence[float] | np.ndarray) -> np.ndarray:
    array = _as_orderable(values)
    return array[np.argsort(-array, kind="stable")]


def reindex(
    values: Sequence[float] | np.ndarray,
    permutation: Sequence[int] | np.ndarray,
) -> np.ndarray:
    """Return ``out`` with ``out[i] = values[permutation[i]]``.

    Parameters
    ----------
    values
        Values to look up, typically results computed in sorted order.
    permutation
        Lookup table, typically a rank array from :func:`rank` or
        :func:`rank_descending`.
    """
    array = np.asarray(values, dtype=float).reshape(-1)
    return array[np.asarray(permutation, dtype=np.intp)]


__all__ = [
    "argsort",
    "argsort_descending",
    "invert_permutation",
    "rank",
    "rank_descending",
    "reindex",
    "sort_ascending",
    "sort_descending",
]
