"""Shared ordering and input-handling helpers."""

from .data_utils import as_p_value_array, validate_p_values
from .ordering import (
    argsort,
    argsort_descending,
    invert_permutation,
    rank,
    rank_descending,
    reindex,
    sort_ascending,
    sort_descending,
)

__all__ = [
    "as_p_value_array",
    "validate_p_values",
    "argsort",
    "argsort_descending",
    "invert_permutation",
    "rank",
    "rank_descending",
    "reindex",
    "sort_ascending",
    "sort_descending",
]
