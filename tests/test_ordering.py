from __future__ import annotations

import numpy as np
import pytest

from padjust.core_utils.ordering import (
    argsort,
    argsort_descending,
    invert_permutation,
    rank,
    rank_descending,
    reindex,
    sort_ascending,
    sort_descending,
)


def test_argsort():
    order = argsort([0.3, 0.2, 0.1, 0.4])
    np.testing.assert_array_equal(order, [2, 1, 0, 3])


def test_argsort_precision():
    order = argsort([3e-300, 2e-300, 1e-300, 4e-300])
    np.testing.assert_array_equal(order, [2, 1, 0, 3])


def test_argsort_descending():
    order = argsort_descending([0.3, 0.2, 0.1, 0.4])
    np.testing.assert_array_equal(order, [3, 0, 1, 2])


def test_argsort_descending_keeps_tie_order():
    order = argsort_descending([0.1, 0.4, 0.1, 0.4])
    np.testing.assert_array_equal(order, [1, 3, 0, 2])


def test_rank():
    ranks = rank([0.3, 0.2, 0.1, 0.4])
    np.testing.assert_array_equal(ranks, [2, 1, 0, 3])


def test_rank_descending():
    ranks = rank_descending([0.3, 0.2, 0.1, 0.4])
    np.testing.assert_array_equal(ranks, [1, 2, 3, 0])


def test_sort_ascending():
    np.testing.assert_array_equal(sort_ascending([0.3, 0.2, 0.1]), [0.1, 0.2, 0.3])


def test_sort_descending():
    np.testing.assert_array_equal(sort_descending([0.1, 0.2, 0.3]), [0.3, 0.2, 0.1])


def test_reindex():
    out = reindex([0.2, 0.1, 0.3], [1, 0, 2])
    np.testing.assert_array_equal(out, [0.1, 0.2, 0.3])


def test_invert_permutation_round_trip():
    permutation = np.array([4, 0, 3, 1, 2])
    inverse = invert_permutation(permutation)
    np.testing.assert_array_equal(inverse[permutation], np.arange(5))
    np.testing.assert_array_equal(permutation[inverse], np.arange(5))


@pytest.mark.parametrize(
    "values",
    [
        [0.5],
        [0.1, 0.2, 0.3, 0.4, 0.1],
        [0.9, 0.9, 0.9],
        [1e-12, 0.04, 0.04, 1.0, 0.0, 0.3],
    ],
)
def test_sort_then_reindex_by_rank_restores_input(values):
    np.testing.assert_array_equal(
        reindex(sort_descending(values), rank_descending(values)), values
    )
    np.testing.assert_array_equal(reindex(sort_ascending(values), rank(values)), values)


def test_random_permutation_relationship():
    values = np.random.default_rng(7).uniform(size=50)
    np.testing.assert_array_equal(
        reindex(sort_descending(values), rank_descending(values)), values
    )
    assert np.all(np.diff(sort_descending(values)) <= 0)


def test_empty_input():
    assert argsort([]).size == 0
    assert rank_descending([]).size == 0
    assert sort_descending([]).size == 0
    assert reindex([], []).size == 0


def test_nan_cannot_be_ordered():
    with pytest.raises(ValueError, match="positions: 1, 3"):
        argsort_descending([0.1, np.nan, 0.2, np.nan])
