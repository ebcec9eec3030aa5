from __future__ import annotations

import numpy as np
import pytest

from padjust.multiple_testing.benjamini_hochberg import BenjaminiHochberg


def test_adjust_slice_example():
    adjusted = BenjaminiHochberg.adjust_slice([0.1, 0.2, 0.3, 0.4, 0.1])
    np.testing.assert_allclose(
        adjusted, [0.25, 0.3333333333333333, 0.375, 0.4, 0.25], rtol=1e-15
    )


def test_adjust_slice_empty():
    assert BenjaminiHochberg.adjust_slice([]).size == 0


def test_adjust_is_stateful():
    corrector = BenjaminiHochberg(100)
    assert corrector.adjust(0.001, 1) == pytest.approx(0.1)
    assert corrector.adjust(0.001, 2) == pytest.approx(0.05)
    assert corrector.adjust(0.001, 3) == pytest.approx(0.0333333333)
    assert corrector.current_max == pytest.approx(0.0333333333)


def test_running_minimum_caps_later_values():
    corrector = BenjaminiHochberg(4)
    assert corrector.adjust(0.04, 4) == pytest.approx(0.04)
    # 0.039 * 4 / 3 = 0.052, capped by the previous q-value
    assert corrector.adjust(0.039, 3) == pytest.approx(0.04)


def test_descending_input_gives_non_increasing_q_values():
    p_values = np.sort(np.random.default_rng(11).uniform(size=100))[::-1]
    adjusted = BenjaminiHochberg.adjust_slice(p_values)
    assert np.all(np.diff(adjusted) <= 0)


def test_q_values_bounded_and_not_below_p_values():
    p_values = np.random.default_rng(5).uniform(size=64)
    adjusted = BenjaminiHochberg.adjust_slice(p_values)
    assert adjusted.shape == p_values.shape
    assert np.all((adjusted >= 0.0) & (adjusted <= 1.0))
    assert np.all(adjusted >= p_values)


def test_tied_p_values_share_q_value():
    adjusted = BenjaminiHochberg.adjust_slice([0.02, 0.5, 0.02, 0.02, 0.9])
    assert adjusted[0] == adjusted[2] == adjusted[3]


def test_nan_is_rejected():
    with pytest.raises(ValueError, match="NaN"):
        BenjaminiHochberg.adjust_slice([0.1, float("nan")])


def test_rank_zero_is_a_precondition_violation():
    with pytest.raises(ZeroDivisionError):
        BenjaminiHochberg(3).adjust(0.1, 0)
