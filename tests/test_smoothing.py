import numpy as np
import pytest
from demandninja.smoothing import smooth_temperatures


@pytest.mark.parametrize("weights", [[0.5, 0.25], [0.9, 0.81], [0.0, 0.0], [0.3], [0.2, 0.0, 0.7]])
def test_constant_series_is_unchanged(weights):
    values = np.full(10, 12.3)
    np.testing.assert_allclose(smooth_temperatures(values, weights), values)


@pytest.mark.parametrize("weights", [[0.5, 0.25], [0.99, 0.98], [0.0, 0.4]])
def test_first_value_is_clamped(weights):
    values = np.array([4.0, 40.0, -8.0, 16.0])
    assert smooth_temperatures(values, weights)[0] == pytest.approx(4.0)


def test_hand_calculated():
    values = [0.0, 3.0, 6.0, 9.0]
    result = smooth_temperatures(values, [0.5, 0.25])
    # (T[t] + 0.5 T[t-1] + 0.25 T[t-2]) / 1.75, with T[-k] = T[0]
    expected = [0.0, 3.0 / 1.75, 7.5 / 1.75, 12.75 / 1.75]
    np.testing.assert_allclose(result, expected)


def test_zero_weight_still_shifts_the_lag():
    """A zero first weight is skipped, but the second weight still looks two steps back."""
    values = [0.0, 10.0, 20.0]
    result = smooth_temperatures(values, [0.0, 0.5])
    expected = [0.0, 10.0 / 1.5, (20.0 + 0.5 * 0.0) / 1.5]
    np.testing.assert_allclose(result, expected)


def test_no_weights_is_identity():
    values = np.array([1.0, 5.0, 2.0])
    np.testing.assert_allclose(smooth_temperatures(values, []), values)


def test_does_not_mutate_input():
    values = np.array([1.0, 2.0, 3.0])
    smooth_temperatures(values, [0.5, 0.25])
    np.testing.assert_array_equal(values, [1.0, 2.0, 3.0])


def test_empty_input():
    assert len(smooth_temperatures([], [0.5, 0.25])) == 0


def test_weights_longer_than_series():
    values = [2.0, 4.0]
    result = smooth_temperatures(values, [1.0, 1.0, 1.0])
    # t=1: 4 + 2 + 2 + 2 over 4
    np.testing.assert_allclose(result, [2.0, 2.5])
