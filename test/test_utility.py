import pytest

from fuzzycore.errors import LengthMismatchError
from fuzzycore.utility import UtilityCalculator


def test_equal_factors():
    assert UtilityCalculator.calculate_utility([1, 1], [1, 1]) == pytest.approx(1.0)


def test_weighted_average():
    # (0.2 * 1 + 0.8 * 3) / 4 = 0.65
    assert UtilityCalculator.calculate_utility([0.2, 0.8], [1.0, 3.0]) == pytest.approx(0.65)


def test_zero_weights_return_zero():
    assert UtilityCalculator.calculate_utility([0.4, 0.9], [0.0, 0.0]) == 0.0


def test_empty_lists_return_zero():
    assert UtilityCalculator.calculate_utility([], []) == 0.0


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        UtilityCalculator.calculate_utility([1.0, 2.0], [1.0])
