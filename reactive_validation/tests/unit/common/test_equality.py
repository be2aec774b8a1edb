"""Unit tests for null/NaN-aware equality."""

import math

import numpy as np
import pytest

from reactive_validation.common import is_nan, values_equal


class TestValuesEqual:
    """Tests for values_equal."""

    def test_both_none_are_equal(self) -> None:
        """Two None values are equal."""
        assert values_equal(None, None)

    def test_none_and_value_differ(self) -> None:
        """None never equals a non-None value."""
        assert not values_equal(None, 0)
        assert not values_equal("", None)

    def test_float_nan_equals_float_nan(self) -> None:
        """NaN equals NaN, unlike ==."""
        assert values_equal(float("nan"), float("nan"))
        assert values_equal(math.nan, float("nan"))

    @pytest.mark.parametrize("dtype", [np.float16, np.float32, np.float64])
    def test_numpy_nan_equals_float_nan(self, dtype: type) -> None:
        """NaN of any numpy float width equals a Python NaN."""
        assert values_equal(dtype("nan"), float("nan"))
        assert values_equal(float("nan"), dtype("nan"))

    def test_mixed_width_nan_are_equal(self) -> None:
        """float32 NaN equals float64 NaN."""
        assert values_equal(np.float32("nan"), np.float64("nan"))

    def test_nan_and_number_differ(self) -> None:
        """NaN does not equal a regular number."""
        assert not values_equal(float("nan"), 1.0)
        assert not values_equal(0.0, np.float32("nan"))

    def test_regular_values_use_equality(self) -> None:
        """Non-special values of the same type compare with ==."""
        assert values_equal("a", "a")
        assert values_equal([1, 2], [1, 2])
        assert not values_equal([1, 2], [2, 1])

    def test_numpy_arrays_compare_element_wise(self) -> None:
        """Arrays are equal when shapes and elements match."""
        assert values_equal(np.array([1, 2]), np.array([1, 2]))
        assert not values_equal(np.array([1, 2]), np.array([1, 3]))
        assert not values_equal(np.array([1, 2]), np.array([1, 2, 3]))

    def test_different_types_differ(self) -> None:
        """Values of different types are never equal, even when == holds."""
        assert not values_equal(1, True)
        assert not values_equal(1, 1.0)
        assert not values_equal(0, False)
        assert not values_equal([1], (1,))
        assert not values_equal(np.float32(1.5), 1.5)

    def test_sequences_with_arrays_compare_element_wise(self) -> None:
        """Lists of arrays are compared element by element without raising."""
        assert values_equal([np.array([1.0, 2.0]), 3], [np.array([1.0, 2.0]), 3])
        assert not values_equal([np.array([1.0, 2.0]), 3], [np.array([5.0, 6.0]), 3])
        assert not values_equal((np.array([1.0]),), (np.array([1.0]), np.array([2.0])))

    def test_sequences_with_nan_are_equal(self) -> None:
        """Distinct NaN elements at the same position are equal."""
        assert values_equal([float("nan"), 1], [float("nan"), 1])
        assert not values_equal([float("nan")], [1.0])

    def test_nested_element_types_are_strict(self) -> None:
        """Element comparison applies the same type rule."""
        assert not values_equal([1, 2], [1, True])
        assert values_equal({"a": [1, np.array([2])]}, {"a": [1, np.array([2])]})
        assert not values_equal({"a": np.array([2])}, {"a": np.array([3])})
        assert not values_equal({"a": 1}, {"b": 1})


class TestIsNan:
    """Tests for is_nan."""

    def test_detects_nan(self) -> None:
        """Float and numpy NaN are detected."""
        assert is_nan(float("nan"))
        assert is_nan(np.float32("nan"))

    def test_non_floats_are_not_nan(self) -> None:
        """Non-float values are never NaN."""
        assert not is_nan(None)
        assert not is_nan("nan")
        assert not is_nan(1)
