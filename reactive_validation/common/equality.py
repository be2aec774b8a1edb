"""Null- and NaN-aware value comparison used for change detection."""

from __future__ import annotations

import math
from typing import Any

import numpy as np


def is_nan(value: Any) -> bool:
    """
    Check whether a value is a floating-point NaN.

    Python floats and numpy floating scalars of any width are recognised.
    Anything else (including None, ints and arrays) is not NaN.
    """
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, np.floating):
        return bool(np.isnan(value))
    return False


def values_equal(value1: Any, value2: Any) -> bool:
    """
    Compare two values for change detection.

    Two values are equal if:
    - both are None, or
    - both are floating-point NaN (float32/float64/float mixes included), or
    - they have the same type and ``value1 == value2`` holds.

    Values of different types are never equal, so ``1``, ``1.0`` and ``True``
    are three distinct values. Lists and tuples are compared element by
    element and dicts value by value with these same rules, which keeps NaN
    and numpy array elements comparable. numpy arrays are compared with
    ``numpy.array_equal`` so the result is always a plain bool.

    Args:
        value1: First value
        value2: Second value

    Returns:
        True if the values are considered equal.

    Example:
        values_equal(None, None)                          # True
        values_equal(float("nan"), np.float32("nan"))     # True
        values_equal([1, 2], [1, 2])                      # True
        values_equal(None, 0)                             # False
        values_equal(1, True)                             # False
    """
    if value1 is None and value2 is None:
        return True
    if value1 is None or value2 is None:
        return False
    if is_nan(value1) and is_nan(value2):
        return True
    if type(value1) is not type(value2):
        return False
    if isinstance(value1, np.ndarray):
        return bool(np.array_equal(value1, value2))
    if isinstance(value1, (list, tuple)):
        return len(value1) == len(value2) and all(
            values_equal(item1, item2) for item1, item2 in zip(value1, value2)
        )
    if isinstance(value1, dict):
        return value1.keys() == value2.keys() and all(values_equal(value1[key], value2[key]) for key in value1)
    return bool(value1 == value2)
