"""
Tests for in-place scale and zero.
"""

from __future__ import annotations

import numpy as np
import pytest

from pyrula.core.exceptions import CapabilityError, ConversionError
from pyrula.vector import dot, scale, zero


class TestScale:

    def test_list(self):
        u = [1, 2, 3]
        scale(u, 3)
        assert u == [3, 6, 9]

    def test_numpy_array_in_place(self):
        u = np.array([1.0, 2.0, 3.0])
        buffer = u
        scale(u, 0.5)
        assert buffer is u
        np.testing.assert_array_equal(u, [0.5, 1.0, 1.5])

    def test_strided_view_touches_only_subset(self):
        arr = np.arange(6.0)
        scale(arr[::2], 10.0)
        np.testing.assert_array_equal(arr, [0.0, 1.0, 20.0, 3.0, 40.0, 5.0])

    def test_dtype_preserved(self):
        u = np.array([1, 2], dtype=np.int16)
        scale(u, 3)
        assert u.dtype == np.int16
        np.testing.assert_array_equal(u, [3, 6])

    def test_user_scalar(self, mod7):
        u = [mod7(3), mod7(5)]
        scale(u, mod7(2))
        assert u == [mod7(6), mod7(3)]

    def test_empty_is_noop(self):
        u = []
        scale(u, 2)
        assert u == []

    def test_factor_must_convert(self):
        u = [1, 2]
        with pytest.raises(ConversionError):
            scale(u, 1.5)
        assert u == [1, 2]

    def test_factor_must_fit_array_dtype(self):
        u = np.array([1, 2], dtype=np.int8)
        with pytest.raises(ConversionError):
            scale(u, 300)
        np.testing.assert_array_equal(u, [1, 2])

    def test_non_numerical_rejected(self, add_only):
        with pytest.raises(CapabilityError):
            scale([add_only(1)], add_only(2))


class TestZero:

    def test_list_of_floats(self):
        u = [1.5, -2.0, 3.25]
        zero(u)
        assert u == [0.0, 0.0, 0.0]
        assert all(type(x) is float for x in u)

    def test_then_dot_is_zero(self, rng):
        u = rng.standard_normal(10)
        zero(u)
        assert dot(u, u) == 0.0

    def test_integer_array(self):
        u = np.array([7, -3, 12], dtype=np.int8)
        zero(u)
        assert u.dtype == np.int8
        np.testing.assert_array_equal(u, [0, 0, 0])

    def test_user_scalar(self, mod7):
        u = [mod7(1), mod7(6)]
        zero(u)
        assert u == [mod7(0), mod7(0)]
