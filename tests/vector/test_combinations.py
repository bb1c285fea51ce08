"""
Tests for lin_com (w = a*u + b*v) and mlt_add (u += a*v).

Both follow the truncation-to-minimum-length policy: only the first
min(len(u), len(v)) elements take part.
"""

from __future__ import annotations

from fractions import Fraction

import numpy as np
import pytest

from pyrula.core.exceptions import ConversionError, ValidationError
from pyrula.vector import lin_com, mlt_add


class TestLinCom:

    def test_truncates_to_shorter(self):
        u = [1, 2]
        v = [2, 9, 1]
        w = lin_com(2, u, 1, v)
        assert len(w) == 2
        assert w == [4, 13]

    def test_inputs_unchanged(self):
        u = [1, 2]
        v = [2, 9, 1]
        lin_com(2, u, 1, v)
        assert u == [1, 2]
        assert v == [2, 9, 1]

    def test_tuple_input_gives_list(self):
        assert lin_com(1, (1, 2), 1, (3, 4)) == [4, 6]

    def test_numpy_arrays(self):
        u = np.array([1.0, 2.0])
        v = np.array([2.0, 9.0, 1.0])
        w = lin_com(2.0, u, 1.0, v)
        np.testing.assert_array_equal(w, [4.0, 13.0])
        assert w.dtype == np.float64

    def test_numpy_dtype_preserved_with_python_coefficients(self):
        u = np.array([1, 2], dtype=np.int8)
        v = np.array([2, 9, 1], dtype=np.int8)
        w = lin_com(2, u, 1, v)
        assert w.dtype == np.int8
        np.testing.assert_array_equal(w, [4, 13])

    def test_result_is_independent_of_inputs(self):
        u = np.array([1.0, 2.0])
        v = np.array([3.0, 4.0])
        w = lin_com(1.0, u, 0.0, v)
        w[0] = 100.0
        assert u[0] == 1.0

    def test_fractions(self):
        u = [Fraction(2), Fraction(4)]
        v = [Fraction(1), Fraction(1)]
        assert lin_com(Fraction(1, 2), u, 1, v) == [Fraction(2), Fraction(3)]

    def test_empty(self):
        assert lin_com(1, [], 1, [1, 2]) == []

    def test_coefficient_must_convert(self):
        with pytest.raises(ConversionError):
            lin_com(0.5, [1, 2], 1, [3, 4])

    def test_coefficient_out_of_range_rejected(self):
        u = np.array([1, 2], dtype=np.int8)
        with pytest.raises(ConversionError, match="a: cannot convert 300"):
            lin_com(300, u, 1, u)

    def test_vectors_must_share_type(self):
        with pytest.raises(ConversionError):
            lin_com(1, [1, 2], 1, [Fraction(1), Fraction(2)])

    def test_matches_elementwise_definition(self, random_pair):
        u, v = random_pair
        w = lin_com(0.5, u, -2.0, v)
        assert len(w) == min(len(u), len(v))
        for i in range(len(w)):
            assert w[i] == 0.5 * u[i] + -2.0 * v[i]


class TestMltAdd:

    def test_truncates_to_shorter(self):
        u = [1, 2]
        mlt_add(u, 2, [2, 9, 1])
        assert u == [5, 20]

    def test_longer_target_tail_untouched(self):
        u = [1, 2, 3]
        mlt_add(u, 2, [1])
        assert u == [3, 2, 3]

    def test_returns_none(self):
        assert mlt_add([1.0], 1.0, [1.0]) is None

    def test_mixed_types_widen_into_target(self):
        u = np.array([1.0, 2.0])
        v = np.array([2, 4], dtype=np.int32)
        mlt_add(u, 0.5, v)
        np.testing.assert_array_equal(u, [2.0, 4.0])

    def test_exact_target_with_integer_sources(self):
        u = [Fraction(1, 3), Fraction(2, 3)]
        mlt_add(u, 3, [1, 1, 1])
        assert u == [Fraction(10, 3), Fraction(11, 3)]

    def test_list_target_from_array_source(self):
        u = [1.0, 1.0]
        mlt_add(u, 2.0, np.array([1.5, 2.5]))
        assert u == [4.0, 6.0]

    def test_narrowing_source_rejected(self):
        u = np.array([1.0, 2.0], dtype=np.float32)
        with pytest.raises(ConversionError):
            mlt_add(u, 1.0, np.array([1.0, 1.0], dtype=np.float64))
        np.testing.assert_array_equal(u, [1.0, 2.0])

    def test_python_floats_into_float32_target_rejected(self):
        u = np.array([1.0, 2.0], dtype=np.float32)
        with pytest.raises(ConversionError):
            mlt_add(u, 1.0, [0.1, 0.2])
        np.testing.assert_array_equal(u, [1.0, 2.0])

    def test_python_coefficient_adopts_float32_target(self):
        u = np.array([1.0, 2.0], dtype=np.float32)
        mlt_add(u, 0.5, np.array([2.0, 4.0], dtype=np.float32))
        assert u.dtype == np.float32
        np.testing.assert_array_equal(u, [2.0, 4.0])

    def test_coefficient_must_convert(self):
        u = [1, 2]
        with pytest.raises(ConversionError):
            mlt_add(u, 0.5, [1, 1])
        assert u == [1, 2]

    def test_tuple_target_rejected(self):
        with pytest.raises(ValidationError, match="item assignment"):
            mlt_add((1, 2), 1, [1, 1])

    def test_source_unchanged(self):
        v = [2, 9, 1]
        mlt_add([1, 2], 2, v)
        assert v == [2, 9, 1]
