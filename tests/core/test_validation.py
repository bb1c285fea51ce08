"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: non-negative integer dimensions
    - check_index: bounds checking without clamping or wrapping
    - check_vector / check_mutable_vector: accepted vector containers
    - check_predicate: callables only
"""

import numpy as np
import pytest

from pyrula.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pyrula.core.validation import (
    check_dimension,
    check_index,
    check_mutable_vector,
    check_predicate,
    check_vector,
)


class TestCheckDimension:

    def test_zero_is_valid(self):
        assert check_dimension(0, 'nrow') == 0

    def test_numpy_integer_is_converted(self):
        result = check_dimension(np.int32(4), 'ncol')
        assert result == 4
        assert type(result) is int

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match="nrow: must be non-negative"):
            check_dimension(-1, 'nrow')

    def test_float_raises(self):
        with pytest.raises(ValidationError, match="ncol"):
            check_dimension(2.0, 'ncol')

    def test_bool_raises(self):
        with pytest.raises(ValidationError):
            check_dimension(True, 'nrow')


class TestCheckIndex:

    def test_valid_index(self):
        assert check_index(2, 3, 'row') == 2

    def test_index_equal_to_bound_raises(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index(3, 3, 'row')
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == 'row'

    def test_negative_index_is_not_wrapped(self):
        with pytest.raises(IndexOutOfBoundsError, match="column index -1"):
            check_index(-1, 3, 'column')

    def test_zero_bound_rejects_everything(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index(0, 0, 'row')

    def test_non_integer_raises(self):
        with pytest.raises(IndexOutOfBoundsError, match="must be an integer"):
            check_index(1.5, 3, 'row')


class TestCheckVector:

    def test_list_and_tuple_accepted(self):
        check_vector([1, 2], 'u')
        check_vector((1, 2), 'u')

    def test_1d_array_accepted(self):
        check_vector(np.zeros(3), 'u')

    def test_2d_array_raises(self):
        with pytest.raises(DimensionError, match="u: expected 1D array, got 2D"):
            check_vector(np.zeros((2, 2)), 'u')

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="v: expected a sequence"):
            check_vector("abc", 'v')

    def test_scalar_rejected(self):
        with pytest.raises(ValidationError):
            check_vector(3, 'u')


class TestCheckMutableVector:

    def test_list_accepted(self):
        check_mutable_vector([1, 2], 'u')

    def test_tuple_rejected(self):
        with pytest.raises(ValidationError, match="does not support item assignment"):
            check_mutable_vector((1, 2), 'u')

    def test_read_only_array_rejected(self):
        arr = np.zeros(3)
        arr.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            check_mutable_vector(arr, 'u')


class TestCheckPredicate:

    def test_callable_accepted(self):
        check_predicate(bool, 'predicate')

    def test_non_callable_rejected(self):
        with pytest.raises(ValidationError, match="predicate: expected a callable"):
            check_predicate(42, 'predicate')
