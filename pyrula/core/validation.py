"""
Input validation utilities for PyRula.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of dimensions or indices
    - Out-of-range indices are errors, never clamped or wrapped
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Length mismatch between two vectors is NOT validated anywhere: binary
vector operations truncate to the shorter operand.
"""

from collections.abc import Sequence
from typing import Any

import numpy as np

from pyrula.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension.

    Args:
        value: Proposed number of rows or columns
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if not _is_integer(value):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Args:
        index: Index to check
        bound: Exclusive upper bound (nrow or ncol)
        axis: 'row' or 'column', for error messages

    Returns:
        The index as a Python int

    Raises:
        IndexOutOfBoundsError: If index is not an integer in [0, bound)
    """
    if not _is_integer(index):
        raise IndexOutOfBoundsError(
            f"{axis} index must be an integer, got {type(index).__name__} {index!r}",
            axis=axis,
            index=None,
            bound=bound,
        )
    if index < 0 or index >= bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of bounds for {axis} count {bound}",
            axis=axis,
            index=int(index),
            bound=bound,
        )
    return int(index)


def check_vector(u: Any, name: str) -> None:
    """
    Verify u can be used as a vector.

    Accepts 1-D numpy arrays and any non-string Sequence.

    Args:
        u: Candidate vector
        name: Parameter name for error messages

    Raises:
        DimensionError: If u is a numpy array that is not 1-D
        ValidationError: If u is not a sequence
    """
    if isinstance(u, np.ndarray):
        if u.ndim != 1:
            raise DimensionError(
                f"{name}: expected 1D array, got {u.ndim}D with shape {u.shape}"
            )
        return
    if isinstance(u, (str, bytes)) or not isinstance(u, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of scalars, got {type(u).__name__}"
        )


def check_mutable_vector(u: Any, name: str) -> None:
    """
    Verify u is a vector whose elements can be assigned in place.

    Args:
        u: Candidate vector
        name: Parameter name for error messages

    Raises:
        DimensionError: If u is a numpy array that is not 1-D
        ValidationError: If u is not a sequence, or is read-only
    """
    check_vector(u, name)
    if isinstance(u, np.ndarray):
        if not u.flags.writeable:
            raise ValidationError(f"{name}: array is read-only")
        return
    if not hasattr(u, '__setitem__'):
        raise ValidationError(
            f"{name}: {type(u).__name__} does not support item assignment"
        )


def check_predicate(predicate: Any, name: str) -> None:
    """
    Verify predicate is callable.

    Args:
        predicate: Candidate filter function
        name: Parameter name for error messages

    Raises:
        ValidationError: If predicate is not callable
    """
    if not callable(predicate):
        raise ValidationError(
            f"{name}: expected a callable, got {type(predicate).__name__}"
        )
