"""
Shared helpers for vector operations.

Scalar type resolution for pairs of vectors, element conversion, and
construction of result vectors of the same kind as an input.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from pyrula.core.exceptions import ConversionError
from pyrula.traits.conversion import convert, is_convertible
from pyrula.traits.numerical import scalar_type_of

Vector = Sequence[Any] | np.ndarray


def is_native_array(u: Any) -> bool:
    """True for numpy arrays with a numeric (non-object) dtype."""
    return isinstance(u, np.ndarray) and u.dtype != object


def shared_type(u: Vector, v: Vector, operation: str) -> type:
    """
    Resolve the single scalar type two vectors share.

    Two types are treated as one only when each converts into the other
    (float and numpy.float64, for instance), in which case the first
    operand's type wins. A list of Python floats and a float32 array do
    not share a type: only one direction is lossless, so the pair is
    rejected rather than narrowed.

    Raises:
        ConversionError: If the vectors hold different scalar types
    """
    tu = scalar_type_of(u, default=None)
    tv = scalar_type_of(v, default=None)
    if tu is None and tv is None:
        return int
    if tu is None:
        return tv
    if tv is None or tu is tv:
        return tu
    if is_convertible(tu, tv) and is_convertible(tv, tu):
        return tu
    raise ConversionError(
        f"{operation} requires vectors of one scalar type, got "
        f"{tu.__name__} and {tv.__name__}; use dot_in for mixed precision",
        source_type=tv,
        target_type=tu,
    )


def converted(u: Vector, target: type) -> Iterator[Any]:
    """Iterate over u with every element converted into target."""
    source = scalar_type_of(u, default=target)
    if source is target:
        return iter(u)
    return (convert(x, target) for x in u)


def clone(x: Any) -> Any:
    return copy.copy(x)


def new_like(u: Vector, values: Iterable[Any]) -> Vector:
    """
    Build a new vector of the same kind as u.

    numpy arrays produce numpy arrays of the same dtype; every other
    sequence produces a list.
    """
    if not isinstance(u, np.ndarray):
        return list(values)
    if u.dtype != object:
        return np.array(list(values), dtype=u.dtype)
    items = list(values)
    out = np.empty(len(items), dtype=object)
    for i, x in enumerate(items):
        out[i] = x
    return out
