"""
Vector arithmetic built on the capability traits.

A vector is any 1-D numpy array (including row and column views of a
FullMatrix) or any non-string sequence of scalars of one type. Mutating
operations need a list, an array, or another sequence supporting item
assignment.

Every binary operation follows the truncation-to-minimum-length policy:
it works on exactly min(len(u), len(v)) elements, ignores the rest of the
longer operand, and never raises for a length mismatch.

Capability and conversion requirements are checked on entry, before any
element is read, and violations raise CapabilityError / ConversionError.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyrula.core.exceptions import ValidationError
from pyrula.core.validation import (
    check_mutable_vector,
    check_predicate,
    check_vector,
)
from pyrula.traits.conversion import (
    check_convertible,
    check_value_convertible,
    convert,
)
from pyrula.traits.numerical import (
    check_field_like,
    check_numerical,
    scalar_type_of,
)
from pyrula.traits.zero import zero_of
from pyrula.vector._common import (
    Vector,
    clone,
    converted,
    is_native_array,
    new_like,
    shared_type,
)


def dot(u: Vector, v: Vector) -> Any:
    """
    Dot product of two vectors of the same scalar type.

    Sums u[i] * v[i] for i below min(len(u), len(v)), starting from the
    additive identity of the scalar type. Extra elements of the longer
    vector are ignored.

    Args:
        u: First vector
        v: Second vector

    Returns:
        Scalar of the vectors' type

    Raises:
        CapabilityError: If the scalar type is not Numerical
        ConversionError: If u and v hold different scalar types

    Examples:
        >>> dot([1, 2, 3], [0, 6, 2])
        18
        >>> dot([1.0, 2.0, 3.0, 4.0], [0.0, 6.0, 2.0])
        18.0
    """
    check_vector(u, 'u')
    check_vector(v, 'v')
    t = shared_type(u, v, 'dot')
    check_numerical(t)

    if is_native_array(u) and is_native_array(v) and u.dtype == v.dtype:
        n = min(len(u), len(v))
        return np.dot(u[:n], v[:n])

    acc = zero_of(t)
    for x, y in zip(converted(u, t), converted(v, t)):
        acc = acc + x * y
    return acc


def dot_in(dest: NDArray, u: Vector, v: Vector) -> NDArray:
    """
    Dot product accumulated in a (possibly wider) destination type.

    The destination is a size-1 numpy array whose dtype defines the
    accumulation type D. It is reset to zero, then every product
    convert(u[i], D) * convert(v[i], D) is added to it. u and v may hold
    different scalar types as long as both convert into D.

    Args:
        dest: 0-d or single-element writable array receiving the result
        u: First vector
        v: Second vector

    Returns:
        dest, for chaining

    Raises:
        ValidationError: If dest is not a writable single-element array
        CapabilityError: If D or an element type is not Numerical
        ConversionError: If an element type does not convert into D

    Examples:
        >>> d = np.zeros((), dtype=np.float64)
        >>> float(dot_in(d, np.array([0, 6, 2], dtype=np.int32), [1.0, 2.0, 3.0]))
        18.0
    """
    if not isinstance(dest, np.ndarray) or dest.size != 1:
        raise ValidationError(
            f"dest: expected a single-element numpy array, got {type(dest).__name__}"
            + (f" with shape {dest.shape}" if isinstance(dest, np.ndarray) else "")
        )
    if not dest.flags.writeable:
        raise ValidationError("dest: array is read-only")
    check_vector(u, 'u')
    check_vector(v, 'v')

    target = scalar_type_of(dest.reshape(-1))
    check_numerical(target)
    for name, vec in (('u', u), ('v', v)):
        source = scalar_type_of(vec, default=target)
        check_numerical(source)
        check_convertible(source, target)

    dest.flat[0] = zero_of(target)
    acc = zero_of(target)
    for x, y in zip(converted(u, target), converted(v, target)):
        acc += x * y
    dest.flat[0] = acc
    return dest


def square_norm(u: Vector) -> Any:
    """
    Squared Euclidean norm, dot(u, u).

    Examples:
        >>> square_norm([1.0, 2.0, 3.0])
        14.0
    """
    return dot(u, u)


def norm(u: Vector) -> float:
    """
    Euclidean norm as a double precision float.

    Computes sqrt(float(square_norm(u))). The scalar type must convert
    into a double precision float; complex vectors are rejected.

    Raises:
        CapabilityError: If the scalar type is not Numerical
        ConversionError: If the scalar type does not convert into float

    Examples:
        >>> norm([1, 2, 3]) == math.sqrt(14)
        True
    """
    check_vector(u, 'u')
    t = scalar_type_of(u)
    check_numerical(t)
    check_convertible(t, float)
    return math.sqrt(convert(square_norm(u), float))


def lin_com(a: Any, u: Vector, b: Any, v: Vector) -> Vector:
    """
    Linear combination w = a * u + b * v.

    The result has length min(len(u), len(v)). A numpy array u yields an
    array of the same dtype; any other sequence yields a list.

    Args:
        a: Coefficient applied to u
        u: First vector
        b: Coefficient applied to v
        v: Second vector

    Raises:
        CapabilityError: If the scalar type is not Numerical
        ConversionError: If the vectors differ in type, or a coefficient
            does not convert into their type

    Examples:
        >>> lin_com(2, [1, 2], 1, [2, 9, 1])
        [4, 13]
    """
    check_vector(u, 'u')
    check_vector(v, 'v')
    t = shared_type(u, v, 'lin_com')
    check_numerical(t)
    check_value_convertible(a, t, 'a')
    check_value_convertible(b, t, 'b')
    ca = convert(a, t)
    cb = convert(b, t)

    if is_native_array(u) and is_native_array(v) and u.dtype == v.dtype:
        n = min(len(u), len(v))
        return ca * u[:n] + cb * v[:n]

    return new_like(
        u,
        (ca * x + cb * y for x, y in zip(converted(u, t), converted(v, t))),
    )


def mlt_add(u: Vector, a: Any, v: Vector) -> None:
    """
    Scaled accumulation in place: u[i] += a * v[i].

    Works on the first min(len(u), len(v)) elements of u; the rest of u
    is left untouched. a and the elements of v may be of other scalar
    types than u, provided they convert into u's type.

    Raises:
        ValidationError: If u does not support item assignment
        CapabilityError: If u's scalar type is not Numerical
        ConversionError: If a or v's type does not convert into u's type

    Examples:
        >>> u = [1, 2]
        >>> mlt_add(u, 2, [2, 9, 1])
        >>> u
        [5, 20]
    """
    check_mutable_vector(u, 'u')
    check_vector(v, 'v')
    t = scalar_type_of(u, default=None)
    if t is None:
        t = scalar_type_of(v)
    check_numerical(t)
    check_value_convertible(a, t, 'a')
    check_convertible(scalar_type_of(v, default=t), t)
    ca = convert(a, t)

    n = min(len(u), len(v))
    if is_native_array(u) and is_native_array(v):
        u[:n] += ca * v[:n].astype(u.dtype, copy=False)
        return

    for i, y in zip(range(n), converted(v, t)):
        u[i] += ca * y


def scale(u: Vector, a: Any) -> None:
    """
    Multiply every element of u by a, in place.

    u may be a whole vector or a mutable view over a subset of elements,
    such as FullMatrix.row(i) or FullMatrix.column(j).

    Raises:
        ValidationError: If u does not support item assignment
        CapabilityError: If u's scalar type is not Field-like
        ConversionError: If a does not convert into u's type
    """
    check_mutable_vector(u, 'u')
    t = scalar_type_of(u, default=type(a))
    check_field_like(t)
    check_value_convertible(a, t, 'a')
    ca = convert(a, t)

    if is_native_array(u):
        u *= ca
        return

    for i in range(len(u)):
        u[i] *= ca


def zero(u: Vector) -> None:
    """
    Set every element of u to zero, in place.

    Equivalent to scale(u, zero_of(T)) for u's scalar type T.
    """
    check_mutable_vector(u, 'u')
    t = scalar_type_of(u)
    check_field_like(t)
    scale(u, zero_of(t))


def copy(u: Vector) -> Vector:
    """
    Element-wise copy of u with independent storage.

    Mutating the copy never affects u. Arrays are copied as arrays of the
    same dtype; other sequences become lists.
    """
    check_vector(u, 'u')
    if is_native_array(u):
        return u.copy()
    return new_like(u, (clone(x) for x in u))


def filtered_copy(u: Vector, predicate: Callable[[Any], bool]) -> Vector:
    """
    Copy of the elements of u for which predicate holds.

    Relative order is preserved. Arrays keep their dtype, including when
    no element passes.

    Examples:
        >>> filtered_copy([3, -1, 4, -1, 5], lambda x: x > 0)
        [3, 4, 5]
    """
    check_vector(u, 'u')
    check_predicate(predicate, 'predicate')
    if is_native_array(u):
        mask = np.fromiter((bool(predicate(x)) for x in u), dtype=bool, count=len(u))
        return u[mask]
    return new_like(u, (clone(x) for x in u if predicate(x)))
