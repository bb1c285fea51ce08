"""
Numerical and Field-like capability checks.

A scalar type is Numerical if it has a zero, addition and multiplication
that stay within the type, compound addition that keeps the type, and
values that copy.copy() reproduces as the same type. It is Field-like
if, in addition, compound multiplication keeps the type.

Python cannot reject a type at build time, so every generic operation
checks its scalar type on entry, before touching any data. Verdicts are
computed by probing the type's zero value once and cached per type.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from functools import lru_cache
from typing import Any

import numpy as np

from pyrula.core.capabilities import (
    CAPABILITY_ADD,
    CAPABILITY_ADD_ASSIGN,
    CAPABILITY_COPY,
    CAPABILITY_MUL,
    CAPABILITY_MUL_ASSIGN,
    CAPABILITY_ZERO,
    FIELD_CAPABILITIES,
    NUMERICAL_CAPABILITIES,
)
from pyrula.core.exceptions import CapabilityError
from pyrula.traits.zero import zero_of


def _closed(result: Any, scalar_type: type) -> bool:
    return type(result) is scalar_type


@lru_cache(maxsize=None)
def numerical_capabilities(scalar_type: type) -> frozenset[str]:
    """
    Probe which arithmetic capabilities a scalar type provides.

    Each operator is applied to the type's zero value; a capability is
    granted only if the operation succeeds and the result keeps the type.

    Args:
        scalar_type: Type to probe

    Returns:
        frozenset of capability names from pyrula.core.capabilities
    """
    try:
        z = zero_of(scalar_type)
    except CapabilityError:
        return frozenset()

    found = {CAPABILITY_ZERO}
    probes = (
        (CAPABILITY_ADD, lambda a, b: a + b),
        (CAPABILITY_MUL, lambda a, b: a * b),
    )
    for name, op in probes:
        try:
            if _closed(op(z, z), scalar_type):
                found.add(name)
        except (TypeError, ArithmeticError):
            pass

    try:
        w = copy.copy(z)
        w += z
        if _closed(w, scalar_type):
            found.add(CAPABILITY_ADD_ASSIGN)
    except (TypeError, ArithmeticError):
        pass

    try:
        w = copy.copy(z)
        w *= z
        if _closed(w, scalar_type):
            found.add(CAPABILITY_MUL_ASSIGN)
    except (TypeError, ArithmeticError):
        pass

    try:
        if _closed(copy.copy(z), scalar_type):
            found.add(CAPABILITY_COPY)
    except (TypeError, copy.Error):
        pass

    return frozenset(found)


def is_numerical(scalar_type: type) -> bool:
    """Check whether a scalar type satisfies the Numerical contract."""
    return NUMERICAL_CAPABILITIES <= numerical_capabilities(scalar_type)


def is_field_like(scalar_type: type) -> bool:
    """Check whether a scalar type satisfies the Field-like contract."""
    return FIELD_CAPABILITIES <= numerical_capabilities(scalar_type)


def _require(scalar_type: type, required: frozenset[str], contract: str) -> None:
    missing = required - numerical_capabilities(scalar_type)
    if missing:
        ordered = tuple(sorted(missing))
        raise CapabilityError(
            f"{getattr(scalar_type, '__name__', scalar_type)!s} is not {contract}: "
            f"missing {', '.join(ordered)}",
            scalar_type=scalar_type,
            missing=ordered,
        )


def check_numerical(scalar_type: type) -> None:
    """
    Verify a scalar type satisfies the Numerical contract.

    Raises:
        CapabilityError: Listing the missing capabilities
    """
    _require(scalar_type, NUMERICAL_CAPABILITIES, 'Numerical')


def check_field_like(scalar_type: type) -> None:
    """
    Verify a scalar type satisfies the Field-like contract.

    Raises:
        CapabilityError: Listing the missing capabilities
    """
    _require(scalar_type, FIELD_CAPABILITIES, 'Field-like')


def scalar_type_of(
    u: Sequence[Any] | np.ndarray,
    default: type | None = int,
) -> type | None:
    """
    Determine the scalar type of a vector.

    Numeric numpy arrays report their dtype's scalar type. Object arrays
    and plain sequences must hold elements of a single type.

    Args:
        u: Vector
        default: Type reported for an empty sequence (may be None)

    Returns:
        The element type, or default for an empty sequence

    Raises:
        CapabilityError: If the elements are of more than one type
    """
    if isinstance(u, np.ndarray) and u.dtype != object:
        return u.dtype.type

    types = {type(x) for x in u}
    if not types:
        return default
    if len(types) > 1:
        names = ', '.join(sorted(t.__name__ for t in types))
        raise CapabilityError(
            f"vector mixes scalar types ({names}); convert to one type first",
            scalar_type=None,
        )
    return types.pop()
