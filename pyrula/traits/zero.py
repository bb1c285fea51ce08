"""
Additive identities for scalar types.

Every primitive numeric representation gets its zero registered
individually: 0 for integers, 0.0 for floating point, 0j for complex.
Exact types (Fraction, Decimal) are registered as well. User-defined
scalar classes either expose a zero() classmethod (SupportsZero) or are
registered with register_zero().

bool is deliberately absent: True + True is 2, so booleans do not stay
closed under addition.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np

from pyrula.core.capabilities import CAPABILITY_ZERO
from pyrula.core.exceptions import CapabilityError

_ZEROS: dict[type, Any] = {
    int: 0,
    float: 0.0,
    complex: 0j,
    np.int8: np.int8(0),
    np.int16: np.int16(0),
    np.int32: np.int32(0),
    np.int64: np.int64(0),
    np.uint8: np.uint8(0),
    np.uint16: np.uint16(0),
    np.uint32: np.uint32(0),
    np.uint64: np.uint64(0),
    np.float32: np.float32(0.0),
    np.float64: np.float64(0.0),
    np.complex64: np.complex64(0j),
    np.complex128: np.complex128(0j),
    Fraction: Fraction(0),
    Decimal: Decimal(0),
}

# numpy types registered above, i.e. the ones with a native dtype
PRIMITIVE_TYPES = frozenset(
    t for t in _ZEROS if isinstance(t, type) and issubclass(t, (np.generic, int, float, complex))
)


def register_zero(scalar_type: type, value: Any) -> None:
    """
    Register the additive identity of a scalar type.

    Args:
        scalar_type: Type to register
        value: Its zero; must be an instance of scalar_type

    Raises:
        TypeError: If value is not an instance of scalar_type
    """
    if type(value) is not scalar_type:
        raise TypeError(
            f"zero for {scalar_type.__name__} must be a {scalar_type.__name__}, "
            f"got {type(value).__name__}"
        )
    _ZEROS[scalar_type] = value
    # Verdicts cached for this type are stale now
    from pyrula.traits.numerical import numerical_capabilities
    numerical_capabilities.cache_clear()


def has_zero(scalar_type: type) -> bool:
    """Check whether zero_of(scalar_type) would succeed."""
    if scalar_type in _ZEROS:
        return True
    factory = getattr(scalar_type, 'zero', None)
    return callable(factory)


def zero_of(scalar_type: type) -> Any:
    """
    Return the additive identity of a scalar type.

    Args:
        scalar_type: Registered primitive, or a class with a zero() classmethod

    Returns:
        The zero value, an instance of scalar_type

    Raises:
        CapabilityError: If the type has no known zero, or its zero()
            returns a value of a different type
    """
    try:
        return _ZEROS[scalar_type]
    except (KeyError, TypeError):
        pass

    factory = getattr(scalar_type, 'zero', None)
    if not callable(factory):
        raise CapabilityError(
            f"{getattr(scalar_type, '__name__', scalar_type)!s} has no additive identity: "
            f"register one with register_zero() or define a zero() classmethod",
            scalar_type=scalar_type,
            missing=(CAPABILITY_ZERO,),
        )
    value = factory()
    if type(value) is not scalar_type:
        raise CapabilityError(
            f"{scalar_type.__name__}.zero() returned {type(value).__name__}, "
            f"expected {scalar_type.__name__}",
            scalar_type=scalar_type,
            missing=(CAPABILITY_ZERO,),
        )
    return value
