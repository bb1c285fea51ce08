"""
Capability traits module.

Defines what "numeric-like" and "field-like" mean for a scalar type, and
which scalar types convert into which.

Public API:
    zero_of(t)                  - Additive identity of a scalar type
    register_zero(t, value)     - Teach PyRula the zero of a new type
    is_numerical(t)             - Numerical contract check (bool)
    is_field_like(t)            - Field-like contract check (bool)
    check_numerical(t)          - Raise CapabilityError if not Numerical
    check_field_like(t)         - Raise CapabilityError if not Field-like
    scalar_type_of(u)           - Element type of a vector
    is_convertible(src, dst)    - Conversion contract check (bool)
    check_convertible(src, dst) - Raise ConversionError if not convertible
    is_value_convertible(x, dst) - Conversion check for a single value
    check_value_convertible(...) - Raise ConversionError for a single value
    convert(value, dst)         - Apply a permitted conversion
    register_conversion(...)    - Declare a new accepted conversion
"""

from pyrula.traits.zero import zero_of, has_zero, register_zero
from pyrula.traits.numerical import (
    numerical_capabilities,
    is_numerical,
    is_field_like,
    check_numerical,
    check_field_like,
    scalar_type_of,
)
from pyrula.traits.conversion import (
    is_convertible,
    check_convertible,
    is_value_convertible,
    check_value_convertible,
    convert,
    register_conversion,
)

__all__ = [
    "zero_of",
    "has_zero",
    "register_zero",
    "numerical_capabilities",
    "is_numerical",
    "is_field_like",
    "check_numerical",
    "check_field_like",
    "scalar_type_of",
    "is_convertible",
    "check_convertible",
    "is_value_convertible",
    "check_value_convertible",
    "convert",
    "register_conversion",
]
