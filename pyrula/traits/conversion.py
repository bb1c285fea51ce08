"""
Conversion contract between scalar types.

Mixed-type operations (dot_in, mlt_add, scaling by a coefficient of a
different type) convert values into a target scalar type. A conversion is
permitted only when it is lossless or explicitly accepted:

    - identity is always permitted
    - between primitive numeric types, numpy's 'safe' casting table
      decides (int32 -> float64 yes; float64 -> float32 no; complex ->
      float no)
    - a single Python int, float or complex value (a coefficient or a
      matrix element) is accepted into a numpy type of a compatible kind
      when it fits, following numpy's weak-scalar promotion; vectors of
      Python scalars follow the casting table like any other type
    - exact types accept integers (int -> Fraction, int -> Decimal)
    - Fraction and Decimal are accepted into double precision floats,
      which is what norm() needs
    - anything registered with register_conversion()

Any other pair raises ConversionError before arithmetic starts. There is
no runtime fallback cast.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np

from pyrula.core.exceptions import ConversionError
from pyrula.traits.zero import PRIMITIVE_TYPES

_ACCEPTED: dict[tuple[type, type], Callable[[Any], Any] | None] = {
    (int, Fraction): None,
    (int, Decimal): None,
    (Fraction, float): None,
    (Decimal, float): None,
    (Fraction, np.float64): None,
    (Decimal, np.float64): None,
}


def register_conversion(
    source: type,
    target: type,
    converter: Callable[[Any], Any] | None = None,
) -> None:
    """
    Declare that values of source convert acceptably into target.

    Args:
        source: Source scalar type
        target: Target scalar type
        converter: Function mapping a source value to a target value.
            Defaults to calling target(value).
    """
    _ACCEPTED[(source, target)] = converter


# Python scalars are "weak" (NEP 50): a coefficient or element written into
# a numpy type adopts that type, as long as the kind fits and the value is
# representable. This applies to individual values only; vector element
# types are matched by is_convertible().
_WEAK_KINDS = {
    int: (np.integer, np.floating, np.complexfloating),
    float: (np.floating, np.complexfloating),
    complex: (np.complexfloating,),
}


def _numpy_safe(source: type, target: type) -> bool:
    if source not in PRIMITIVE_TYPES or target not in PRIMITIVE_TYPES:
        return False
    return bool(np.can_cast(np.dtype(source), np.dtype(target), casting='safe'))


def _weak_python_scalar(source: type, target: type) -> bool:
    kinds = _WEAK_KINDS.get(source)
    return kinds is not None and target in PRIMITIVE_TYPES and issubclass(target, kinds)


def _representable(value: Any, target: type) -> bool:
    if issubclass(target, np.integer):
        info = np.iinfo(target)
        return info.min <= value <= info.max
    limit = float(np.finfo(target).max)
    parts = (value.real, value.imag) if isinstance(value, complex) else (value,)
    return all(
        isinstance(p, float) and not math.isfinite(p) or abs(p) <= limit
        for p in parts
    )


def is_convertible(source: type, target: type) -> bool:
    """
    Check whether values of source may be converted into target.

    This is a type-level verdict: it holds for every value of source.
    Python scalars are not widened or narrowed to match numpy types here;
    use is_value_convertible() for a single coefficient.
    """
    if source is target:
        return True
    if (source, target) in _ACCEPTED:
        return True
    return _numpy_safe(source, target)


def is_value_convertible(value: Any, target: type) -> bool:
    """
    Check whether a single value may be converted into target.

    Accepts everything is_convertible() accepts for type(value), plus
    Python int, float and complex values that fit a numpy type of a
    compatible kind (2 into int8, 0.5 into float32, but not 300 into int8).
    """
    source = type(value)
    if is_convertible(source, target):
        return True
    return _weak_python_scalar(source, target) and _representable(value, target)


def check_convertible(source: type, target: type) -> None:
    """
    Verify values of source may be converted into target.

    Raises:
        ConversionError: If the pair has no accepted conversion
    """
    if not is_convertible(source, target):
        raise ConversionError(
            f"no lossless or accepted conversion from "
            f"{getattr(source, '__name__', source)!s} to "
            f"{getattr(target, '__name__', target)!s}",
            source_type=source,
            target_type=target,
        )


def check_value_convertible(value: Any, target: type, name: str) -> None:
    """
    Verify a single value may be converted into target.

    Raises:
        ConversionError: If the value's type has no accepted conversion,
            or the value does not fit the target type
    """
    if not is_value_convertible(value, target):
        source = type(value)
        raise ConversionError(
            f"{name}: cannot convert {value!r} "
            f"({getattr(source, '__name__', source)!s}) to "
            f"{getattr(target, '__name__', target)!s}",
            source_type=source,
            target_type=target,
        )


def convert(value: Any, target: type) -> Any:
    """
    Convert a single value into the target scalar type.

    The caller is expected to have checked the pair with
    check_convertible(); this function does not re-validate.
    """
    source = type(value)
    if source is target:
        return value
    converter = _ACCEPTED.get((source, target))
    if converter is not None:
        return converter(value)
    return target(value)
